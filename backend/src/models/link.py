"""Link model - a named URL bookmark belonging to one category."""
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.category import Category


class Link(Base):
    """Link model. The URL is stored verbatim."""

    __tablename__ = "links"
    __table_args__ = (
        Index("idx_links_category", "category_id"),
        Index("idx_links_name_category", "name", "category_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String)
    url: Mapped[str] = mapped_column(String)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"),
    )

    category: Mapped["Category"] = relationship(back_populates="links")
