"""Category model - a named group owning zero or more links."""
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.link import Link


def category_name_key(name: str) -> str:
    """Uniqueness key for a category name: stripped and Unicode case-folded."""
    return name.strip().casefold()


class Category(Base):
    """Category of links. Names are unique ignoring case."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, comment="Display name as entered")
    name_key: Mapped[str] = mapped_column(
        String,
        unique=True,
        comment="category_name_key(name); carries the case-insensitive uniqueness",
    )

    links: Mapped[list["Link"]] = relationship(
        back_populates="category",
        passive_deletes=True,
    )
