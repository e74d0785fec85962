"""View models passed from the dashboard aggregator to the template."""
from pydantic import BaseModel


class DashboardLink(BaseModel):
    """A link as displayed inside its category."""

    id: int
    category_id: int
    name: str
    url: str


class DashboardCategory(BaseModel):
    """A category with its links, sorted by name."""

    id: int
    name: str
    links: list[DashboardLink] = []


class DashboardView(BaseModel):
    """The whole dashboard: every category, sorted by name."""

    categories: list[DashboardCategory] = []
