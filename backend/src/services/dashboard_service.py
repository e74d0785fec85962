"""Builds the dashboard view from the current store state."""
from sqlalchemy.ext.asyncio import AsyncSession

from schemas.dashboard import DashboardCategory, DashboardLink, DashboardView
from services.category_service import list_categories
from services.link_service import list_links


def _sort_key(name: str) -> str:
    return name.casefold()


async def build_dashboard(db: AsyncSession) -> DashboardView:
    """
    Load all categories and links and join them in memory.

    Each link is attached to its category through an id -> category index;
    links whose category is gone are dropped. Categories and the links within
    each category are sorted by name, ignoring case. Categories without links
    are kept with an empty list.

    Nothing is cached: every call reads the store.

    Raises:
        StoreError: Either query failed or timed out.
    """
    categories: list[DashboardCategory] = []
    by_id: dict[int, DashboardCategory] = {}
    for category_id, name in await list_categories(db):
        category = DashboardCategory(id=category_id, name=name, links=[])
        categories.append(category)
        by_id[category_id] = category

    for link_id, name, url, category_id in await list_links(db):
        parent = by_id.get(category_id)
        if parent is None:
            continue
        parent.links.append(
            DashboardLink(id=link_id, category_id=category_id, name=name, url=url),
        )

    categories.sort(key=lambda c: _sort_key(c.name))
    for category in categories:
        category.links.sort(key=lambda link: _sort_key(link.name))

    return DashboardView(categories=categories)
