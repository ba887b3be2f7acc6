"""Concrete repository implementations.

InMemoryRepository backs tests and local wiring; SqlRepository binds to an
AsyncSession at the application boundary (FastAPI dependency injection):

    async def handler(
        session: AsyncSession = Depends(get_session),
    ) -> ...:
        items = SqlRepository(session, OrmItem, Item, key="item_id")
        page = await items.find_page(PageRequest.of(0, 20, Sort.by("name")))
"""

from __future__ import annotations

from .memory import InMemoryRepository, sort_entities
from .sql import SqlRepository

__all__ = [
    "InMemoryRepository",
    "SqlRepository",
    "sort_entities",
]
