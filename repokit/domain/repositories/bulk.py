"""Bulk (eager) repository interface."""

from __future__ import annotations

from repokit.domain.models.paging import Sort

from .base import ID, T
from .paging import PagingAndSortingRepository


class ListRepository(PagingAndSortingRepository[T, ID]):
    """Adds fully materialised retrieval for callers that need a list.

    The default implementation drains the lazy iterators; stores with a
    cheaper bulk path may override it.
    """

    async def find_all_eager(self, sort: Sort | None = None) -> list[T]:
        """Return every entity as a reusable list, ordered when sort is given."""
        if sort is not None and sort.is_sorted:
            return [entity async for entity in self.find_all_sorted(sort)]
        return [entity async for entity in self.find_all()]
