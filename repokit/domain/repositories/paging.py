"""Sortable / pageable repository interface."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import AsyncIterator

from repokit.domain.models.paging import Page, PageRequest, Sort

from .base import ID, CrudRepository, T


class PagingAndSortingRepository(CrudRepository[T, ID]):
    """Adds ordered and page-sliced retrieval to CrudRepository.

    A Sort naming a field the entity does not have raises
    InvalidArgumentError before the store is touched.
    """

    @abstractmethod
    def find_all_sorted(self, sort: Sort) -> AsyncIterator[T]:
        """Yield the find_all() candidates ordered by sort.

        An unsorted Sort behaves exactly like find_all().
        """

    @abstractmethod
    async def find_page(self, page_request: PageRequest) -> Page[T]:
        """Return one page of the candidates ordered by page_request.sort.

        total_elements counts the same candidate set that was sliced.  A page
        index past the last page yields empty content with has_next False.
        """
