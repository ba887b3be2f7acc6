"""Dict-backed implementation of ListRepository.

Intended for tests and for wiring handlers before a real store exists.
Entities are Pydantic models; the key is one named model field.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable, Hashable, Iterable
from typing import Any, TypeVar

from pydantic import BaseModel

from repokit.domain.errors import InvalidArgumentError
from repokit.domain.models.paging import Order, Page, PageRequest, Sort
from repokit.domain.repositories.bulk import ListRepository

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
K = TypeVar("K", bound=Hashable)


def _sort_key(order: Order) -> Callable[[BaseModel], tuple[bool, Any]]:
    def key(entity: BaseModel) -> tuple[bool, Any]:
        value = getattr(entity, order.field)
        if order.ignore_case and isinstance(value, str):
            value = value.casefold()
        # None sorts after every value ascending, before every value descending.
        return (value is None, value)

    return key


def sort_entities(
    entities: Iterable[M], sort: Sort, tie_breaker: str | None = None
) -> list[M]:
    """Return entities ordered by sort.

    Applies one stable sort per order, last order first, so earlier orders
    take precedence and later ones only break ties.  tie_breaker names a
    unique field used, ascending, after every order in sort.
    """
    result = list(entities)
    if tie_breaker is not None and tie_breaker not in sort.fields():
        result.sort(key=_sort_key(Order.asc(tie_breaker)))
    for order in reversed(sort.orders):
        result.sort(key=_sort_key(order), reverse=order.direction.is_descending)
    return result


async def _iterate(entities: Iterable[M]) -> AsyncIterator[M]:
    for entity in entities:
        yield entity


class InMemoryRepository(ListRepository[M, K]):
    def __init__(self, model: type[M], key: str) -> None:
        if key not in model.model_fields:
            raise InvalidArgumentError(f"{model.__name__} has no field {key!r}")
        self._model = model
        self._key = key
        self._store: dict[K, M] = {}

    def _key_of(self, entity: M) -> K:
        return getattr(entity, self._key)

    def _check_sort(self, sort: Sort) -> None:
        unknown = [f for f in sort.fields() if f not in self._model.model_fields]
        if unknown:
            raise InvalidArgumentError(
                f"cannot sort {self._model.__name__} by unknown field(s): {', '.join(unknown)}"
            )

    async def save(self, entity: M) -> None:
        key = self._key_of(entity)
        self._store[key] = entity
        logger.debug("saved %s %r", self._model.__name__, key)

    async def find_by_key(self, key: K) -> M | None:
        return self._store.get(key)

    def find_all(self) -> AsyncIterator[M]:
        # Snapshot at call time; later writes neither skip nor repeat entities.
        return _iterate(list(self._store.values()))

    async def count(self) -> int:
        return len(self._store)

    async def delete_by_key(self, key: K) -> None:
        if self._store.pop(key, None) is not None:
            logger.debug("deleted %s %r", self._model.__name__, key)

    async def delete(self, entity: M) -> None:
        await self.delete_by_key(self._key_of(entity))

    def find_all_sorted(self, sort: Sort) -> AsyncIterator[M]:
        self._check_sort(sort)
        return _iterate(sort_entities(self._store.values(), sort, self._key))

    async def find_page(self, page_request: PageRequest) -> Page[M]:
        self._check_sort(page_request.sort)
        candidates = sort_entities(self._store.values(), page_request.sort, self._key)
        start = page_request.offset
        content = candidates[start : start + page_request.size]
        return Page.of(content, page_request, total_elements=len(candidates))

    async def find_all_eager(self, sort: Sort | None = None) -> list[M]:
        sort = sort or Sort.unsorted()
        self._check_sort(sort)
        return sort_entities(self._store.values(), sort, self._key)
