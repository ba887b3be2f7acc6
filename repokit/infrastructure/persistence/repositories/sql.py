"""SQLAlchemy implementation of ListRepository.

Works for flat mappings where every domain field has a same-named column on
the ORM class.  Subclasses with nested aggregates override _to_domain and
_to_orm, the same way the hand-written repositories map rows.

Every write runs inside a SAVEPOINT so a failed or cancelled call leaves the
enclosing transaction exactly as it found it.  Driver errors are re-raised
as domain error kinds with the original exception chained.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Hashable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, func, inspect, select
from sqlalchemy import exc as sa_exc
from sqlalchemy.ext.asyncio import AsyncSession

from repokit.domain.errors import (
    ConstraintViolationError,
    InvalidArgumentError,
    StoreUnavailableError,
)
from repokit.domain.models.paging import Page, PageRequest, Sort
from repokit.domain.repositories.bulk import ListRepository
from repokit.infrastructure.database import Base

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
K = TypeVar("K", bound=Hashable)

_UNAVAILABLE = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.TimeoutError,  # connection pool exhausted
    TimeoutError,
    OSError,
)


class SqlRepository(ListRepository[M, K]):
    def __init__(
        self,
        session: AsyncSession,
        orm_model: type[Base],
        model: type[M],
        key: str,
    ) -> None:
        self._columns = frozenset(attr.key for attr in inspect(orm_model).column_attrs)
        if key not in self._columns:
            raise InvalidArgumentError(f"{orm_model.__name__} has no column {key!r}")
        self._session = session
        self._orm_model = orm_model
        self._model = model
        self._key = key

    def _to_domain(self, row: Any) -> M:
        return self._model.model_validate(row, from_attributes=True)

    def _to_orm(self, entity: M) -> Any:
        return self._orm_model(**entity.model_dump(include=set(self._columns)))

    def _check_sort(self, sort: Sort) -> None:
        unknown = [f for f in sort.fields() if f not in self._columns]
        if unknown:
            raise InvalidArgumentError(
                f"cannot sort {self._orm_model.__name__} by unknown column(s): "
                f"{', '.join(unknown)}"
            )

    def _ordered(self, stmt: Select[Any], sort: Sort) -> Select[Any]:
        for order in sort.orders:
            column = getattr(self._orm_model, order.field)
            if order.ignore_case:
                column = func.lower(column)
            stmt = stmt.order_by(column.desc() if order.direction.is_descending else column.asc())
        # Key last so OFFSET/LIMIT pages never overlap on tied rows.
        if self._key not in sort.fields():
            stmt = stmt.order_by(getattr(self._orm_model, self._key).asc())
        return stmt

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        table = self._orm_model.__tablename__
        try:
            yield
        except sa_exc.IntegrityError as exc:
            logger.warning("%s on %s rejected by constraint: %s", operation, table, exc.orig)
            raise ConstraintViolationError(
                f"{operation} on {table} rejected by a store constraint"
            ) from exc
        except _UNAVAILABLE as exc:
            logger.warning("%s on %s failed, store unavailable: %s", operation, table, exc)
            raise StoreUnavailableError(f"store unavailable during {operation} on {table}") from exc
        except sa_exc.DBAPIError as exc:
            if not exc.connection_invalidated:
                raise
            logger.warning("%s on %s lost its connection: %s", operation, table, exc)
            raise StoreUnavailableError(f"store unavailable during {operation} on {table}") from exc

    async def _stream(self, stmt: Select[Any], operation: str) -> AsyncIterator[M]:
        with self._translate_errors(operation):
            result = await self._session.stream_scalars(stmt)
            try:
                async for row in result:
                    yield self._to_domain(row)
            finally:
                await result.close()

    async def save(self, entity: M) -> None:
        with self._translate_errors("save"):
            async with self._session.begin_nested():
                await self._session.merge(self._to_orm(entity))
        logger.debug("saved %s %r", self._orm_model.__tablename__, getattr(entity, self._key))

    async def find_by_key(self, key: K) -> M | None:
        with self._translate_errors("find_by_key"):
            row = await self._session.get(self._orm_model, key)
        return self._to_domain(row) if row is not None else None

    def find_all(self) -> AsyncIterator[M]:
        return self._stream(select(self._orm_model), "find_all")

    async def count(self) -> int:
        with self._translate_errors("count"):
            total = await self._session.scalar(select(func.count()).select_from(self._orm_model))
        return int(total or 0)

    async def delete_by_key(self, key: K) -> None:
        with self._translate_errors("delete"):
            async with self._session.begin_nested():
                row = await self._session.get(self._orm_model, key)
                if row is None:
                    return
                await self._session.delete(row)
        logger.debug("deleted %s %r", self._orm_model.__tablename__, key)

    async def delete(self, entity: M) -> None:
        await self.delete_by_key(getattr(entity, self._key))

    def find_all_sorted(self, sort: Sort) -> AsyncIterator[M]:
        self._check_sort(sort)
        return self._stream(self._ordered(select(self._orm_model), sort), "find_all_sorted")

    async def find_page(self, page_request: PageRequest) -> Page[M]:
        self._check_sort(page_request.sort)
        with self._translate_errors("find_page"):
            total = int(
                await self._session.scalar(select(func.count()).select_from(self._orm_model)) or 0
            )
            if page_request.offset >= total:
                rows = []
            else:
                stmt = (
                    self._ordered(select(self._orm_model), page_request.sort)
                    .offset(page_request.offset)
                    .limit(page_request.size)
                )
                rows = (await self._session.scalars(stmt)).all()
        return Page.of([self._to_domain(r) for r in rows], page_request, total_elements=total)

    async def find_all_eager(self, sort: Sort | None = None) -> list[M]:
        sort = sort or Sort.unsorted()
        self._check_sort(sort)
        with self._translate_errors("find_all_eager"):
            rows = (await self._session.scalars(self._ordered(select(self._orm_model), sort))).all()
        return [self._to_domain(r) for r in rows]
