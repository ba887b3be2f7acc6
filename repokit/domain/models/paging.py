"""Sort and page value objects.

These are plain immutable messages passed by value across the repository
boundary.  They hold no reference to store state and carry no framework
dependency beyond Pydantic validation; the only setting they read is the
default page size from repokit.config.

Paging is zero-based and offset-driven: page N of size S covers candidates
[N * S, N * S + S).  A page beyond the last one is empty, never an error.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from repokit import config

T = TypeVar("T")
U = TypeVar("U")


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def is_descending(self) -> bool:
        return self is Direction.DESC


class Order(BaseModel):
    """A single (field, direction) sort criterion.

    ignore_case only affects string values; other values compare as-is.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1)
    direction: Direction = Direction.ASC
    ignore_case: bool = False

    @classmethod
    def asc(cls, field: str) -> Order:
        return cls(field=field, direction=Direction.ASC)

    @classmethod
    def desc(cls, field: str) -> Order:
        return cls(field=field, direction=Direction.DESC)

    def with_direction(self, direction: Direction) -> Order:
        return self.model_copy(update={"direction": direction})

    def ignoring_case(self) -> Order:
        return self.model_copy(update={"ignore_case": True})


class Sort(BaseModel):
    """Ordered sequence of Orders.

    The first order is the primary key; each subsequent order only breaks
    ties left by the ones before it.  An empty Sort means "unsorted".
    """

    model_config = ConfigDict(frozen=True)

    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, *criteria: str | Order) -> Sort:
        """Build a Sort from field names (ascending) and/or Order objects."""
        return cls(
            orders=tuple(c if isinstance(c, Order) else Order.asc(c) for c in criteria)
        )

    @classmethod
    def unsorted(cls) -> Sort:
        return cls()

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def ascending(self) -> Sort:
        return Sort(orders=tuple(o.with_direction(Direction.ASC) for o in self.orders))

    def descending(self) -> Sort:
        return Sort(orders=tuple(o.with_direction(Direction.DESC) for o in self.orders))

    def and_(self, other: Sort) -> Sort:
        """Return a new Sort with other's orders appended as tie-breakers."""
        return Sort(orders=self.orders + other.orders)

    def get_order_for(self, field: str) -> Order | None:
        return next((o for o in self.orders if o.field == field), None)

    def fields(self) -> list[str]:
        return [o.field for o in self.orders]


class PageRequest(BaseModel):
    """Zero-based page index, page size and optional sort.

    size falls back to settings.default_page_size, read when the request is
    built.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default_factory=lambda: config.settings.default_page_size, ge=1)
    sort: Sort = Field(default_factory=Sort.unsorted)

    @classmethod
    def of(cls, page: int, size: int | None = None, sort: Sort | None = None) -> PageRequest:
        if size is None:
            return cls(page=page, sort=sort or Sort.unsorted())
        return cls(page=page, size=size, sort=sort or Sort.unsorted())

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> PageRequest:
        return self.with_page(self.page + 1)

    def previous_or_first(self) -> PageRequest:
        return self.with_page(self.page - 1) if self.page > 0 else self

    def first(self) -> PageRequest:
        return self.with_page(0)

    def with_page(self, page: int) -> PageRequest:
        return PageRequest(page=page, size=self.size, sort=self.sort)


class Page(BaseModel, Generic[T]):
    """One slice of an ordered candidate set plus totals.

    total_elements is counted over the whole candidate set at query time; it
    is a snapshot, not a live count.
    """

    model_config = ConfigDict(frozen=True)

    content: list[T] = Field(default_factory=list)
    page: int = Field(ge=0)
    size: int = Field(ge=1)
    total_elements: int = Field(ge=0)
    sort: Sort = Field(default_factory=Sort.unsorted)

    @model_validator(mode="after")
    def _content_fits_page(self) -> Page[T]:
        if len(self.content) > self.size:
            raise ValueError(
                f"page content has {len(self.content)} elements, exceeds size {self.size}"
            )
        return self

    @classmethod
    def of(cls, content: list[T], request: PageRequest, total_elements: int) -> Page[T]:
        return cls(
            content=content,
            page=request.page,
            size=request.size,
            total_elements=total_elements,
            sort=request.sort,
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    def map(self, converter: Callable[[T], U]) -> Page[U]:
        """Return a Page with converted content and identical paging metadata."""
        return Page(
            content=[converter(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
            sort=self.sort,
        )
