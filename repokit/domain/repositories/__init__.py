"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in repokit/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.

Callers should depend on the narrowest tier they need: a read-only paged
listing only needs PagingAndSortingRepository.
"""

from .base import CrudRepository
from .bulk import ListRepository
from .paging import PagingAndSortingRepository

__all__ = [
    "CrudRepository",
    "PagingAndSortingRepository",
    "ListRepository",
]
