"""Persistence package.

Exports the repository implementations that satisfy the interfaces in
repokit.domain.repositories.
"""

from repokit.infrastructure.persistence.repositories import (
    InMemoryRepository,
    SqlRepository,
    sort_entities,
)

__all__ = [
    "InMemoryRepository",
    "SqlRepository",
    "sort_entities",
]
