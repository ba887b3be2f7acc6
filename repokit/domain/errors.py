"""Repository error kinds.

Absence is never an error: lookups return None and listings return empty
sequences.  Everything below is raised to the immediate caller with the
store's own exception chained as __cause__.
"""


class RepositoryError(RuntimeError):
    """Base class for failures surfaced by a repository implementation."""


class ConstraintViolationError(RepositoryError):
    """The store rejected a write (uniqueness or referential constraint)."""


class StoreUnavailableError(RepositoryError):
    """The backing store could not be reached or timed out."""


class InvalidArgumentError(RepositoryError, ValueError):
    """A request argument was rejected before any store access took place."""
