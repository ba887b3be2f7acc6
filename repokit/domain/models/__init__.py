"""Domain model package.

Framework-free value objects exchanged across the repository boundary.
Import from this package to avoid coupling callers to individual module
paths.
"""

from .paging import Direction, Order, Page, PageRequest, Sort
from .response import ApiResponse

__all__ = [
    "Direction",
    "Order",
    "Sort",
    "PageRequest",
    "Page",
    "ApiResponse",
]
