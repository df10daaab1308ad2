"""Entity package: id counter."""

from .allocator import BOOK_COUNTER, IdAllocator
from .table import IdCounterTable

__all__ = ["BOOK_COUNTER", "IdAllocator", "IdCounterTable"]
