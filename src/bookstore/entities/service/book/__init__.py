"""Entity package: Book."""

from .entity import MAX_STORABLE_ID, U64_MAX, Book, BookPayload, utc_now
from .repository import BookRepository
from .table import BookTable

__all__ = [
    "Book",
    "BookPayload",
    "BookRepository",
    "BookTable",
    "MAX_STORABLE_ID",
    "U64_MAX",
    "utc_now",
]
