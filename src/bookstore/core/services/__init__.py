"""Core services exports."""

from .book_service import BookResult, BookService
from .book_store import BookStore, StoreSession
from .database.db_session import DbSessionService

__all__ = [
    "BookResult",
    "BookService",
    "BookStore",
    "StoreSession",
    "DbSessionService",
]
