"""Store context owning the id allocator and the book repository."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from src.bookstore.core.services.database.db_session import DbSessionService
from src.bookstore.entities.core.id_counter import BOOK_COUNTER, IdAllocator
from src.bookstore.entities.service.book import BookRepository


@dataclass
class StoreSession:
    """Allocator and repository bound to one transaction."""

    allocator: IdAllocator
    books: BookRepository


class BookStore:
    """Explicitly constructed owner of the book store state.

    Every operation enters ``transaction()``, which holds one lock across the
    allocator and the repository and commits (or rolls back) a single database
    transaction. Two stores built on separate databases share nothing.
    """

    def __init__(self, database: DbSessionService, counter_name: str = BOOK_COUNTER):
        self._database = database
        self._counter_name = counter_name
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """Create the persisted regions if they do not exist yet."""
        self._database.create_all()

    @contextmanager
    def transaction(self) -> Iterator[StoreSession]:
        with self._lock, self._database.session_scope() as session:
            yield StoreSession(
                allocator=IdAllocator(session, self._counter_name),
                books=BookRepository(session),
            )
