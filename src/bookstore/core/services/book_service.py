"""Book operations: get, add, update and delete.

Each operation returns either a ``Book`` or one of the error variants from
``src.bookstore.core.errors``. Validation of title/author always happens before
any lookup or allocation, so a rejected payload leaves the store untouched.
"""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from src.bookstore.core.errors import EMPTY_FIELDS_MSG, InvalidInput, NotFound
from src.bookstore.core.services.book_store import BookStore
from src.bookstore.entities.service.book import Book, BookPayload, utc_now

BookResult = Book | NotFound | InvalidInput


class BookService:
    """Operation handlers composing the id allocator and the book repository."""

    def __init__(
        self,
        store: BookStore,
        clock: Callable[[], datetime] = utc_now,
        max_record_bytes: int = 1024,
    ) -> None:
        self._store = store
        self._clock = clock
        self._max_record_bytes = max_record_bytes

    def _check_size(self, book: Book) -> None:
        size = book.encoded_size()
        if size > self._max_record_bytes:
            logger.bind(book_id=book.id, size=size, limit=self._max_record_bytes).warning(
                "book.oversize"
            )

    def _invalid(self, operation: str) -> InvalidInput:
        logger.bind(operation=operation).info("book.invalid_input")
        return InvalidInput(msg=EMPTY_FIELDS_MSG)

    def _not_found(self, operation: str, book_id: int, msg: str) -> NotFound:
        logger.bind(operation=operation, book_id=book_id).info("book.not_found")
        return NotFound(msg=msg)

    def get_book(self, book_id: int) -> Book | NotFound:
        with self._store.transaction() as tx:
            book = tx.books.get(book_id)
        if book is None:
            return self._not_found(
                "get_book", book_id, f"a book with id={book_id} not found"
            )
        return book

    def add_book(self, payload: BookPayload) -> Book | InvalidInput:
        if payload.has_empty_fields():
            return self._invalid("add_book")

        with self._store.transaction() as tx:
            book = Book(
                id=tx.allocator.next(),
                title=payload.title,
                author=payload.author,
                created_at=self._clock(),
                updated_at=None,
            )
            tx.books.put(book)

        self._check_size(book)
        logger.bind(book_id=book.id).info("book.added")
        return book

    def update_book(self, book_id: int, payload: BookPayload) -> BookResult:
        if payload.has_empty_fields():
            return self._invalid("update_book")

        with self._store.transaction() as tx:
            existing = tx.books.get(book_id)
            if existing is None:
                book = None
            else:
                book = Book(
                    id=existing.id,
                    title=payload.title,
                    author=payload.author,
                    created_at=existing.created_at,
                    updated_at=self._clock(),
                )
                tx.books.put(book)

        if book is None:
            return self._not_found(
                "update_book",
                book_id,
                f"couldn't update a book with id={book_id}. book not found",
            )

        self._check_size(book)
        logger.bind(book_id=book.id).info("book.updated")
        return book

    def delete_book(self, book_id: int) -> Book | NotFound:
        with self._store.transaction() as tx:
            removed = tx.books.remove(book_id)

        if removed is None:
            return self._not_found(
                "delete_book",
                book_id,
                f"couldn't delete a book with id={book_id}. book not found.",
            )

        logger.bind(book_id=book_id).info("book.deleted")
        return removed
