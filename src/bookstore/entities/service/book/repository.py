"""Book repository: ordered map from book id to book record."""

from loguru import logger
from sqlmodel import Session

from src.bookstore.entities.service.book.entity import MAX_STORABLE_ID, Book
from src.bookstore.entities.service.book.table import BookTable


class BookRepository:
    """Data-access layer for books.

    The repository does not distinguish inserts from overwrites; callers
    decide whether an id is expected to exist.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _row(self, book_id: int) -> BookTable | None:
        if not 0 <= book_id <= MAX_STORABLE_ID:
            return None
        return self._session.get(BookTable, book_id)

    def get(self, book_id: int) -> Book | None:
        row = self._row(book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def put(self, book: Book) -> Book:
        """Insert ``book`` under ``book.id``, overwriting any existing row."""
        row = self._row(book.id)
        if row is None:
            row = BookTable(**book.model_dump())
            self._session.add(row)
        else:
            row.sqlmodel_update(book.model_dump(exclude={"id"}))
        self._session.flush()
        logger.debug("Stored book row {}", book.id)
        return book

    def remove(self, book_id: int) -> Book | None:
        row = self._row(book_id)
        if row is None:
            return None
        removed = Book.model_validate(row, from_attributes=True)
        self._session.delete(row)
        self._session.flush()
        return removed
