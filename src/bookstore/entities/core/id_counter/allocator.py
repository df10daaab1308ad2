"""Monotonic identifier allocator persisted in the id_counter table."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.bookstore.core.errors import AllocatorError
from src.bookstore.entities.core.id_counter.table import IdCounterTable

BOOK_COUNTER = "book"


class IdAllocator:
    """Hands out strictly increasing ids from a persisted counter.

    The counter starts at 0 and moves forward by exactly one per ``next()``
    call. It is never decremented, so ids are not reused after a delete.
    Callers must hold the store lock and run inside a transaction.
    """

    def __init__(self, session: Session, name: str = BOOK_COUNTER) -> None:
        self._session = session
        self._name = name

    def _row(self) -> IdCounterTable:
        row = self._session.get(IdCounterTable, self._name)
        if row is None:
            row = IdCounterTable(name=self._name, value=0)
            self._session.add(row)
        return row

    def current(self) -> int:
        """The id the next call to ``next()`` will return."""
        try:
            row = self._session.get(IdCounterTable, self._name)
        except SQLAlchemyError as e:
            raise AllocatorError(f"cannot read id counter '{self._name}'") from e
        return 0 if row is None else row.value

    def next(self) -> int:
        """Advance the counter and return its previous value."""
        try:
            row = self._row()
            allocated = row.value
            row.value = allocated + 1
            self._session.flush()
        except SQLAlchemyError as e:
            raise AllocatorError(f"cannot increment id counter '{self._name}'") from e

        logger.debug("Allocated id {} from counter '{}'", allocated, self._name)
        return allocated
