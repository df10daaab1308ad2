"""Tests for the BookStore context: isolation, transactions and locking."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.bookstore.core.services import BookService, BookStore, DbSessionService
from src.bookstore.entities.service.book import BookPayload
from src.bookstore.runtime.config.config_data import DatabaseConfig
from tests.fixtures.core import TickingClock


class TestBookStore:
    """Test the store context object."""

    def test_transaction_exposes_allocator_and_repository(self, book_store: BookStore):
        with book_store.transaction() as tx:
            assert tx.allocator.current() == 0
            assert tx.books.get(0) is None

    def test_fresh_stores_are_isolated(self, book_service: BookService):
        book_service.add_book(BookPayload(title="Dune", author="Herbert"))

        other_db = DbSessionService(DatabaseConfig(url="sqlite://"))
        other_store = BookStore(other_db)
        other_store.initialize()
        try:
            other = BookService(other_store, clock=TickingClock())
            assert other.add_book(BookPayload(title="Emma", author="Austen")).id == 0
        finally:
            other_db.dispose()

    def test_exception_rolls_back_the_whole_transaction(self, book_store: BookStore):
        with pytest.raises(RuntimeError):
            with book_store.transaction() as tx:
                tx.allocator.next()
                raise RuntimeError("abort")

        with book_store.transaction() as tx:
            assert tx.allocator.current() == 0

    def test_lock_is_released_after_failure(self, book_store: BookStore):
        with pytest.raises(RuntimeError):
            with book_store.transaction():
                raise RuntimeError("abort")

        with book_store.transaction() as tx:
            assert tx.allocator.next() == 0


class TestConcurrentAdds:
    """Adds issued from several threads still get unique, consecutive ids."""

    def test_ids_are_unique_and_contiguous(self, book_service: BookService):
        def add(n: int) -> int:
            return book_service.add_book(
                BookPayload(title=f"Book {n}", author="Anon")
            ).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(add, range(40)))

        assert sorted(ids) == list(range(40))
