"""Tests for BookRepository using an in-memory SQLite database."""

from datetime import UTC, datetime

import pytest
from sqlmodel import Session

from src.bookstore.core.services import DbSessionService
from src.bookstore.entities.service.book import (
    MAX_STORABLE_ID,
    U64_MAX,
    Book,
    BookRepository,
    BookTable,
)

CREATED = datetime(2024, 1, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def repo(session: Session) -> BookRepository:
    return BookRepository(session)


def _book(book_id: int = 0, **overrides) -> Book:
    values = {
        "id": book_id,
        "title": "Dune",
        "author": "Herbert",
        "created_at": CREATED,
    }
    values.update(overrides)
    return Book(**values)


class TestBookRepository:
    """Test point insert, lookup and removal."""

    def test_get_missing_returns_none(self, repo: BookRepository):
        assert repo.get(42) is None

    def test_put_then_get(self, repo: BookRepository):
        book = _book(3)
        assert repo.put(book) == book
        assert repo.get(3) == book

    def test_get_returns_domain_entity(self, repo: BookRepository):
        repo.put(_book())
        result = repo.get(0)
        assert isinstance(result, Book)
        assert not isinstance(result, BookTable)

    def test_put_overwrites_existing_key(self, repo: BookRepository):
        repo.put(_book(1))
        updated = _book(
            1,
            title="Dune (rev)",
            updated_at=datetime(2024, 2, 1, tzinfo=UTC),
        )
        repo.put(updated)
        assert repo.get(1) == updated

    def test_record_is_stored_under_its_id(self, repo: BookRepository, session: Session):
        repo.put(_book(7))
        row = session.get(BookTable, 7)
        assert row is not None
        assert row.id == 7

    def test_remove_returns_removed_record(self, repo: BookRepository):
        book = _book(5)
        repo.put(book)
        assert repo.remove(5) == book
        assert repo.get(5) is None

    def test_remove_missing_returns_none(self, repo: BookRepository):
        assert repo.remove(5) is None

    def test_ids_beyond_backend_range_are_absent(self, repo: BookRepository):
        assert repo.get(MAX_STORABLE_ID + 1) is None
        assert repo.get(U64_MAX) is None
        assert repo.remove(U64_MAX) is None

    def test_timestamps_survive_commit(self, database_service: DbSessionService):
        book = _book(updated_at=datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=UTC))
        with database_service.session_scope() as db:
            BookRepository(db).put(book)

        with database_service.session_scope() as db:
            assert BookRepository(db).get(book.id) == book
