from dataclasses import dataclass

from src.bookstore.core.services import BookService, BookStore, DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    book_store: BookStore
    book_service: BookService
