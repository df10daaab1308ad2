"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.core.services import BookService, DbSessionService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return get_app_dependencies(request).database_service


def get_book_service(request: Request) -> BookService:
    """Get the book service instance."""
    return get_app_dependencies(request).book_service
