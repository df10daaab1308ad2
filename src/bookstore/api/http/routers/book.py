"""Book API router exposing get/add/update/delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from starlette.responses import JSONResponse

from src.bookstore.api.http.deps import get_book_service
from src.bookstore.core.errors import InvalidInput, NotFound
from src.bookstore.core.services import BookResult, BookService
from src.bookstore.entities.service.book import U64_MAX, Book, BookPayload

router = APIRouter(prefix="/books", tags=["books"])

BookId = Annotated[int, Path(ge=0, le=U64_MAX, description="Book identifier")]

_ERROR_STATUS = {
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidInput: status.HTTP_400_BAD_REQUEST,
}

_ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": NotFound},
    status.HTTP_400_BAD_REQUEST: {"model": InvalidInput},
}


def _respond(result: BookResult) -> Book | JSONResponse:
    """Return the book, or render the error variant with its status code."""
    if isinstance(result, Book):
        return result
    return JSONResponse(
        status_code=_ERROR_STATUS[type(result)], content=result.model_dump()
    )


@router.get("/{book_id}", response_model=Book, responses=_ERROR_RESPONSES)
def get_book(
    book_id: BookId,
    service: BookService = Depends(get_book_service),
):
    """Get a book by ID."""
    return _respond(service.get_book(book_id))


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def add_book(
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
):
    """Create a new book with a freshly allocated ID."""
    return _respond(service.add_book(payload))


@router.put("/{book_id}", response_model=Book, responses=_ERROR_RESPONSES)
def update_book(
    book_id: BookId,
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
):
    """Replace the title and author of an existing book."""
    return _respond(service.update_book(book_id, payload))


@router.delete("/{book_id}", response_model=Book, responses=_ERROR_RESPONSES)
def delete_book(
    book_id: BookId,
    service: BookService = Depends(get_book_service),
):
    """Delete a book and return the removed record."""
    return _respond(service.delete_book(book_id))
