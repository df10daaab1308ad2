"""Entities organized by business concept.

Each entity package keeps its domain model, table model and data access
together:
- core.id_counter: persisted counter and the id allocator built on it
- service.book: the book record, its table and repository
"""

from .core.id_counter import IdAllocator, IdCounterTable
from .service.book import Book, BookPayload, BookRepository, BookTable

__all__ = [
    "Book",
    "BookPayload",
    "BookRepository",
    "BookTable",
    "IdAllocator",
    "IdCounterTable",
]
