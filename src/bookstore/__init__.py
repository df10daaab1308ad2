"""Persistent book record store.

This package contains the book entity, its identifier allocator and record
store, the operation handlers that compose them, and the HTTP and CLI
surfaces that expose those operations.
"""

__version__ = "0.1.0"
