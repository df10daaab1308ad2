"""Shared pytest fixtures for the book store tests."""

from .core import *  # noqa: F401,F403
