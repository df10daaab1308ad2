"""Error variants returned by the book operations.

``NotFound`` and ``InvalidInput`` are values, not exceptions: the operation
handlers return them alongside successful results so callers can match on the
kind. ``AllocatorError`` is the one fatal condition and is raised.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class NotFound(BaseModel):
    """No book is stored under the requested id."""

    kind: Literal["NotFound"] = "NotFound"
    msg: str


class InvalidInput(BaseModel):
    """Title or author was empty."""

    kind: Literal["InvalidInput"] = "InvalidInput"
    msg: str


BookError = Annotated[NotFound | InvalidInput, Field(discriminator="kind")]

EMPTY_FIELDS_MSG = "All fields must be provided and non-empty"


def is_error(value: object) -> bool:
    return isinstance(value, (NotFound, InvalidInput))


class AllocatorError(RuntimeError):
    """The persisted id counter could not be read or written."""
