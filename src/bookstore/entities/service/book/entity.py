"""Entity: Book."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator

# SQLite stores INTEGER as signed 64-bit; larger ids can never be persisted.
U64_MAX = 2**64 - 1
MAX_STORABLE_ID = 2**63 - 1


def utc_now() -> datetime:
    return datetime.now(UTC)


class BookPayload(BaseModel):
    """Title/author pair supplied by a caller to create or update a book.

    Empty strings are accepted here on purpose; the operation handlers decide
    when they are rejected.
    """

    title: str = Field(description="Title of the book")
    author: str = Field(description="Author of the book")

    def has_empty_fields(self) -> bool:
        return not self.title or not self.author


class Book(BaseModel):
    """Book record as stored under its identifier.

    ``id`` and ``created_at`` are fixed when the book is added. ``updated_at``
    stays ``None`` until the first successful update.
    """

    id: int = Field(ge=0, le=U64_MAX, description="Unique identifier for the book")
    title: str = Field(description="Title of the book")
    author: str = Field(description="Author of the book")
    created_at: datetime = Field(description="When the book was added")
    updated_at: datetime | None = Field(
        default=None, description="When the book was last updated"
    )

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite drops tzinfo on the way back out
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def to_bytes(self) -> bytes:
        """Serialize the record for storage or transport."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> "Book":
        return cls.model_validate_json(data)

    def encoded_size(self) -> int:
        return len(self.to_bytes())
