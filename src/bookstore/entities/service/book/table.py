"""Book database table model."""

from datetime import datetime

from sqlmodel import Field, SQLModel


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    Rows are keyed by the allocated book id. The key is never generated by the
    database, so a removed id is not handed out again.
    """

    __tablename__ = "book"

    id: int = Field(
        primary_key=True,
        sa_column_kwargs={"autoincrement": False},
        description="Identifier assigned by the id counter",
    )
    title: str
    author: str
    created_at: datetime
    updated_at: datetime | None = None
