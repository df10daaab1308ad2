"""Id counter database table model."""

from sqlmodel import Field, SQLModel


class IdCounterTable(SQLModel, table=True):
    """One row per named counter holding the next id to hand out."""

    __tablename__ = "id_counter"

    name: str = Field(primary_key=True)
    value: int = Field(default=0, ge=0)
