from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

# upper bound of the INTEGER columns backing the numeric fields
MAX_INTEGER = 2**31 - 1


def _true_or_false(value: Any) -> Any:
    """Accept real booleans and the strings "true"/"false", nothing else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise PydanticCustomError("bool_type", "Input should be a valid boolean")


TrueOrFalse = Annotated[bool, BeforeValidator(_true_or_false)]


class BookPayload(BaseModel):
    """Client-supplied book fields, checked for shape, type and range only."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    year: int | None = Field(default=None, ge=0)
    author: str | None = Field(default=None, min_length=1)
    summary: str | None = Field(default=None, min_length=1)
    publisher: str | None = Field(default=None, min_length=1)
    page_count: int = Field(alias="pageCount", ge=0, le=MAX_INTEGER)
    read_page: int = Field(alias="readPage", ge=0, le=MAX_INTEGER)
    reading: TrueOrFalse | None = None

    @field_validator("year")
    @classmethod
    def year_not_in_future(cls, value: int | None) -> int | None:
        limit = date.today().year
        if value is not None and value > limit:
            raise PydanticCustomError(
                "less_than_equal",
                "Input should be less than or equal to {le}",
                {"le": limit},
            )
        return value


class Book(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    year: int | None = None
    author: str | None = None
    summary: str | None = None
    publisher: str | None = None
    page_count: int
    read_page: int
    reading: bool | None = None
    finished: bool

    @classmethod
    def from_payload(cls, payload: BookPayload) -> "Book":
        return cls(
            **payload.model_dump(),
            finished=payload.page_count == payload.read_page,
        )

    def column_values(self) -> list:
        """Values in `books` column order, from `name` through `finished`."""
        return [
            self.name,
            self.year,
            self.author,
            self.summary,
            self.publisher,
            self.page_count,
            self.read_page,
            self.reading,
            self.finished,
        ]


class BookRecord(BaseModel):
    id: int
    name: str
    year: int | None = None
    author: str | None = None
    summary: str | None = None
    publisher: str | None = None
    page_count: int
    read_page: int
    reading: bool | None = None
    finished: bool
    updated_at: datetime | None = None


class BookSummary(BaseModel):
    id: int
    name: str
    publisher: str | None = None
