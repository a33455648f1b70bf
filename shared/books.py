import re
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator
from pydantic_core import PydanticSerializationError

ISBN_PATTERN = re.compile(r"[0-9]{3}-[0-9]{10}")


class BookParseError(ValueError):
    """Request body could not be turned into a Book."""


class SerializationError(Exception):
    """A Book could not be encoded as JSON."""


class Book(BaseModel):
    """A catalog entry, keyed by ISBN. Never mutated once built."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Missing or null fields decode to empty strings
    isbn: str = ""
    title: str = ""
    author: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_body_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("isbn", "title", "author", mode="before")
    @classmethod
    def _null_is_missing(cls, value: Any) -> Any:
        return "" if value is None else value


# ---- Validation ----
def is_valid_isbn(value: Any, strict: bool = True) -> bool:
    """
    Check the DDD-DDDDDDDDDD shape.

    With strict=False any substring match is accepted, so "xx123-4567890123xx"
    passes; this is how older clients were validated.
    """
    if not isinstance(value, str):
        return False
    if strict:
        return ISBN_PATTERN.fullmatch(value) is not None
    return ISBN_PATTERN.search(value) is not None


def has_required_fields(book: Book) -> bool:
    return book.title != "" and book.author != ""


def is_valid_book(book: Book, strict: bool = True) -> bool:
    return is_valid_isbn(book.isbn, strict=strict) and has_required_fields(book)


# ---- (De)serialization ----
def parse_book(body: str) -> Book:
    try:
        return Book.model_validate_json(body or "")
    except ValidationError as e:
        raise BookParseError(f"Invalid book payload: {e.error_count()} error(s)") from e


def serialize_book(book: Book) -> str:
    try:
        return book.model_dump_json()
    except PydanticSerializationError as e:
        raise SerializationError(f"Failed to encode book {book.isbn!r}: {e}") from e
