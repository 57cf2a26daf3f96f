"""
Book payload validation.

Validation runs in two phases and stops at the first broken rule:

1. shape, type and range checks of every field (`BookPayload`);
2. the cross-field rule ``readPage <= pageCount`` on the typed candidate.

Only after both phases pass is the immutable `Book` built. Error messages
keep the wording clients of the books API already rely on.
"""
from typing import Any

from pydantic import ValidationError

from .exceptions import BookValidationError
from .schemas.book import Book, BookPayload

READ_PAGE_EXCEEDS_PAGE_COUNT = (
    "Gagal menambahkan buku. readPage tidak boleh lebih besar dari pageCount"
)

_MESSAGES = {
    "missing": '"{label}" is required',
    "string_type": '"{label}" must be a string',
    "string_too_short": '"{label}" is not allowed to be empty',
    "int_type": '"{label}" must be a number',
    "int_parsing": '"{label}" must be a number',
    "int_from_float": '"{label}" must be an integer',
    "greater_than_equal": '"{label}" must be greater than or equal to {ge}',
    "less_than_equal": '"{label}" must be less than or equal to {le}',
    "bool_type": '"{label}" must be a boolean',
    "bool_parsing": '"{label}" must be a boolean',
    "extra_forbidden": '"{label}" is not allowed',
    "model_type": '"{label}" must be of type object',
    "model_attributes_type": '"{label}" must be of type object',
}


def describe_error(error: dict) -> str:
    """Render one pydantic error entry as a client-facing message."""
    loc = error.get("loc") or ()
    label = ".".join(str(part) for part in loc) if loc else "value"
    template = _MESSAGES.get(error["type"])
    if template is None:
        return f'"{label}" {error["msg"]}'
    return template.format(label=label, **(error.get("ctx") or {}))


def check_payload(payload: Any) -> BookPayload:
    try:
        return BookPayload.model_validate(payload)
    except ValidationError as exc:
        raise BookValidationError(describe_error(exc.errors()[0])) from None


def check_pages(candidate: BookPayload) -> BookPayload:
    if candidate.read_page > candidate.page_count:
        raise BookValidationError(READ_PAGE_EXCEEDS_PAGE_COUNT)
    return candidate


def validate_book(payload: Any) -> Book:
    """Validate a raw request payload and return the `Book` it describes.

    Raises `BookValidationError` carrying the message of the first rule that
    failed.
    """
    candidate = check_pages(check_payload(payload))
    return Book.from_payload(candidate)
