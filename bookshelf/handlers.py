"""
Book request handlers.

Each operation maps validated input and the store outcome to a status code
and a response envelope ``{status, message?, data?}``. Store failures are not
handled here; `StoreError` propagates to the HTTP layer.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional, Tuple

from . import queries
from .exceptions import BookValidationError
from .gateway import Gateway
from .schemas.book import MAX_INTEGER, BookRecord, BookSummary
from .validation import validate_book

logger = logging.getLogger(__name__)

BOOK_ADDED = "Buku berhasil ditambahkan"
BOOK_NOT_FOUND = "Buku tidak ditemukan"
BOOK_UPDATED = "Buku berhasil diperbarui"
UPDATE_ID_NOT_FOUND = "Gagal memperbarui buku. Id tidak ditemukan"
BOOK_DELETED = "Buku berhasil dihapus"
DELETE_ID_NOT_FOUND = "Buku gagal dihapus. Id tidak ditemukan"

Response = Tuple[int, dict]


def success(message: Optional[str] = None, data: Optional[dict] = None) -> dict:
    body = {"status": "success"}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def fail(message: str) -> dict:
    return {"status": "fail", "message": message}


def parse_book_id(book_id: str) -> Optional[int]:
    """Return the numeric id, or None when no stored row could carry it."""
    if not (book_id.isascii() and book_id.isdigit()):
        return None
    value = int(book_id)
    return value if value <= MAX_INTEGER else None


class BookHandlers:
    def __init__(self, gateway: Gateway):
        self.gateway = gateway

    def create(self, payload: Any) -> Response:
        try:
            book = validate_book(payload)
        except BookValidationError as exc:
            return 400, fail(exc.message)

        result = self.gateway.execute(queries.INSERT_BOOK, book.column_values())
        book_id = result.rows[0]["id"]
        logger.info("Created book %s", book_id)
        return 201, success(BOOK_ADDED, {"bookId": book_id})

    def list_books(
        self,
        name: Optional[str] = None,
        reading: Optional[str] = None,
        finished: Optional[str] = None,
    ) -> Response:
        statement, params = queries.book_list_query(name, reading, finished)
        result = self.gateway.execute(statement, params)
        books = [BookSummary.model_validate(row).model_dump(mode="json") for row in result.rows]
        return 200, success(data={"books": books})

    def get(self, book_id: str) -> Response:
        key = parse_book_id(book_id)
        rows = self.gateway.execute(queries.SELECT_BOOK_BY_ID, [key]).rows if key is not None else []
        if not rows:
            return 404, fail(BOOK_NOT_FOUND)

        book = BookRecord.model_validate(rows[0]).model_dump(mode="json")
        return 200, success(data={"book": book})

    def update(self, book_id: str, payload: Any) -> Response:
        try:
            book = validate_book(payload)
        except BookValidationError as exc:
            return 400, fail(exc.message)

        key = parse_book_id(book_id)
        if key is None:
            return 404, fail(UPDATE_ID_NOT_FOUND)

        updated_at = datetime.now(timezone.utc).isoformat()
        params = book.column_values() + [updated_at, key]
        if self.gateway.execute(queries.UPDATE_BOOK_BY_ID, params).row_count == 0:
            return 404, fail(UPDATE_ID_NOT_FOUND)

        logger.info("Updated book %s", key)
        return 200, success(BOOK_UPDATED)

    def delete(self, book_id: str) -> Response:
        key = parse_book_id(book_id)
        if key is None or self.gateway.execute(queries.DELETE_BOOK_BY_ID, [key]).row_count == 0:
            return 404, fail(DELETE_ID_NOT_FOUND)

        logger.info("Deleted book %s", key)
        return 200, success(BOOK_DELETED)
