"""
SQL for the books table.

Fixed statements are plain templates; the list query is assembled by
`FilterQuery` so that placeholder numbers always follow the parameters that
are actually bound.
"""
from typing import Any, List, Optional, Tuple

INSERT_BOOK = (
    "INSERT INTO books (name, year, author, summary, publisher, page_count, read_page, reading, finished) "
    "VALUES (:p1, :p2, :p3, :p4, :p5, :p6, :p7, :p8, :p9) RETURNING id"
)

SELECT_BOOK_BY_ID = "SELECT * FROM books WHERE id = :p1"

UPDATE_BOOK_BY_ID = (
    "UPDATE books SET name = :p1, year = :p2, author = :p3, summary = :p4, publisher = :p5, "
    "page_count = :p6, read_page = :p7, reading = :p8, finished = :p9, updated_at = :p10 "
    "WHERE id = :p11"
)

DELETE_BOOK_BY_ID = "DELETE FROM books WHERE id = :p1"

SELECT_BOOK_SUMMARIES = "SELECT id, name, publisher FROM books"

TRUE_FLAG = "1"


class FilterQuery:
    """Collects `WHERE` conditions and their bound values.

    Each condition is a fragment with a single `{}` slot for its placeholder,
    e.g. ``"reading = {}"``. Placeholders are numbered from the position of
    the condition when the query is built.
    """

    def __init__(self, base: str):
        self.base = base
        self._conditions: List[Tuple[str, Any]] = []

    def where(self, fragment: str, value: Any) -> "FilterQuery":
        self._conditions.append((fragment, value))
        return self

    def __len__(self) -> int:
        return len(self._conditions)

    def build(self) -> Tuple[str, List[Any]]:
        if not self._conditions:
            return self.base, []
        clauses = [
            fragment.format(f":p{index}")
            for index, (fragment, _) in enumerate(self._conditions, start=1)
        ]
        params = [value for _, value in self._conditions]
        return f"{self.base} WHERE {' AND '.join(clauses)}", params


def book_list_query(
    name: Optional[str] = None,
    reading: Optional[str] = None,
    finished: Optional[str] = None,
) -> Tuple[str, List[Any]]:
    """Build the list query for the optional `name`, `reading` and `finished` filters.

    `name` matches case-insensitively anywhere in the book name. `reading` and
    `finished` only filter when they are exactly ``"1"``; any other value,
    ``"0"`` included, leaves that column unfiltered.
    """
    query = FilterQuery(SELECT_BOOK_SUMMARIES)
    if name:
        query.where("LOWER(name) LIKE LOWER({})", f"%{name}%")
    if reading == TRUE_FLAG:
        query.where("reading = {}", True)
    if finished == TRUE_FLAG:
        query.where("finished = {}", True)
    return query.build()
