"""
Bookshelf error types.
"""


class BookshelfError(Exception):
    """Base class for errors raised by the bookshelf service."""


class BookValidationError(BookshelfError):
    """A book payload broke a validation rule.

    Carries the message of the first rule that failed.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreError(BookshelfError):
    """The database failed to execute a statement."""
