"""Exceptions raised by the data-access layer.

Lookups that find nothing return ``None``; everything in this module means
the store itself refused or failed the operation. The underlying SQLAlchemy
exception is always chained as ``__cause__``.
"""


class StoreError(Exception):
    """The relational store failed to execute an operation."""


class ConstraintViolationError(StoreError):
    """The store rejected a write because it violated an integrity constraint."""


class DuplicateEmailError(ConstraintViolationError):
    """A user with the given email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(f"A user with email {email!r} already exists")
        self.email = email
