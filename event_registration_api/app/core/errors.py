"""
Error types shared by the repositories, services and endpoints.

Business failures derive from ``DomainError`` (itself a ``ValueError``,
so callers that only care about "bad input" can keep catching
``ValueError``).  Failures of the underlying store derive from
``StoreError``.  Every error carries a human‑readable message that the
API writes verbatim into the ``erro`` field of the response body.
"""


class DomainError(ValueError):
    """Base class for business rule violations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """A required field is missing or a field value is invalid."""


class NotFoundError(DomainError):
    """The requested entity does not exist."""


class ConflictError(DomainError):
    """The operation collides with existing state.

    Raised for duplicate e‑mails, duplicate enrollments and full events.
    """


class StoreError(Exception):
    """The store call failed for reasons unrelated to business rules."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StoreUnavailableError(StoreError):
    """The store could not be reached or stayed locked past the timeout."""
