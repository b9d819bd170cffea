"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers let them propagate and api.errors maps them to HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class UnauthorizedError(DomainError):
    """Caller has no valid session."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class HashError(DomainError):
    """Stored password digest is malformed."""
