class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when an inbound payload is invalid."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class AuthenticationError(DomainError):
    """Raised when Basic Auth credentials are missing or wrong."""
