class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a request is missing a required field or is malformed."""


class AuthorizationError(DomainError):
    """Raised when the caller lacks the admin privilege for an action."""


class StorageError(DomainError):
    """Raised when the persistence layer is unavailable or its data is corrupt."""
