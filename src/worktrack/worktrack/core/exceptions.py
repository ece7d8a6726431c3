class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateIdentityError(ValidationError):
    """Raised when registering an email that already exists."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class UnauthenticatedError(AuthenticationError):
    """Raised when a protected request carries no bearer token."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ForbiddenError(AuthorizationError):
    """Raised when a bearer token is present but does not verify."""


class InvalidTransitionError(DomainError):
    """Raised when a check-in/check-out does not follow the attendance state."""


class StorageError(DomainError):
    """Raised when the underlying store fails."""
