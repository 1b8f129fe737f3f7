class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when an actor lacks permission for an action."""


class AlreadyCheckedInError(DomainError):
    """Raised when a record already exists for the employee and date."""


class NoOpenCheckInError(DomainError):
    """Raised on check-out without a check-in, or after a completed check-out."""


class InvalidDurationError(DomainError):
    """Raised when a check-out time precedes the check-in time."""


class RecordNotFoundError(DomainError):
    """Raised when a referenced record or profile does not exist."""


class StoreError(Exception):
    """Base exception for record store failures."""


class StoreUnavailableError(StoreError):
    """Backend or network failure. Never means "no record found"."""


class DuplicateRecordError(StoreError):
    """Raised by the store when a uniqueness constraint is violated."""
