class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid and has no sensible default."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a scanned barcode matches no staff member."""


class UnavailableError(DomainError):
    """Raised when the attendance store has not been configured or initialized."""


class ExternalStoreError(DomainError):
    """Raised when a call to the attendance store is rejected."""
