class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FormatError(ValidationError):
    """Raised when a time label or clock string cannot be parsed."""


class TimezoneResolutionError(DomainError):
    """Raised when a UTC offset cannot be resolved for a timezone and date."""


class DataAccessError(DomainError):
    """Raised when shift records cannot be loaded from storage."""
