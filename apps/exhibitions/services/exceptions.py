"""Domain-specific exceptions for exhibitions services."""


class ExhibitionsServiceError(Exception):
    """Base exception for exhibitions services."""
    pass


class ExhibitionNotFoundError(ExhibitionsServiceError):
    """Raised when exhibition does not exist."""
    pass


class InvalidDateRangeError(ExhibitionsServiceError):
    """Raised when the exhibition ends before it starts."""
    pass
