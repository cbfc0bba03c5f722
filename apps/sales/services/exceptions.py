"""Domain-specific exceptions for sales services."""


class SalesServiceError(Exception):
    """Base exception for sales services."""
    pass


class SaleNotFoundError(SalesServiceError):
    """Raised when sale does not exist."""
    pass


class SaleArtworkNotFoundError(SalesServiceError):
    """Raised when the artwork being sold does not exist."""
    pass


class ArtworkUnavailableError(SalesServiceError):
    """Raised when the artwork cannot be sold in its current status."""
    pass
