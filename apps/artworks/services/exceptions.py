"""Domain-specific exceptions for artworks services."""


class ArtworksServiceError(Exception):
    """Base exception for artworks services."""
    pass


class ArtworkNotFoundError(ArtworksServiceError):
    """Raised when artwork does not exist."""
    pass


class InvalidStatusTransitionError(ArtworksServiceError):
    """Raised when an artwork status change is not allowed."""
    pass


class ArtworkNotAvailableError(ArtworksServiceError):
    """Raised when an artwork cannot be sold in its current status."""
    pass


class ArtworkHasSalesError(ArtworksServiceError):
    """Raised when deleting an artwork with recorded sales."""
    pass
