"""Domain-specific exceptions for artists services."""


class ArtistsServiceError(Exception):
    """Base exception for artists services."""
    pass


class ArtistNotFoundError(ArtistsServiceError):
    """Raised when artist does not exist."""
    pass


class DuplicateArtistEmailError(ArtistsServiceError):
    """Raised when the contact email is already used by another artist."""
    pass


class ArtistHasArtworksError(ArtistsServiceError):
    """Raised when deleting an artist who still owns artworks."""
    pass
