"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Raised when registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass
