"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, issue_access_token

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    # Services
    'register_user',
    'authenticate_user',
    'issue_access_token',
]
