"""Account services: registration, sign-in and staff roles."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    RoleChangeError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, issue_tokens
from .role_management import change_user_role

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'RoleChangeError',
    # Registration & Sign-in
    'register_user',
    'authenticate_user',
    'issue_tokens',
    # Staff Roles
    'change_user_role',
]
