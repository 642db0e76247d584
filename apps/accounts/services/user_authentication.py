"""Sign-in for farm staff: credential checks and JWT pairs."""

import logging
from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework_simplejwt.tokens import RefreshToken

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check a staff member's email and password and stamp ``last_login``.

    Emails match case-insensitively. The row is locked while
    ``last_login`` is written.

    Args:
        email: Login email
        password: Plain-text password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: If an owner deactivated the account
    """
    user = User.objects.select_for_update().filter(email__iexact=email).first()

    if user is None or not user.check_password(password):
        logger.warning("Failed login for %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("User %s (%s) logged in", user.id, user.role)
    return user


def issue_tokens(user: User) -> dict:
    """Refresh/access pair for a signed-in user."""
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }
