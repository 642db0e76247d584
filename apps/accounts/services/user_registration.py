"""User registration service."""

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
import logging

from ..models import UserRole
from .exceptions import UserRegistrationError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = "",
    language: str = "en"
) -> User:
    """
    Register a new farm account.

    The very first account on a fresh install becomes the farm OWNER so
    someone can manage the flock; every later account starts as WORKER.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        display_name: Optional display name
        language: Preferred UI/report language ('en' or 'tl')

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is already registered
    """
    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("An account with this email already exists")

    role = UserRole.WORKER if User.objects.exists() else UserRole.OWNER

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            display_name=display_name,
            language=language,
            role=role,
        )
    except IntegrityError as e:
        raise UserRegistrationError(f"Registration failed: {str(e)}")

    logger.info("Registered user %s with role %s", user.email, user.role)
    return user
