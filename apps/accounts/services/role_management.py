"""Farm role management service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID
import logging

from ..models import UserRole
from .exceptions import UserNotFoundError, RoleChangeError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def change_user_role(*, user_id: UUID, role: str, changed_by: User) -> User:
    """
    Promote or demote a farm account.

    Args:
        user_id: Account to change
        role: New role (OWNER or WORKER)
        changed_by: Owner performing the change

    Returns:
        Updated User instance

    Raises:
        UserNotFoundError: If the account does not exist
        RoleChangeError: If the change would leave the farm without an owner
    """
    try:
        user = User.objects.select_for_update().get(id=user_id, is_active=True)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")

    if user.role == UserRole.OWNER and role != UserRole.OWNER:
        other_owners = User.objects.filter(
            role=UserRole.OWNER, is_active=True
        ).exclude(id=user.id)
        if not other_owners.exists():
            raise RoleChangeError("The farm must keep at least one owner")

    user.role = role
    user.save(update_fields=['role'])

    logger.info("%s changed role of %s to %s", changed_by.email, user.email, role)
    return user
