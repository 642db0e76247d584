"""
Role-based permission classes shared by the farm apps.

Owners manage the flock (birds, breeds, incubation). Workers record
day-to-day data and may read everything.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsFarmOwner(BasePermission):
    """
    Permission: user must have the OWNER role.

    Usage:
        def get_permissions(self):
            if self.action in ['create', 'update', 'partial_update', 'destroy']:
                return [IsAuthenticated(), IsFarmOwner()]
            return super().get_permissions()
    """

    message = 'Only farm owners can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_owner)


class IsFarmOwnerOrReadOnly(IsFarmOwner):
    """
    Permission: any authenticated user may read, only owners may write.
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return super().has_permission(request, view)
