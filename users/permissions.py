# users/permissions.py
from rest_framework import permissions
import logging


logger = logging.getLogger(__name__)


class IsAdminRole(permissions.BasePermission):
    """
    Allow access only to users with the admin role (or superusers).
    """

    message = "Admin access required."

    def has_permission(self, request, view):
        user = request.user
        allowed = bool(user and user.is_authenticated and user.is_admin_role)
        if not allowed and user and user.is_authenticated:
            logger.debug(f"Admin permission denied for user {user.id}")
        return allowed


class IsOwnerOrAdmin(permissions.BasePermission):
    """
    Allow access to admins or the owner of the object.
    """

    def has_object_permission(self, request, view, obj):
        if request.user.is_admin_role:
            return True

        # Handles both the user itself and models owned through a `user` field
        if hasattr(obj, "user"):
            is_owner = obj.user_id == request.user.id
        else:
            is_owner = obj == request.user

        logger.debug(
            f"Permission check: user={request.user.username}, is_owner={is_owner}"
        )
        return is_owner
