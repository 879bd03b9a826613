"""
Accounts app permissions

Custom permissions for role-based access control.
"""
from rest_framework import permissions


class IsAdminOrOwner(permissions.BasePermission):
    """
    Permission that allows:
    - Admins to access any record
    - Users to access only records they own
    """

    def has_object_permission(self, request, view, obj):
        if request.user.role == 'ADMIN':
            return True

        return getattr(obj, 'user_id', None) == request.user.pk
