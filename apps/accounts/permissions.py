from rest_framework import permissions


class IsShopStaff(permissions.BasePermission):
    """
    Permission: User must be an active staff account.

    Members never log in; every loyalty, member and menu endpoint is
    operated by staff at the counter.
    """

    message = 'Staff account required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_active and user.is_staff)
