"""
Custom permission classes for dashboard app.

Permission Classes:
    IsAppAdmin - Staff users or users whose profile is flagged admin

Usage:
    from apps.dashboard.permissions import IsAppAdmin

    @api_view(['GET'])
    @permission_classes([IsAuthenticated, IsAppAdmin])
    def dashboard(request):
        ...
"""

from rest_framework.permissions import BasePermission

from apps.profiles.services import is_app_admin


class IsAppAdmin(BasePermission):
    """Allows access only to app admins."""

    message = 'Admin access required.'

    def has_permission(self, request, view):
        return is_app_admin(request.user)
