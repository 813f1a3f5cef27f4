from rest_framework.permissions import BasePermission

from .utils.constants import UserRole
from .utils.role_utils import get_role, is_admin


class IsCustomer(BasePermission):
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and get_role(request.user) == UserRole.CUSTOMER)


class IsDriver(BasePermission):
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and get_role(request.user) == UserRole.DRIVER)


class IsCustomerOrDriver(BasePermission):
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and
                    get_role(request.user) in (UserRole.CUSTOMER, UserRole.DRIVER))


class IsPlatformAdmin(BasePermission):
    """Admin role on the profile, or Django staff"""
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and is_admin(request.user))
