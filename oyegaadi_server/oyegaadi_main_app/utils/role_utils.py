"""Role helpers shared by services and permissions"""
from .constants import UserRole


def get_profile(user):
    return getattr(user, 'profile', None)


def get_role(user):
    profile = get_profile(user)
    return profile.role if profile else None


def is_admin(user):
    if user.is_staff or user.is_superuser:
        return True
    return get_role(user) == UserRole.ADMIN


def is_kyc_verified(user):
    profile = get_profile(user)
    return bool(profile and profile.is_kyc_verified)


def is_suspended(user):
    profile = get_profile(user)
    return bool(profile and profile.is_suspended)
