"""
Role based permission classes and object access helpers.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS

from .models import User


def is_admin(user) -> bool:
    return bool(user and user.is_authenticated and (user.role == User.ROLE_ADMIN or user.is_superuser))


class IsAdminOrReadOnly(BasePermission):
    """Reads for everyone, writes for admins."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return request.method in SAFE_METHODS or is_admin(getattr(request, "user", None))


class CanCreatePets(BasePermission):
    """Pet owners and admins may register pets."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        if request.method in SAFE_METHODS:
            return bool(user and user.is_authenticated)
        return is_admin(user) or bool(user and user.is_authenticated and user.role == User.ROLE_OWNER)


def can_view_pet(user, pet) -> bool:
    if is_admin(user):
        return True
    return pet.pet_owner_id == user.id or pet.pet_carer_id == user.id


def can_edit_pet(user, pet) -> bool:
    return is_admin(user) or pet.pet_owner_id == user.id


def can_edit_daily_care(user, pet) -> bool:
    return can_view_pet(user, pet)
