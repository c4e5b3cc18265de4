from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from django.db import transaction
from django.db.models import Q
from rest_framework.exceptions import NotFound, PermissionDenied

from care.models import DailyCare, Pet, User
from care.permissions import can_edit_daily_care, can_edit_pet, can_view_pet, is_admin
from care.services.audit import log_action

logger = logging.getLogger(__name__)


def pets_visible_to(user: User):
    qs = Pet.objects.select_related('photo', 'pet_owner', 'pet_carer')
    if is_admin(user):
        return qs
    return qs.filter(Q(pet_owner=user) | Q(pet_carer=user))


def get_pet_for(user: User, pet_id: int) -> Pet:
    """Return a pet the user may see; unknown and foreign pets are both 404."""
    pet = pets_visible_to(user).filter(pk=pet_id).first()
    if pet is None or not can_view_pet(user, pet):
        raise NotFound(f'Pet with ID {pet_id} not found')
    return pet


def list_pets(user: User, *, species: Optional[str] = None, q: Optional[str] = None,
              page: int = 1, limit: int = 0):
    qs = pets_visible_to(user).order_by('name', 'id')
    if species:
        qs = qs.filter(species=species)
    if q:
        qs = qs.filter(name__icontains=q)
    total = qs.count()
    if limit:
        start = (page - 1) * limit
        qs = qs[start:start + limit]
    return list(qs), total


def _apply_daily_care(pet: Pet, data: Dict[str, Any]) -> DailyCare:
    care, _ = DailyCare.objects.get_or_create(pet=pet)
    for attr, value in data.items():
        setattr(care, attr, value)
    care.save()
    return care


def create_pet(user: User, data: Dict[str, Any]) -> Pet:
    data = dict(data)
    owner = data.pop('pet_owner', None)
    if owner is None or not is_admin(user):
        owner = user
    if data.get('pet_carer') is not None and not is_admin(user) and owner.pk != user.pk:
        raise PermissionDenied('Only the pet owner can assign a carer')
    with transaction.atomic():
        pet = Pet.objects.create(pet_owner=owner, **data)
    logger.info("pet %s created by %s", pet.pk, user.username)
    log_action(user=user, action='pet_create', object_type='pet', object_id=pet.pk,
               detail={'name': pet.name, 'owner': owner.pk})
    return pet


def update_pet(user: User, pet: Pet, data: Dict[str, Any], daily_care: Optional[Dict[str, Any]] = None) -> Pet:
    if not can_edit_pet(user, pet):
        raise PermissionDenied('Only the pet owner can modify this pet')
    data = dict(data)
    if 'pet_owner' in data and not is_admin(user):
        data.pop('pet_owner')
    with transaction.atomic():
        for attr, value in data.items():
            setattr(pet, attr, value)
        pet.save()
        if daily_care:
            _apply_daily_care(pet, daily_care)
    log_action(user=user, action='pet_update', object_type='pet', object_id=pet.pk,
               detail={'fields': sorted(data) + (['dailyCare'] if daily_care else [])})
    return pet


def delete_pet(user: User, pet: Pet) -> None:
    if not can_edit_pet(user, pet):
        raise PermissionDenied('Only the pet owner can delete this pet')
    pet_id = pet.pk
    pet.delete()
    logger.info("pet %s deleted by %s", pet_id, user.username)
    log_action(user=user, action='pet_delete', object_type='pet', object_id=pet_id)


def get_daily_care(pet: Pet) -> DailyCare:
    care = DailyCare.objects.filter(pet=pet).first()
    return care if care is not None else DailyCare(pet=pet)


def update_daily_care(user: User, pet: Pet, data: Dict[str, Any], *, replace: bool = False) -> DailyCare:
    if not can_edit_daily_care(user, pet):
        raise PermissionDenied('You cannot edit the daily care of this pet')
    if replace:
        blank = {f.name: '' for f in DailyCare._meta.concrete_fields
                 if f.name not in ('id', 'pet', 'updated_at')}
        data = {**blank, **data}
    return _apply_daily_care(pet, data)
