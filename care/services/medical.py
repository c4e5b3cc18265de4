"""
Medical record operations over the section registry.

Entries always get a database id; ids sent by clients are ignored.
"""
import logging

from rest_framework.exceptions import NotFound, PermissionDenied

from care.permissions import can_edit_pet
from care.serializers.medical import SECTIONS

logger = logging.getLogger(__name__)

CARER_WRITABLE_SECTIONS = {'evolutionTracking'}


def get_section(key: str):
    section = SECTIONS.get(key)
    if section is None:
        raise NotFound(f'Unknown medical record section "{key}"')
    return section


def ensure_can_write(user, pet, section) -> None:
    if can_edit_pet(user, pet):
        return
    if section.key in CARER_WRITABLE_SECTIONS and pet.pet_carer_id == user.id:
        return
    raise PermissionDenied('You cannot modify the medical record of this pet')


def section_queryset(pet, section):
    return getattr(pet, section.related_name).all()


def get_medical_record(pet, context=None) -> dict:
    return {
        key: section.serializer(section_queryset(pet, section), many=True, context=context or {}).data
        for key, section in SECTIONS.items()
    }


def get_entry(pet, section, entry_id):
    entry = section_queryset(pet, section).filter(pk=entry_id).first()
    if entry is None:
        logger.info("%s %s not found on pet %s", section.label, entry_id, pet.pk)
        raise NotFound(f'{section.label} with ID {entry_id} not found')
    return entry


def add_entry(user, pet, section, data: dict, context=None):
    ensure_can_write(user, pet, section)
    payload = {k: v for k, v in data.items() if k != 'id'}
    s = section.serializer(data=payload, context=context or {})
    s.is_valid(raise_exception=True)
    return s.save(pet=pet)


def update_entry(user, pet, section, entry_id, data: dict, *, partial: bool = True, context=None):
    ensure_can_write(user, pet, section)
    entry = get_entry(pet, section, entry_id)
    payload = {k: v for k, v in data.items() if k != 'id'}
    s = section.serializer(entry, data=payload, partial=partial, context=context or {})
    s.is_valid(raise_exception=True)
    return s.save()


def delete_entry(user, pet, section, entry_id) -> None:
    ensure_can_write(user, pet, section)
    get_entry(pet, section, entry_id).delete()
