"""
Reminder storage and the cross-pet reminder feed.
"""
from __future__ import annotations

import datetime
import logging
from typing import Any, Dict, Iterable, List, Optional

from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied

from care.models import Reminder
from care.permissions import can_edit_pet
from care.services.notify import broadcast_to_user
from care.services.pets import pets_visible_to

logger = logging.getLogger(__name__)


def _notify_changed(pet, action: str, reminder_id: int) -> None:
    event = {'type': 'reminders.changed', 'petId': pet.pk, 'action': action, 'reminderId': reminder_id}
    recipients = {pet.pet_owner_id, pet.pet_carer_id} - {None}
    for user_id in recipients:
        broadcast_to_user(user_id, event)


def ensure_can_write(user, pet) -> None:
    if can_edit_pet(user, pet) or pet.pet_carer_id == user.id:
        return
    raise PermissionDenied('You cannot manage reminders for this pet')


def get_reminder(pet, reminder_id) -> Reminder:
    reminder = pet.reminders.filter(pk=reminder_id).first()
    if reminder is None:
        raise NotFound(f'Reminder with ID {reminder_id} not found')
    return reminder


def add_reminder(user, pet, data: Dict[str, Any]) -> Reminder:
    ensure_can_write(user, pet)
    reminder = Reminder.objects.create(pet=pet, **data)
    _notify_changed(pet, 'created', reminder.pk)
    return reminder


def update_reminder(user, pet, reminder: Reminder, data: Dict[str, Any]) -> Reminder:
    ensure_can_write(user, pet)
    for attr, value in data.items():
        setattr(reminder, attr, value)
    reminder.save()
    _notify_changed(pet, 'updated', reminder.pk)
    return reminder


def delete_reminder(user, pet, reminder: Reminder) -> None:
    ensure_can_write(user, pet)
    reminder_id = reminder.pk
    reminder.delete()
    _notify_changed(pet, 'deleted', reminder_id)


def _time_parts(value: str):
    """``(hour, minute)`` of an ``HH:MM[:SS]`` string, or ``None`` when malformed."""
    parts = value.split(':')
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def reminder_sort_key(item: Dict[str, Any]):
    """Date first; timed reminders before untimed ones; then time, then type."""
    parts = _time_parts(item.get('time') or '')
    if parts is None:
        return (item['date'], 1, 0, 0, item['type'])
    return (item['date'], 0) + parts + (item['type'],)


def aggregate_reminders(items: Iterable[Dict[str, Any]], *, filter: str = 'upcoming',
                        limit: int = 0, today: Optional[datetime.date] = None) -> Dict[str, Any]:
    """Filter, de-duplicate, sort and truncate reminder dicts.

    ``items`` carry ``petId``, ``date`` (a ``date``), ``type`` and
    ``time``.  The first occurrence of each ``(petId, date, type, time)``
    key wins.
    """
    today = today or timezone.localdate()
    seen = set()
    result: List[Dict[str, Any]] = []
    for item in items:
        if filter == 'upcoming' and item['date'] < today:
            continue
        if filter == 'past' and item['date'] >= today:
            continue
        key = (item['petId'], item['date'], item['type'], item.get('time') or '')
        if key in seen:
            continue
        seen.add(key)
        result.append(dict(item, isPast=item['date'] < today))
    result.sort(key=reminder_sort_key)
    total = len(result)
    if limit and limit > 0:
        result = result[:limit]
    return {'data': result, 'total': total, 'hasMore': total > len(result)}


def reminders_for_user(user, *, filter: str = 'upcoming', limit: int = 0,
                       pet_id: Optional[int] = None, today: Optional[datetime.date] = None) -> Dict[str, Any]:
    pets = pets_visible_to(user)
    if pet_id:
        pets = pets.filter(pk=pet_id)
    rows = Reminder.objects.filter(pet__in=pets).select_related('pet').order_by('id')
    items = (
        {
            'id': r.pk,
            'petId': r.pet_id,
            'petName': r.pet.name,
            'type': r.type,
            'date': r.date,
            'time': r.time,
            'description': r.description,
        }
        for r in rows
    )
    return aggregate_reminders(items, filter=filter, limit=limit, today=today)


def due_reminders(day: Optional[datetime.date] = None):
    day = day or timezone.localdate()
    return Reminder.objects.filter(date=day).select_related('pet').order_by('pet_id', 'time', 'id')
