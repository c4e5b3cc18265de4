"""
Human friendly date helpers for the pages and API clients.

``format_date`` renders a long English date ("March 5, 2024");
``format_relative_time`` renders the distance from now in days,
months or years ("In 3 days", "2 months ago").
"""
from __future__ import annotations

import datetime
import math
from typing import Optional, Union

from django.utils import dateformat, timezone, translation
from django.utils.dateparse import parse_date, parse_datetime

DateLike = Union[str, datetime.date, datetime.datetime, None]

NOT_AVAILABLE = 'N/A'
INVALID = 'Invalid date'


def _parse(value: DateLike):
    """Return a ``date``/``datetime`` or ``None`` when unparsable."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value
    text = str(value).strip()
    try:
        if 'T' in text or ' ' in text:
            return parse_datetime(text)
        return parse_date(text)
    except ValueError:
        return None


def _round(x: float) -> int:
    # half-up, like the browser's Math.round
    return math.floor(x + 0.5)


def format_date(value: DateLike, locale: Optional[str] = None) -> str:
    if value in (None, ''):
        return NOT_AVAILABLE
    parsed = _parse(value)
    if parsed is None:
        return INVALID
    if isinstance(parsed, datetime.datetime) and timezone.is_aware(parsed):
        parsed = timezone.localtime(parsed)
    if locale:
        with translation.override(locale):
            return dateformat.format(parsed, 'F j, Y')
    return dateformat.format(parsed, 'F j, Y')


def day_difference(value: DateLike, now: Optional[datetime.datetime] = None) -> Optional[int]:
    parsed = _parse(value)
    if parsed is None:
        return None
    now = now or timezone.now()
    if not isinstance(parsed, datetime.datetime):
        today = timezone.localtime(now).date() if timezone.is_aware(now) else now.date()
        return (parsed - today).days
    if timezone.is_aware(now) and timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    elif timezone.is_naive(now) and timezone.is_aware(parsed):
        now = timezone.make_aware(now)
    return _round((parsed - now).total_seconds() / 86400)


def _unit(n: int, word: str) -> str:
    return f"{n} {word if n == 1 else word + 's'}"


def format_relative_time(value: DateLike, now: Optional[datetime.datetime] = None) -> str:
    if value in (None, ''):
        return NOT_AVAILABLE
    days = day_difference(value, now)
    if days is None:
        return INVALID
    if days == 0:
        return 'Today'
    if days == 1:
        return 'Tomorrow'
    if days == -1:
        return 'Yesterday'

    span = abs(days)
    if span < 30:
        text = f"{span} days"
    elif span < 365:
        text = _unit(_round(span / 30), 'month')
    else:
        text = _unit(_round(span / 365), 'year')
    return f"In {text}" if days > 0 else f"{text} ago"
