import datetime

import pytest
from django.utils import timezone

from care.dateformat import day_difference, format_date, format_relative_time

NOW = timezone.make_aware(datetime.datetime(2024, 6, 15, 12, 0))


@pytest.mark.parametrize('value, expected', [
    ('2024-03-05', 'March 5, 2024'),
    (datetime.date(2023, 12, 31), 'December 31, 2023'),
    ('', 'N/A'),
    (None, 'N/A'),
    ('yesterday-ish', 'Invalid date'),
    ('2024-02-30', 'Invalid date'),
])
def test_format_date(value, expected):
    assert format_date(value) == expected


@pytest.mark.parametrize('offset, expected', [
    (0, 'Today'),
    (1, 'Tomorrow'),
    (-1, 'Yesterday'),
    (5, 'In 5 days'),
    (-12, '12 days ago'),
    (45, 'In 2 months'),
    (-31, '1 month ago'),
    (400, 'In 1 year'),
    (-800, '2 years ago'),
])
def test_relative_time_for_dates(offset, expected):
    day = NOW.date() + datetime.timedelta(days=offset)
    assert format_relative_time(day, now=NOW) == expected


def test_relative_time_rounds_datetimes():
    later = NOW + datetime.timedelta(days=2, hours=13)
    assert day_difference(later, NOW) == 3
    assert format_relative_time(later.isoformat(), now=NOW) == 'In 3 days'


def test_relative_time_bad_input():
    assert format_relative_time('', now=NOW) == 'N/A'
    assert format_relative_time('garbage', now=NOW) == 'Invalid date'
