from django import template
from django.utils.safestring import mark_safe

from care.dateformat import format_date as _format_date
from care.dateformat import format_relative_time
from care.serializers.fields import clean_html

register = template.Library()


@register.filter
def format_date(value, locale=None):
    return _format_date(value, locale)


@register.filter
def relative_time(value):
    return format_relative_time(value)


@register.filter
def rich_text(value):
    """Render stored news HTML through the allow-list."""
    return mark_safe(clean_html(value))
