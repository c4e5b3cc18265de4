"""Shared serializer fields."""
import bleach
from rest_framework import serializers

RICH_TEXT_TAGS = ['h1', 'h2', 'h3', 'h4', 'p', 'br', 'ul', 'ol', 'li', 'a', 'hr', 'em', 'strong', 'b', 'i', 'blockquote']
RICH_TEXT_ATTRIBUTES = {'a': ['href', 'title', 'rel', 'target']}


def clean_text(value: str) -> str:
    return bleach.clean((value or '').strip(), tags=[], strip=True)


def clean_html(value: str) -> str:
    return bleach.clean(value or '', tags=RICH_TEXT_TAGS, attributes=RICH_TEXT_ATTRIBUTES, strip=True)


class CleanCharField(serializers.CharField):
    """CharField with markup stripped."""

    def to_internal_value(self, data):
        return clean_text(super().to_internal_value(data))


class LenientDateField(serializers.DateField):
    """Date accepting ISO datetimes (the date part is kept) and ``""`` as null."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data == '':
            if self.required:
                self.fail('required')
            return True, None
        return super().validate_empty_values(data)

    def to_internal_value(self, value):
        if isinstance(value, str) and 'T' in value:
            value = value.split('T', 1)[0]
        return super().to_internal_value(value)


class OptionalNumberField(serializers.FloatField):
    """Number; numeric strings accepted and ``""`` treated as null."""

    default_error_messages = {
        'invalid': 'A valid number is required.',
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if isinstance(data, str) and data.strip() == '':
            return True, None
        return super().validate_empty_values(data)


class MediaRefField(serializers.Field):
    """Media by primary key on input, ``{id, url, alt}`` on output."""

    default_error_messages = {
        'does_not_exist': 'Media with ID {pk} not found',
        'incorrect_type': 'Expected a media id.',
    }

    def to_representation(self, value):
        if value is None:
            return None
        request = self.context.get('request')
        url = value.file.url if value.file else None
        if url and request is not None:
            url = request.build_absolute_uri(url)
        return {'id': value.pk, 'url': url, 'alt': value.alt}

    def to_internal_value(self, data):
        from care.models import Media
        if isinstance(data, dict):
            data = data.get('id')
        try:
            pk = int(data)
        except (TypeError, ValueError):
            self.fail('incorrect_type')
        media = Media.objects.filter(pk=pk).first()
        if media is None:
            self.fail('does_not_exist', pk=pk)
        return media
