import re

from rest_framework import serializers

from care.models import REMINDER_TIME_RE, Reminder
from .fields import CleanCharField, LenientDateField

TIME_RE = re.compile(REMINDER_TIME_RE)


class ReminderSerializer(serializers.ModelSerializer):
    type = serializers.ChoiceField(choices=Reminder.TYPE_CHOICES, error_messages={
        'required': 'Reminder type is required',
        'null': 'Reminder type is required',
        'invalid_choice': '"{input}" is not a valid reminder type',
    })
    date = LenientDateField(required=True, allow_null=False, error_messages={
        'required': 'Reminder date is required',
        'null': 'Reminder date is required',
    })
    time = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=8)
    description = CleanCharField(required=False, allow_blank=True)
    petId = serializers.IntegerField(source='pet_id', read_only=True)

    class Meta:
        model = Reminder
        fields = ['id', 'type', 'date', 'time', 'description', 'petId']

    def validate_time(self, v):
        v = (v or '').strip()
        if v and not TIME_RE.match(v):
            raise serializers.ValidationError('Time must use HH:MM or HH:MM:SS format')
        return v


class ReminderListQuerySerializer(serializers.Serializer):
    filter = serializers.ChoiceField(choices=['all', 'upcoming', 'past'], required=False, default='upcoming')
    limit = serializers.IntegerField(required=False, default=0)
    petId = serializers.IntegerField(min_value=1, required=False)
