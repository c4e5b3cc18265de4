import datetime

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from care.serializers.reminders import ReminderSerializer
from care.services.notify import broadcast_to_user
from care.services.reminders import due_reminders


class Command(BaseCommand):
    help = "Broadcast a reminder.due event to the owner (and carer) of every reminder due today."

    def add_arguments(self, parser):
        parser.add_argument("--date", help="Day to process (YYYY-MM-DD); defaults to today")

    def handle(self, *args, **options):
        day = timezone.localdate()
        if options.get("date"):
            try:
                day = datetime.date.fromisoformat(options["date"])
            except ValueError:
                raise CommandError(f"Invalid date: {options['date']}")

        sent = 0
        reminders = list(due_reminders(day))
        for reminder in reminders:
            pet = reminder.pet
            event = {
                "type": "reminder.due",
                "reminder": dict(ReminderSerializer(reminder).data, petName=pet.name),
            }
            for user_id in {pet.pet_owner_id, pet.pet_carer_id} - {None}:
                if broadcast_to_user(user_id, event):
                    sent += 1

        self.stdout.write(self.style.SUCCESS(f"{len(reminders)} reminders due on {day}, {sent} events sent"))
