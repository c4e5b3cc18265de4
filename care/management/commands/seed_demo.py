"""
Management command to populate the database with demo data.

Idempotent: running it twice leaves one set of demo users, one pet and
one news item.
"""
import base64
from datetime import timedelta

from django.contrib.auth.hashers import make_password
from django.core.files.base import ContentFile
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from care.models import CarerProfile, DailyCare, Media, News, Pet, Reminder, User, Vaccine

# 1x1 transparent GIF
PLACEHOLDER_GIF = base64.b64decode('R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7')

DEMO_USERS = [
    ("admin", "admin", "Pawie Admin"),
    ("owner", "petOwner", "Olivia Owner"),
    ("carer", "petCarer", "Carlos Carer"),
]


class Command(BaseCommand):
    help = "Create demo users, a pet with records and a published news item (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--password", default="Pawie1234", help="Password for every demo user")

    @transaction.atomic
    def handle(self, *args, **opts):
        users = {}
        for username, role, name in DEMO_USERS:
            u, created = User.objects.get_or_create(
                username=username,
                defaults={
                    "role": role, "name": name, "email": f"{username}@pawie.test",
                    "password": make_password(opts["password"]),
                    "is_staff": role == "admin", "is_superuser": role == "admin",
                },
            )
            if not created:
                u.password = make_password(opts["password"])
                u.role = role
                u.is_active = True
                u.save(update_fields=["password", "role", "is_active"])
            users[role] = u
            self.stdout.write(self.style.SUCCESS(f"ok: {username} ({role})"))
        CarerProfile.objects.get_or_create(
            user=users["petCarer"],
            defaults={"available_days": ["monday", "wednesday", "friday"], "start_time": "09:00",
                      "end_time": "17:00", "specialties": ["dogs", "cats"]},
        )

        photo = Media.objects.filter(alt="Demo photo").first()
        if photo is None:
            photo = Media(alt="Demo photo", content_type="image/gif", size=len(PLACEHOLDER_GIF),
                          uploaded_by=users["admin"])
            photo.file.save("demo.gif", ContentFile(PLACEHOLDER_GIF), save=True)

        pet, created = Pet.objects.get_or_create(
            name="Luna", pet_owner=users["petOwner"],
            defaults={"species": "dog", "breed": "Beagle", "sex": "female", "age": 3,
                      "weight": 11.5, "photo": photo, "pet_carer": users["petCarer"]},
        )
        if created:
            today = timezone.localdate()
            Vaccine.objects.create(pet=pet, vaccine_type="Rabies", administration_date=today - timedelta(days=200),
                                   next_dose=today + timedelta(days=165), lot_number="RB-001")
            DailyCare.objects.create(pet=pet, food_type="Dry food", daily_quantity="250 g",
                                     feeding_frequency="twice a day", exercise_type="Walks",
                                     exercise_duration="45 min", exercise_frequency="daily")
            Reminder.objects.create(pet=pet, type="vetAppointment", date=today + timedelta(days=7),
                                    time="10:30", description="Annual check-up")
            Reminder.objects.create(pet=pet, type="bath", date=today + timedelta(days=2))

        news, created = News.objects.get_or_create(
            slug="welcome-to-pawie",
            defaults={"title": "Welcome to Pawie", "image": photo, "status": News.STATUS_PUBLISHED,
                      "content": "<p>Keep your pets' records and reminders in one place.</p>"},
        )
        if created:
            news.authors.add(users["admin"])

        self.stdout.write(self.style.SUCCESS("Demo data ready."))
