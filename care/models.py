"""
Database models for the Pawie pet-care site.

These models capture the core concepts of the system: users (pet
owners, pet carers and administrators), uploaded media and documents,
pets with their medical record and daily care routine, reminders and
editorial news.  API payloads use the camelCase names of the public
site; the mapping lives in the serializers.
"""
from __future__ import annotations

import datetime
import os
import uuid

from django.contrib.auth.models import AbstractUser
from django.core.validators import RegexValidator
from django.db import models
from django.utils import timezone
from django.utils.text import slugify


def _media_upload(instance, filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    return f"media/{datetime.date.today().strftime('%Y/%m')}/{uuid.uuid4().hex}{ext}"


def _document_upload(instance, filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    return f"docs/{datetime.date.today().strftime('%Y/%m')}/{uuid.uuid4().hex}{ext}"


class User(AbstractUser):
    """Custom user model with a single site role.

    Roles mirror the public site: 'admin' manages everything through the
    admin UI, 'petOwner' registers pets and 'petCarer' looks after pets
    of other users.  Owned and cared pets are reverse relations of
    :class:`Pet`, never stored on the user.
    """
    ROLE_ADMIN = 'admin'
    ROLE_OWNER = 'petOwner'
    ROLE_CARER = 'petCarer'
    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Admin'),
        (ROLE_OWNER, 'Pet Owner'),
        (ROLE_CARER, 'Pet Carer'),
    ]
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_OWNER, db_index=True)
    name = models.CharField(max_length=50, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    address = models.TextField(blank=True)
    bio = models.TextField(blank=True)
    avatar = models.ForeignKey(
        'Media', null=True, blank=True, on_delete=models.SET_NULL, related_name='+'
    )

    @property
    def is_admin_role(self) -> bool:
        return self.role == self.ROLE_ADMIN

    @property
    def display_name(self) -> str:
        return self.name or self.get_full_name() or self.username

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class Media(models.Model):
    """An uploaded image (pet photos, avatars, news images)."""
    file = models.FileField(upload_to=_media_upload, max_length=512)
    alt = models.CharField(max_length=255, blank=True)
    content_type = models.CharField(max_length=128, blank=True)
    size = models.PositiveIntegerField(default=0)
    uploaded_by = models.ForeignKey(
        User, null=True, blank=True, on_delete=models.SET_NULL, related_name='media_uploads'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.alt or os.path.basename(self.file.name)


class Document(models.Model):
    """An uploaded document, typically laboratory results."""
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, blank=True)
    file = models.FileField(upload_to=_document_upload, max_length=512)
    filename = models.CharField(max_length=255, blank=True)
    content_type = models.CharField(max_length=128, blank=True)
    size = models.PositiveIntegerField(default=0)
    uploaded_by = models.ForeignKey(
        User, null=True, blank=True, on_delete=models.SET_NULL, related_name='documents'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.title


class CarerProfile(models.Model):
    """Availability and statistics of a pet carer."""
    DAY_CHOICES = [
        ('monday', 'Monday'),
        ('tuesday', 'Tuesday'),
        ('wednesday', 'Wednesday'),
        ('thursday', 'Thursday'),
        ('friday', 'Friday'),
        ('saturday', 'Saturday'),
        ('sunday', 'Sunday'),
    ]
    SPECIALTY_CHOICES = [
        ('dogs', 'Dogs'),
        ('cats', 'Cats'),
        ('birds', 'Birds'),
        ('exotic', 'Exotic Pets'),
        ('medical', 'Medical Care'),
        ('training', 'Training'),
    ]
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='carer_profile')
    available_days = models.JSONField(default=list, blank=True)
    start_time = models.CharField(max_length=5, blank=True, help_text="Format: HH:MM (24h)")
    end_time = models.CharField(max_length=5, blank=True, help_text="Format: HH:MM (24h)")
    notes = models.TextField(blank=True)
    rating = models.FloatField(null=True, blank=True, help_text="Average rating from 0-5 stars")
    completed_jobs = models.PositiveIntegerField(default=0)
    specialties = models.JSONField(default=list, blank=True)

    def __str__(self) -> str:
        return f"Carer profile of {self.user.username}"


class CarerCertification(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='certifications')
    certification_type = models.CharField(max_length=255)
    issuer = models.CharField(max_length=255, blank=True)
    issue_date = models.DateField(null=True, blank=True)
    expiry_date = models.DateField(null=True, blank=True)
    certificate = models.ForeignKey(
        Media, null=True, blank=True, on_delete=models.SET_NULL, related_name='+'
    )

    def __str__(self) -> str:
        return f"{self.certification_type} ({self.user.username})"


class Pet(models.Model):
    """A pet profile owned by a user and optionally looked after by a carer."""
    SPECIES_CHOICES = [
        ('dog', 'Dog'),
        ('cat', 'Cat'),
        ('another', 'Another'),
    ]
    SEX_CHOICES = [
        ('male', 'Male'),
        ('female', 'Female'),
    ]
    photo = models.ForeignKey(Media, on_delete=models.PROTECT, related_name='pets')
    name = models.CharField(max_length=50)
    species = models.CharField(max_length=10, choices=SPECIES_CHOICES)
    breed = models.CharField(max_length=50, blank=True)
    sex = models.CharField(max_length=6, choices=SEX_CHOICES, blank=True)
    age = models.FloatField(null=True, blank=True, help_text="Age in years")
    height = models.FloatField(null=True, blank=True, help_text="Height in centimeters")
    weight = models.FloatField(null=True, blank=True, help_text="Weight in kilograms")
    pet_owner = models.ForeignKey(User, on_delete=models.CASCADE, related_name='owned_pets')
    pet_carer = models.ForeignKey(
        User, null=True, blank=True, on_delete=models.SET_NULL, related_name='cared_pets'
    )
    qr_link = models.CharField(max_length=500, blank=True, help_text="Link to QR code of medical history")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=['pet_owner', 'name'], name='care_pet_pet_own_4c3a1e_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.species})"


# ---------------------------------------------------------------------------
# Medical record sections (one table per section, all hanging off Pet)
# ---------------------------------------------------------------------------

class MedicalEntry(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['id']


class Vaccine(MedicalEntry):
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='vaccines')
    vaccine_type = models.CharField(max_length=255)
    administration_date = models.DateField(null=True, blank=True)
    next_dose = models.DateField(null=True, blank=True)
    lot_number = models.CharField(max_length=100, blank=True)

    def __str__(self) -> str:
        return f"{self.vaccine_type} for {self.pet_id}"


class Deworming(MedicalEntry):
    TYPE_CHOICES = [
        ('internal', 'Internal'),
        ('external', 'External'),
    ]
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='dewormings')
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    antiparasitic = models.CharField(max_length=255, blank=True)
    administration_date = models.DateField(null=True, blank=True)
    frequency = models.CharField(max_length=100, blank=True)

    def __str__(self) -> str:
        return f"{self.type} deworming for {self.pet_id}"


class VetAppointment(MedicalEntry):
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='vet_appointments')
    date = models.DateField()
    reason = models.TextField(blank=True)
    diagnostic = models.TextField(blank=True)
    treatment = models.TextField(blank=True)

    def __str__(self) -> str:
        return f"Vet visit {self.date} for {self.pet_id}"


class SurgicalProcedure(MedicalEntry):
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='surgical_procedures')
    type = models.CharField(max_length=255)
    date = models.DateField()
    complications = models.TextField(blank=True)
    medication_postoperative = models.TextField(blank=True)

    def __str__(self) -> str:
        return f"{self.type} on {self.date}"


class Allergy(MedicalEntry):
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='allergies')
    allergy = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    class Meta(MedicalEntry.Meta):
        verbose_name_plural = 'allergies'

    def __str__(self) -> str:
        return self.allergy


class LaboratoryTest(MedicalEntry):
    TYPE_CHOICES = [
        ('blood', 'Blood tests'),
        ('urine', 'Urine analysis'),
        ('x-ray', 'X-ray'),
        ('ultrasound', 'Ultrasound'),
        ('another', 'Another'),
    ]
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='laboratory_tests')
    type = models.CharField(max_length=12, choices=TYPE_CHOICES)
    date = models.DateField(null=True, blank=True)
    results = models.TextField(blank=True)
    results_doc = models.ForeignKey(
        Document, null=True, blank=True, on_delete=models.SET_NULL, related_name='laboratory_tests'
    )

    def __str__(self) -> str:
        return f"{self.type} test for {self.pet_id}"


class MedicalTreatment(MedicalEntry):
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='medical_treatments')
    medicine = models.CharField(max_length=255)
    dose = models.CharField(max_length=100, blank=True)
    duration = models.CharField(max_length=100, blank=True)
    additional_therapy = models.TextField(blank=True, help_text="Physiotherapy, special diets, etc.")

    def __str__(self) -> str:
        return self.medicine


class EvolutionEntry(MedicalEntry):
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='evolution_entries')
    date = models.DateField()
    notes = models.TextField(blank=True)
    treatment_changes = models.TextField(blank=True)

    class Meta(MedicalEntry.Meta):
        verbose_name_plural = 'evolution entries'

    def __str__(self) -> str:
        return f"Evolution {self.date} for {self.pet_id}"


class DailyCare(models.Model):
    """Feeding, hygiene and exercise routine of a pet."""
    pet = models.OneToOneField(Pet, on_delete=models.CASCADE, related_name='daily_care')
    # feeding
    food_type = models.CharField(max_length=255, blank=True)
    daily_quantity = models.CharField(max_length=255, blank=True)
    feeding_frequency = models.CharField(max_length=255, blank=True, help_text='For example: "twice a day"')
    special_needs = models.TextField(blank=True)
    # hygiene
    bath_frequency = models.CharField(max_length=255, blank=True)
    brush_frequency = models.CharField(max_length=255, blank=True)
    dental_cleaning_frequency = models.CharField(max_length=255, blank=True)
    ear_cleaning = models.CharField(max_length=255, blank=True)
    nail_cutting = models.CharField(max_length=255, blank=True)
    hygiene_notes = models.TextField(blank=True)
    # exercise
    exercise_type = models.CharField(max_length=255, blank=True, help_text="Walks, games, etc.")
    exercise_duration = models.CharField(max_length=255, blank=True)
    exercise_frequency = models.CharField(max_length=255, blank=True)
    exercise_observations = models.TextField(blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Daily care of {self.pet_id}"


REMINDER_TIME_RE = r'^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$'
reminder_time_validator = RegexValidator(REMINDER_TIME_RE, 'Time must use HH:MM or HH:MM:SS format')


class Reminder(models.Model):
    TYPE_CHOICES = [
        ('vaccine', 'Vaccine'),
        ('deworming', 'Deworming'),
        ('vetAppointment', 'Vet appointment'),
        ('medication', 'Medication'),
        ('haircut', 'Haircut'),
        ('bath', 'Bath'),
        ('other', 'Other'),
    ]
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='reminders')
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    date = models.DateField(db_index=True)
    time = models.CharField(max_length=8, blank=True, validators=[reminder_time_validator])
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['date', 'id']

    def __str__(self) -> str:
        return f"{self.type} on {self.date} for {self.pet_id}"


class News(models.Model):
    """An editorial news post with draft/published workflow."""
    STATUS_DRAFT = 'draft'
    STATUS_PUBLISHED = 'published'
    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Draft'),
        (STATUS_PUBLISHED, 'Published'),
    ]
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    image = models.ForeignKey(Media, on_delete=models.PROTECT, related_name='news_items')
    content = models.TextField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_DRAFT, db_index=True)
    published_at = models.DateTimeField(null=True, blank=True, db_index=True)
    authors = models.ManyToManyField(User, related_name='news_authored')
    meta_title = models.CharField(max_length=255, blank=True)
    meta_description = models.TextField(blank=True)
    meta_image = models.ForeignKey(
        Media, null=True, blank=True, on_delete=models.SET_NULL, related_name='+'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-published_at', '-id']
        verbose_name_plural = 'news'

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._unique_slug()
        if self.status == self.STATUS_PUBLISHED and not self.published_at:
            self.published_at = timezone.now()
        super().save(*args, **kwargs)

    def _unique_slug(self) -> str:
        base = slugify(self.title)[:240] or 'news'
        slug, n = base, 2
        while News.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base}-{n}"
            n += 1
        return slug

    def __str__(self) -> str:
        return self.title


class AuditEvent(models.Model):
    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.IntegerField(blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at'], name='care_audite_action_8f2d10_idx'),
            models.Index(fields=['object_type', 'object_id', 'created_at'], name='care_audite_object__1b7e52_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.action}:{self.user_id}@{self.created_at:%F %T}"
