"""
Django admin registrations for the care models.

Administrators manage users, pets, medical records, news and uploads
through ``/admin/``.  Medical record sections and reminders are shown
as inlines on the pet page.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import (
    Allergy,
    AuditEvent,
    CarerCertification,
    CarerProfile,
    DailyCare,
    Deworming,
    Document,
    EvolutionEntry,
    LaboratoryTest,
    Media,
    MedicalTreatment,
    News,
    Pet,
    Reminder,
    SurgicalProcedure,
    User,
    Vaccine,
    VetAppointment,
)


class CarerProfileInline(admin.StackedInline):
    model = CarerProfile
    extra = 0
    readonly_fields = ('rating', 'completed_jobs')


class CarerCertificationInline(admin.TabularInline):
    model = CarerCertification
    extra = 0


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('username', 'name', 'email', 'role', 'is_staff', 'is_active')
    list_filter = ('role', 'is_staff', 'is_active')
    search_fields = ('username', 'name', 'email')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Pawie', {'fields': ('role', 'name', 'phone', 'address', 'bio', 'avatar')}),
    )
    inlines = [CarerProfileInline, CarerCertificationInline]


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    list_display = ('id', 'alt', 'content_type', 'size', 'uploaded_by', 'created_at')
    search_fields = ('alt',)


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'category', 'content_type', 'size', 'uploaded_by', 'created_at')
    search_fields = ('title', 'filename')


class DailyCareInline(admin.StackedInline):
    model = DailyCare
    extra = 0


class ReminderInline(admin.TabularInline):
    model = Reminder
    extra = 0


def _section_inline(section_model):
    return type(f'{section_model.__name__}Inline', (admin.TabularInline,), {
        'model': section_model,
        'extra': 0,
    })


@admin.register(Pet)
class PetAdmin(admin.ModelAdmin):
    list_display = ('name', 'species', 'age', 'pet_owner', 'pet_carer')
    list_filter = ('species', 'sex')
    search_fields = ('name', 'breed', 'pet_owner__username')
    raw_id_fields = ('pet_owner', 'pet_carer', 'photo')
    inlines = [DailyCareInline, ReminderInline] + [
        _section_inline(m) for m in (
            Vaccine, Deworming, VetAppointment, SurgicalProcedure,
            Allergy, LaboratoryTest, MedicalTreatment, EvolutionEntry,
        )
    ]


@admin.register(Reminder)
class ReminderAdmin(admin.ModelAdmin):
    list_display = ('pet', 'type', 'date', 'time')
    list_filter = ('type',)
    date_hierarchy = 'date'


@admin.register(News)
class NewsAdmin(admin.ModelAdmin):
    list_display = ('title', 'status', 'published_at')
    list_filter = ('status',)
    search_fields = ('title', 'content')
    prepopulated_fields = {'slug': ('title',)}
    filter_horizontal = ('authors',)


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('action', 'user', 'object_type', 'object_id', 'created_at')
    list_filter = ('action', 'object_type')
    readonly_fields = ('user', 'action', 'object_type', 'object_id', 'detail', 'created_at')


for _model in (Vaccine, Deworming, VetAppointment, SurgicalProcedure,
               Allergy, LaboratoryTest, MedicalTreatment, EvolutionEntry):
    admin.site.register(_model, list_display=('__str__', 'pet', 'created_at'), raw_id_fields=('pet',))
