"""
Medical record entry serializers and the section registry.

Each section of a pet's medical record is a separate table; the
registry maps the section key used in URLs and payloads to its model,
serializer and the label used in "not found" messages.
"""
from collections import namedtuple

from rest_framework import serializers

from care.models import (
    Allergy,
    Deworming,
    Document,
    EvolutionEntry,
    LaboratoryTest,
    MedicalTreatment,
    SurgicalProcedure,
    Vaccine,
    VetAppointment,
)
from .fields import CleanCharField, LenientDateField


def _text(**kwargs):
    kwargs.setdefault('required', False)
    kwargs.setdefault('allow_blank', True)
    return CleanCharField(**kwargs)


class VaccineSerializer(serializers.ModelSerializer):
    vaccineType = CleanCharField(source='vaccine_type', max_length=255, error_messages={
        'required': 'Vaccine type is required',
        'blank': 'Vaccine type is required',
    })
    administrationDate = LenientDateField(source='administration_date')
    nextDosis = LenientDateField(source='next_dose')
    lotNumber = _text(source='lot_number', max_length=100)

    class Meta:
        model = Vaccine
        fields = ['id', 'vaccineType', 'administrationDate', 'nextDosis', 'lotNumber']


class DewormingSerializer(serializers.ModelSerializer):
    type = serializers.ChoiceField(choices=Deworming.TYPE_CHOICES, error_messages={
        'required': 'Deworming type is required',
        'invalid_choice': 'Invalid deworming type: "{input}". Must be one of: internal, external',
    })
    antiparasitic = _text(max_length=255)
    administrationDate = LenientDateField(source='administration_date')
    frequency = _text(max_length=100)

    class Meta:
        model = Deworming
        fields = ['id', 'type', 'antiparasitic', 'administrationDate', 'frequency']


class VetAppointmentSerializer(serializers.ModelSerializer):
    date = LenientDateField(required=True, allow_null=False, error_messages={
        'required': 'Appointment date is required',
        'null': 'Appointment date is required',
    })
    reason = _text()
    diagnostic = _text()
    treatment = _text()

    class Meta:
        model = VetAppointment
        fields = ['id', 'date', 'reason', 'diagnostic', 'treatment']


class SurgicalProcedureSerializer(serializers.ModelSerializer):
    type = CleanCharField(max_length=255, error_messages={
        'required': 'Procedure type is required',
        'blank': 'Procedure type is required',
    })
    date = LenientDateField(required=True, allow_null=False, error_messages={
        'required': 'Procedure date is required',
        'null': 'Procedure date is required',
    })
    complications = _text()
    medicationPostoperative = _text(source='medication_postoperative')

    class Meta:
        model = SurgicalProcedure
        fields = ['id', 'type', 'date', 'complications', 'medicationPostoperative']


class AllergySerializer(serializers.ModelSerializer):
    allergie = CleanCharField(source='allergy', max_length=255, error_messages={
        'required': 'Allergy name is required',
        'blank': 'Allergy name is required',
    })
    description = _text()

    class Meta:
        model = Allergy
        fields = ['id', 'allergie', 'description']


class LaboratoryTestSerializer(serializers.ModelSerializer):
    type = serializers.ChoiceField(choices=LaboratoryTest.TYPE_CHOICES, error_messages={
        'required': 'Test type is required',
        'invalid_choice': 'Test type is required',
    })
    date = LenientDateField()
    results = _text()
    resultsDocs = serializers.PrimaryKeyRelatedField(
        source='results_doc', queryset=Document.objects.all(), required=False, allow_null=True
    )
    resultsDocsUrl = serializers.SerializerMethodField()

    class Meta:
        model = LaboratoryTest
        fields = ['id', 'type', 'date', 'results', 'resultsDocs', 'resultsDocsUrl']

    def get_resultsDocsUrl(self, obj):
        if not obj.results_doc_id or not obj.results_doc.file:
            return None
        url = obj.results_doc.file.url
        request = self.context.get('request')
        return request.build_absolute_uri(url) if request is not None else url


class MedicalTreatmentSerializer(serializers.ModelSerializer):
    medicine = CleanCharField(max_length=255, error_messages={
        'required': 'Medicine is required',
        'blank': 'Medicine is required',
    })
    dose = _text(max_length=100)
    duration = _text(max_length=100)
    aditionalTerapy = _text(source='additional_therapy')

    class Meta:
        model = MedicalTreatment
        fields = ['id', 'medicine', 'dose', 'duration', 'aditionalTerapy']


class EvolutionEntrySerializer(serializers.ModelSerializer):
    date = LenientDateField(required=True, allow_null=False, error_messages={
        'required': 'Evolution date is required',
        'null': 'Evolution date is required',
    })
    notes = _text()
    treatmentChanges = _text(source='treatment_changes')

    class Meta:
        model = EvolutionEntry
        fields = ['id', 'date', 'notes', 'treatmentChanges']


Section = namedtuple('Section', 'key model serializer label related_name')

SECTIONS = {
    s.key: s for s in (
        Section('vaccines', Vaccine, VaccineSerializer, 'Vaccine', 'vaccines'),
        Section('deworming', Deworming, DewormingSerializer, 'Deworming treatment', 'dewormings'),
        Section('vetAppointments', VetAppointment, VetAppointmentSerializer, 'Vet appointment', 'vet_appointments'),
        Section('surgicalProcedures', SurgicalProcedure, SurgicalProcedureSerializer, 'Surgical procedure', 'surgical_procedures'),
        Section('allergies', Allergy, AllergySerializer, 'Allergy', 'allergies'),
        Section('laboratoryTests', LaboratoryTest, LaboratoryTestSerializer, 'Laboratory test', 'laboratory_tests'),
        Section('medicalTreatments', MedicalTreatment, MedicalTreatmentSerializer, 'Medical treatment', 'medical_treatments'),
        Section('evolutionTracking', EvolutionEntry, EvolutionEntrySerializer, 'Evolution entry', 'evolution_entries'),
    )
}
