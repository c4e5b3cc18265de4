"""Medical record sections over the API and the service layer."""
import pytest
from django.urls import reverse
from rest_framework.exceptions import NotFound, PermissionDenied

from care.models import Document, User, Vaccine
from care.services import medical as medical_service

from .helpers import client_for, make_pet, make_user

pytestmark = pytest.mark.django_db


@pytest.fixture
def owner():
    return make_user('olivia')


@pytest.fixture
def carer():
    return make_user('carl', role=User.ROLE_CARER)


@pytest.fixture
def pet(owner, carer):
    return make_pet(owner, pet_carer=carer)


def section_url(pet, section, entry_id=None):
    if entry_id is None:
        return reverse('medical-section', args=[pet.pk, section])
    return reverse('medical-entry', args=[pet.pk, section, entry_id])


def test_record_lists_every_section(owner, pet):
    r = client_for(owner).get(reverse('medical-record', args=[pet.pk]))
    assert r.status_code == 200
    assert set(r.data) == {
        'vaccines', 'deworming', 'vetAppointments', 'surgicalProcedures',
        'allergies', 'laboratoryTests', 'medicalTreatments', 'evolutionTracking',
    }
    assert all(v == [] for v in r.data.values())


def test_add_vaccine_ignores_client_id(owner, pet):
    r = client_for(owner).post(section_url(pet, 'vaccines'), {
        'id': 999, 'vaccineType': 'Rabies', 'administrationDate': '2024-05-01T10:00:00.000Z',
        'nextDosis': '2025-05-01', 'lotNumber': 'L-42',
    })
    assert r.status_code == 201
    assert r.data['id'] != 999
    assert r.data['administrationDate'] == '2024-05-01'
    assert Vaccine.objects.get(pk=r.data['id']).pet == pet


def test_entries_get_distinct_ids(owner, pet):
    client = client_for(owner)
    a = client.post(section_url(pet, 'allergies'), {'allergie': 'Pollen'}).data['id']
    b = client.post(section_url(pet, 'allergies'), {'allergie': 'Chicken'}).data['id']
    assert a != b
    names = [e['allergie'] for e in client.get(section_url(pet, 'allergies')).data]
    assert names == ['Pollen', 'Chicken']


def test_deworming_type_is_checked(owner, pet):
    r = client_for(owner).post(section_url(pet, 'deworming'), {'type': 'topical'})
    assert r.status_code == 400
    assert r.data['error']['message'] == 'Invalid deworming type: "topical". Must be one of: internal, external'


def test_vet_appointment_requires_date(owner, pet):
    r = client_for(owner).post(section_url(pet, 'vetAppointments'), {'reason': 'Check-up', 'date': ''})
    assert r.status_code == 400
    assert r.data['error']['message'] == 'Appointment date is required'


def test_surgical_procedure_messages(owner, pet):
    r = client_for(owner).post(section_url(pet, 'surgicalProcedures'), {})
    fields = {e['field']: e['message'] for e in r.data['error']['errors']}
    assert fields == {'type': 'Procedure type is required', 'date': 'Procedure date is required'}


def test_update_entry(owner, pet):
    client = client_for(owner)
    entry = client.post(section_url(pet, 'medicalTreatments'), {'medicine': 'Amoxicillin', 'dose': '50mg'}).data
    r = client.patch(section_url(pet, 'medicalTreatments', entry['id']), {'dose': '75mg'})
    assert r.status_code == 200
    assert r.data['medicine'] == 'Amoxicillin'
    assert r.data['dose'] == '75mg'


def test_put_replaces_entry(owner, pet):
    client = client_for(owner)
    entry = client.post(section_url(pet, 'medicalTreatments'), {'medicine': 'Amoxicillin', 'dose': '50mg'}).data
    r = client.put(section_url(pet, 'medicalTreatments', entry['id']), {'medicine': 'Meloxicam'})
    assert r.status_code == 200
    assert r.data['medicine'] == 'Meloxicam'


def test_delete_entry(owner, pet):
    client = client_for(owner)
    entry = client.post(section_url(pet, 'vaccines'), {'vaccineType': 'Parvo'}).data
    assert client.delete(section_url(pet, 'vaccines', entry['id'])).status_code == 204
    assert not Vaccine.objects.filter(pk=entry['id']).exists()


def test_missing_entry_message(owner, pet):
    r = client_for(owner).patch(section_url(pet, 'vetAppointments', 12345), {'reason': 'x'})
    assert r.status_code == 404
    assert r.data['error']['message'] == 'Vet appointment with ID 12345 not found'


def test_entry_of_other_pet_is_not_found(owner, pet):
    other_pet = make_pet(owner, name='Rex')
    client = client_for(owner)
    entry = client.post(section_url(other_pet, 'allergies'), {'allergie': 'Dust'}).data
    r = client.get(section_url(pet, 'allergies', entry['id']))
    assert r.status_code == 404


def test_unknown_section(owner, pet):
    r = client_for(owner).get(section_url(pet, 'horoscope'))
    assert r.status_code == 404


def test_carer_writes_evolution_only(carer, pet):
    client = client_for(carer)
    r = client.post(section_url(pet, 'evolutionTracking'), {'date': '2024-06-01', 'notes': 'Eating well'})
    assert r.status_code == 201
    r = client.post(section_url(pet, 'vaccines'), {'vaccineType': 'Rabies'})
    assert r.status_code == 403


def test_lab_test_links_document(owner, pet):
    doc = Document.objects.create(title='Bloodwork', filename='blood.pdf', uploaded_by=owner)
    r = client_for(owner).post(section_url(pet, 'laboratoryTests'), {
        'type': 'blood', 'date': '2024-02-02', 'resultsDocs': doc.pk,
    })
    assert r.status_code == 201
    assert r.data['resultsDocs'] == doc.pk


def test_text_fields_are_sanitised(owner, pet):
    r = client_for(owner).post(section_url(pet, 'allergies'), {
        'allergie': 'Pollen', 'description': '<img src=x onerror=alert(1)>Sneezing',
    })
    assert r.data['description'] == 'Sneezing'


def test_service_guards(owner, pet):
    stranger = make_user('oscar')
    section = medical_service.get_section('vaccines')
    with pytest.raises(PermissionDenied):
        medical_service.add_entry(stranger, pet, section, {'vaccineType': 'Rabies'})
    with pytest.raises(NotFound):
        medical_service.get_section('nope')
