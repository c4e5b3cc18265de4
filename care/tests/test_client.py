"""PawieClient against the live test server through DRF's RequestsClient."""
import io

import pytest
from rest_framework.test import RequestsClient

from care.client import PawieAPIError, PawieClient
from care.models import User

from .helpers import GIF_BYTES, PASSWORD, make_pet, make_user

pytestmark = pytest.mark.django_db


@pytest.fixture
def api():
    return PawieClient('http://testserver/', session=RequestsClient())


def test_login_and_me(api):
    make_user('olivia')
    data = api.login('olivia', PASSWORD)
    assert api.token == data['token']
    assert api.me()['username'] == 'olivia'


def test_error_carries_field_messages(api):
    make_user('olivia')
    api.login('olivia', PASSWORD)
    with pytest.raises(PawieAPIError) as exc:
        api.create_pet({'name': 'L', 'species': 'dog'})
    assert exc.value.status == 400
    fields = {e['field'] for e in exc.value.errors}
    assert {'name', 'photo'} <= fields


def test_not_found_is_raised(api):
    make_user('olivia')
    api.login('olivia', PASSWORD)
    with pytest.raises(PawieAPIError) as exc:
        api.get_pet(9999)
    assert exc.value.status == 404
    assert exc.value.message == 'Pet with ID 9999 not found'


def test_pet_workflow(api):
    make_user('olivia')
    api.login('olivia', PASSWORD)
    media = api.upload_media(io.BytesIO(GIF_BYTES), 'luna.gif', 'image/gif', alt='Luna')
    pet = api.create_pet({'name': 'Luna', 'species': 'dog', 'photo': media['id']})
    assert pet['photo']['id'] == media['id']

    vaccine = api.add_vaccine(pet['id'], {'vaccineType': 'Rabies', 'administrationDate': '2024-05-01'})
    api.update_vaccine(pet['id'], vaccine['id'], {'lotNumber': 'RB-7'})
    api.add_allergy(pet['id'], {'allergie': 'Pollen'})
    record = api.get_medical_record(pet['id'])
    assert record['vaccines'][0]['lotNumber'] == 'RB-7'
    assert record['allergies'][0]['allergie'] == 'Pollen'

    api.delete_vaccine(pet['id'], vaccine['id'])
    assert api.get_medical_record(pet['id'])['vaccines'] == []

    care = api.update_daily_care(pet['id'], {'feeding': {'foodType': 'Kibble'}})
    assert care['feeding']['foodType'] == 'Kibble'


def test_treatment_and_evolution_sections(api):
    pet = make_pet(make_user('olivia'))
    api.login('olivia', PASSWORD)
    treatment = api.add_medical_treatment(pet.pk, {'medicine': 'Amoxicillin', 'dose': '50mg'})
    api.update_medical_treatment(pet.pk, treatment['id'], {'duration': '7 days'})
    entry = api.add_evolution_entry(pet.pk, {'date': '2024-05-02', 'notes': 'Eating well'})
    api.update_evolution_entry(pet.pk, entry['id'], {'treatmentChanges': 'Lower dose'})

    record = api.get_medical_record(pet.pk)
    assert record['medicalTreatments'][0]['duration'] == '7 days'
    assert record['evolutionTracking'][0]['treatmentChanges'] == 'Lower dose'

    api.delete_medical_treatment(pet.pk, treatment['id'])
    api.delete_evolution_entry(pet.pk, entry['id'])
    record = api.get_medical_record(pet.pk)
    assert record['medicalTreatments'] == []
    assert record['evolutionTracking'] == []


def test_reminders_and_documents(api):
    owner = make_user('olivia')
    pet = make_pet(owner)
    api.login('olivia', PASSWORD)
    reminder = api.add_reminder(pet.pk, {'type': 'bath', 'date': '2999-01-01'})
    api.update_reminder(pet.pk, reminder['id'], {'time': '10:00'})
    feed = api.list_reminders(filter='all', pet_id=pet.pk)
    assert feed['total'] == 1
    assert feed['data'][0]['time'] == '10:00'
    api.delete_reminder(pet.pk, reminder['id'])
    assert api.list_reminders(filter='all')['total'] == 0

    doc = api.upload_document(io.BytesIO(b'%PDF-1.4'), 'blood.pdf', 'application/pdf', title='Bloodwork')
    assert api.get_document(doc['id'])['title'] == 'Bloodwork'


def test_news_listing_is_public(api):
    make_user('root', role=User.ROLE_ADMIN)
    assert api.list_news()['totalDocs'] == 0
