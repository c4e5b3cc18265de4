import datetime

import pytest
from django.urls import reverse

from care.models import Reminder, User
from care.services import reminders as reminder_service
from care.services.reminders import aggregate_reminders

from .helpers import client_for, make_pet, make_user

TODAY = datetime.date(2024, 6, 15)


def item(pet_id, day, type_='vaccine', time='', **extra):
    return dict({'petId': pet_id, 'date': TODAY + datetime.timedelta(days=day), 'type': type_, 'time': time},
                **extra)


def test_upcoming_sorted_and_marked():
    result = aggregate_reminders([
        item(1, 3, 'bath'),
        item(1, 0, 'vaccine', '09:30'),
        item(2, 0, 'haircut'),
        item(1, -2, 'deworming'),
    ], filter='upcoming', today=TODAY)
    assert [r['type'] for r in result['data']] == ['vaccine', 'haircut', 'bath']
    assert all(r['isPast'] is False for r in result['data'])
    assert result['total'] == 3
    assert result['hasMore'] is False


def test_past_filter():
    result = aggregate_reminders([item(1, -1), item(1, 0), item(1, -5)], filter='past', today=TODAY)
    assert [r['date'] for r in result['data']] == [TODAY - datetime.timedelta(days=5),
                                                  TODAY - datetime.timedelta(days=1)]
    assert all(r['isPast'] for r in result['data'])


def test_timed_before_untimed_on_same_day():
    result = aggregate_reminders([
        item(1, 1, 'other'),
        item(1, 1, 'bath', '18:00'),
        item(1, 1, 'medication', '8:15'),
    ], filter='all', today=TODAY)
    assert [r['type'] for r in result['data']] == ['medication', 'bath', 'other']


def test_duplicates_collapse():
    result = aggregate_reminders([
        item(1, 1, 'bath', '10:00', id=1),
        item(1, 1, 'bath', '10:00', id=2),
        item(2, 1, 'bath', '10:00', id=3),
    ], filter='all', today=TODAY)
    assert [r['id'] for r in result['data']] == [1, 3]


def test_limit_reports_more():
    result = aggregate_reminders([item(1, d) for d in range(5)], filter='all', limit=2, today=TODAY)
    assert len(result['data']) == 2
    assert result['total'] == 5
    assert result['hasMore'] is True


def test_non_positive_limit_returns_everything():
    for limit in (0, -1):
        result = aggregate_reminders([item(1, d) for d in range(5)], filter='all', limit=limit, today=TODAY)
        assert len(result['data']) == 5
        assert result['hasMore'] is False


def test_malformed_time_sorts_as_untimed():
    result = aggregate_reminders([
        item(1, 1, 'other', '9am'),
        item(1, 1, 'bath', '18:00'),
        item(1, 1, 'haircut', ':'),
    ], filter='all', today=TODAY)
    assert [r['type'] for r in result['data']] == ['bath', 'haircut', 'other']


@pytest.mark.django_db
def test_model_rejects_out_of_range_time():
    from django.core.exceptions import ValidationError
    pet = make_pet(make_user('olivia'))
    reminder = Reminder(pet=pet, type='bath', date=TODAY, time='99:99')
    with pytest.raises(ValidationError):
        reminder.full_clean()
    reminder.time = '23:59'
    reminder.full_clean()


@pytest.mark.django_db
class TestReminderEndpoints:
    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch):
        self.sent = []
        monkeypatch.setattr(reminder_service, 'broadcast_to_user',
                            lambda user_id, event: self.sent.append((user_id, event)) or True)
        self.owner = make_user('olivia')
        self.carer = make_user('carl', role=User.ROLE_CARER)
        self.pet = make_pet(self.owner, pet_carer=self.carer)

    def test_create_and_notify(self):
        r = client_for(self.owner).post(reverse('pet-reminders', args=[self.pet.pk]), {
            'type': 'vaccine', 'date': '2030-01-02', 'time': '09:00', 'description': 'Booster',
        })
        assert r.status_code == 201
        assert r.data['petId'] == self.pet.pk
        recipients = sorted(uid for uid, _ in self.sent)
        assert recipients == sorted([self.owner.pk, self.carer.pk])
        assert self.sent[0][1]['type'] == 'reminders.changed'
        assert self.sent[0][1]['action'] == 'created'

    def test_required_fields(self):
        r = client_for(self.owner).post(reverse('pet-reminders', args=[self.pet.pk]), {})
        fields = {e['field']: e['message'] for e in r.data['error']['errors']}
        assert fields == {'type': 'Reminder type is required', 'date': 'Reminder date is required'}

    def test_bad_time(self):
        r = client_for(self.owner).post(reverse('pet-reminders', args=[self.pet.pk]),
                                        {'type': 'bath', 'date': '2030-01-02', 'time': 'noon'})
        assert r.status_code == 400

    @pytest.mark.parametrize('value', ['99:99', '24:00', '12:60', '10:00:75'])
    def test_out_of_range_time(self, value):
        r = client_for(self.owner).post(reverse('pet-reminders', args=[self.pet.pk]),
                                        {'type': 'bath', 'date': '2030-01-02', 'time': value})
        assert r.status_code == 400
        assert r.data['error']['message'] == 'Time must use HH:MM or HH:MM:SS format'
        assert not Reminder.objects.exists()

    def test_feed_tolerates_stored_malformed_time(self):
        future = datetime.date.today() + datetime.timedelta(days=3)
        Reminder.objects.create(pet=self.pet, type='bath', date=future, time='9am')
        Reminder.objects.create(pet=self.pet, type='vaccine', date=future, time='08:00')
        r = client_for(self.owner).get(reverse('reminders'), {'filter': 'all'})
        assert r.status_code == 200
        assert [d['type'] for d in r.data['data']] == ['vaccine', 'bath']

    def test_negative_limit_means_no_limit(self):
        future = datetime.date.today() + datetime.timedelta(days=3)
        for type_ in ('bath', 'haircut', 'vaccine'):
            Reminder.objects.create(pet=self.pet, type=type_, date=future)
        r = client_for(self.owner).get(reverse('reminders'), {'limit': -1})
        assert r.status_code == 200
        assert len(r.data['data']) == 3
        assert r.data['hasMore'] is False

    def test_carer_can_manage(self):
        client = client_for(self.carer)
        r = client.post(reverse('pet-reminders', args=[self.pet.pk]), {'type': 'bath', 'date': '2030-01-02'})
        assert r.status_code == 201
        url = reverse('pet-reminder-detail', args=[self.pet.pk, r.data['id']])
        assert client.patch(url, {'description': 'Use oatmeal shampoo'}).status_code == 200
        assert client.delete(url).status_code == 204
        assert [e['action'] for _, e in self.sent][-1] == 'deleted'

    def test_stranger_cannot_see(self):
        stranger = make_user('oscar')
        r = client_for(stranger).get(reverse('pet-reminders', args=[self.pet.pk]))
        assert r.status_code == 404

    def test_missing_reminder(self):
        r = client_for(self.owner).get(reverse('pet-reminder-detail', args=[self.pet.pk, 777]))
        assert r.status_code == 404
        assert r.data['error']['message'] == 'Reminder with ID 777 not found'

    def test_feed_across_pets(self):
        other = make_pet(self.owner, name='Rex')
        future = datetime.date.today() + datetime.timedelta(days=10)
        past = datetime.date.today() - datetime.timedelta(days=10)
        Reminder.objects.create(pet=self.pet, type='bath', date=future)
        Reminder.objects.create(pet=other, type='vaccine', date=future, time='08:00')
        Reminder.objects.create(pet=other, type='haircut', date=past)
        r = client_for(self.owner).get(reverse('reminders'))
        assert r.status_code == 200
        assert r.data['ok'] is True
        assert [(d['petName'], d['type']) for d in r.data['data']] == [('Rex', 'vaccine'), ('Luna', 'bath')]
        assert r.data['data'][0]['date'] == future.isoformat()

        r = client_for(self.owner).get(reverse('reminders'), {'filter': 'past'})
        assert [d['type'] for d in r.data['data']] == ['haircut']

        r = client_for(self.owner).get(reverse('reminders'), {'filter': 'all', 'limit': 1})
        assert r.data['total'] == 3
        assert r.data['hasMore'] is True

        r = client_for(self.carer).get(reverse('reminders'), {'filter': 'all'})
        assert {d['petName'] for d in r.data['data']} == {'Luna'}


@pytest.mark.django_db
def test_due_reminders_for_day():
    pet = make_pet(make_user('olivia'))
    Reminder.objects.create(pet=pet, type='bath', date=TODAY)
    Reminder.objects.create(pet=pet, type='vaccine', date=TODAY + datetime.timedelta(days=1))
    assert [r.type for r in reminder_service.due_reminders(TODAY)] == ['bath']
