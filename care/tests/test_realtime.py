"""Live update consumer, the broadcast helper and the due-reminder command."""
import datetime
import json

import pytest
from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser
from django.core.management import CommandError, call_command

from care.models import Reminder, User
from care.realtime.consumers import UpdatesConsumer
from care.services import notify

from .helpers import make_pet, make_user


def test_anonymous_socket_is_refused():
    async def scenario():
        communicator = WebsocketCommunicator(UpdatesConsumer.as_asgi(), '/ws/updates/')
        communicator.scope['user'] = AnonymousUser()
        connected, code = await communicator.connect()
        assert connected is False
        assert code == 4401

    async_to_sync(scenario)()


@pytest.mark.django_db(transaction=True)
def test_member_receives_group_events():
    user = User(id=42, username='olivia')

    async def scenario():
        communicator = WebsocketCommunicator(UpdatesConsumer.as_asgi(), '/ws/updates/')
        communicator.scope['user'] = user
        connected, _ = await communicator.connect()
        assert connected
        welcome = json.loads(await communicator.receive_from())
        assert welcome['type'] == 'welcome'

        await get_channel_layer().group_send(notify.user_group(42), {
            'type': 'reminders.changed', 'petId': 3, 'action': 'created', 'reminderId': 9,
        })
        event = json.loads(await communicator.receive_from())
        assert event['action'] == 'created'
        assert event['reminderId'] == 9
        await communicator.disconnect()

    async_to_sync(scenario)()


def test_broadcast_reports_layer_failure(monkeypatch):
    class BrokenLayer:
        async def group_send(self, group, event):
            raise OSError('redis unavailable')

    monkeypatch.setattr(notify, 'get_channel_layer', lambda: BrokenLayer())
    assert notify.broadcast_to_user(1, {'type': 'reminders.changed'}) is False


def test_broadcast_without_layer(monkeypatch):
    monkeypatch.setattr(notify, 'get_channel_layer', lambda: None)
    assert notify.broadcast_to_user(1, {'type': 'reminders.changed'}) is False


@pytest.mark.django_db
def test_send_due_reminders(monkeypatch, capsys):
    sent = []
    monkeypatch.setattr('care.management.commands.send_due_reminders.broadcast_to_user',
                        lambda user_id, event: sent.append((user_id, event)) or True)
    owner = make_user('olivia')
    carer = make_user('carl', role=User.ROLE_CARER)
    pet = make_pet(owner, pet_carer=carer)
    day = datetime.date(2024, 6, 15)
    Reminder.objects.create(pet=pet, type='vaccine', date=day, time='09:00')
    Reminder.objects.create(pet=pet, type='bath', date=day + datetime.timedelta(days=1))

    call_command('send_due_reminders', '--date', '2024-06-15')

    assert sorted(uid for uid, _ in sent) == sorted([owner.pk, carer.pk])
    event = sent[0][1]
    assert event['type'] == 'reminder.due'
    assert event['reminder']['petName'] == 'Luna'
    assert event['reminder']['type'] == 'vaccine'
    assert '1 reminders due on 2024-06-15, 2 events sent' in capsys.readouterr().out


def test_send_due_reminders_rejects_bad_date():
    with pytest.raises(CommandError):
        call_command('send_due_reminders', '--date', 'tomorrow')


@pytest.mark.django_db
def test_seed_demo_is_idempotent():
    from care.models import News, Pet
    call_command('seed_demo')
    call_command('seed_demo')
    assert User.objects.filter(username__in=['admin', 'owner', 'carer']).count() == 3
    assert Pet.objects.filter(name='Luna').count() == 1
    assert News.objects.filter(slug='welcome-to-pawie').count() == 1
