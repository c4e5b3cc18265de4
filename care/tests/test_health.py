import pytest
from django.db import DatabaseError

from care.models import AuditEvent
from care.services.audit import log_action

pytestmark = pytest.mark.django_db


def test_healthz(client):
    r = client.get('/healthz')
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True}


def test_metrics_exposed(client):
    r = client.get('/metrics')
    assert r.status_code == 200
    assert b'django_http_requests' in r.content


def test_audit_write(django_user_model):
    user = django_user_model.objects.create_user(username='olivia', password='Secret123')
    event = log_action(user=user, action='pet_create', object_type='pet', object_id=3)
    assert event is not None
    assert AuditEvent.objects.get(pk=event.pk).user == user


def test_audit_failure_is_swallowed(monkeypatch):
    def broken(**kwargs):
        raise DatabaseError('read-only')

    monkeypatch.setattr(AuditEvent.objects, 'create', broken)
    assert log_action(user=None, action='login_failed') is None
