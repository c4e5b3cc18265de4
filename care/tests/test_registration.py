import pytest

from care.serializers.accounts import validate_registration_form

from .helpers import make_user

pytestmark = pytest.mark.django_db


def form(**overrides):
    data = {
        'name': 'Olivia Stone',
        'username': 'olivia',
        'email': 'olivia@example.com',
        'password': 'Secret123',
        'confirmPassword': 'Secret123',
        'phone': '600-123-4567',
        'roles': 'petOwner',
        'gdprConsent': True,
    }
    data.update(overrides)
    return data


def test_valid_form():
    ok, data, errors = validate_registration_form(form())
    assert ok is True
    assert errors == {}
    assert data['username'] == 'olivia'
    assert data['roles'] == 'petOwner'


@pytest.mark.parametrize('field, value, message', [
    ('name', 'O', 'Name must be at least 2 characters'),
    ('username', 'ol', 'Username must be at least 3 characters'),
    ('username', 'oli via', 'Username can only contain letters, numbers, underscores and hyphens'),
    ('email', 'not-an-email', 'Please enter a valid email address'),
    ('password', 'short', 'Password must be at least 8 characters'),
    ('password', 'alllower123', 'Password must contain at least one uppercase letter'),
    ('password', 'ALLUPPER123', 'Password must contain at least one lowercase letter'),
    ('password', 'NoDigitsHere', 'Password must contain at least one number'),
    ('phone', '12', 'Please enter a valid phone number'),
    ('roles', 'admin', 'Please select a valid role'),
    ('gdprConsent', False, 'You must accept the GDPR consent to register'),
])
def test_field_messages(field, value, message):
    ok, data, errors = validate_registration_form(form(**{field: value}))
    assert ok is False
    assert data is None
    assert errors[field] == message


def test_password_mismatch():
    ok, _, errors = validate_registration_form(form(confirmPassword='Secret124'))
    assert not ok
    assert errors == {'confirmPassword': 'Passwords do not match'}


def test_missing_consent():
    data = form()
    del data['gdprConsent']
    ok, _, errors = validate_registration_form(data)
    assert not ok
    assert errors['gdprConsent'] == 'You must accept the GDPR consent to register'


def test_duplicate_username_and_email():
    make_user('olivia', email='olivia@example.com')
    ok, _, errors = validate_registration_form(form(username='OLIVIA', email='Olivia@Example.com'))
    assert not ok
    assert errors['username'] == 'This username is already taken'
    assert errors['email'] == 'An account with this email already exists'


def test_phone_is_optional():
    ok, data, _ = validate_registration_form(form(phone=''))
    assert ok
    assert data['phone'] == ''


def test_markup_is_stripped_from_name():
    ok, data, _ = validate_registration_form(form(name='<b>Olivia</b>'))
    assert ok
    assert data['name'] == 'Olivia'
