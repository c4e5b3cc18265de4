"""Shared fixtures-as-functions for the care tests."""
import base64

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from care.models import Media, Pet, User

GIF_BYTES = base64.b64decode('R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7')
PASSWORD = 'Secret123'


def make_user(username, role=User.ROLE_OWNER, **extra):
    extra.setdefault('email', f'{username}@example.com')
    extra.setdefault('name', username.title())
    return User.objects.create_user(username=username, password=PASSWORD, role=role, **extra)


def make_media(owner=None, alt='photo'):
    media = Media(alt=alt, content_type='image/gif', size=len(GIF_BYTES), uploaded_by=owner)
    media.file.save('photo.gif', ContentFile(GIF_BYTES), save=True)
    return media


def make_pet(owner, name='Luna', **extra):
    extra.setdefault('species', 'dog')
    extra.setdefault('photo', make_media(owner))
    return Pet.objects.create(name=name, pet_owner=owner, **extra)


def gif_upload(name='pet.gif'):
    return SimpleUploadedFile(name, GIF_BYTES, content_type='image/gif')


def client_for(user) -> APIClient:
    """Return an authenticated APIClient for the given user."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


def cookie_client(client, user):
    """Put the page auth cookie for ``user`` on a Django test client."""
    token, _ = Token.objects.get_or_create(user=user)
    client.cookies[settings.AUTH_COOKIE_NAME] = token.key
    return client
