"""
Token authentication for the API and the server-rendered pages.

API clients send ``Authorization: Token <key>``.  Browsers carry the
same key in the page cookie set at login; :func:`user_from_token` is
the single lookup used by the page middleware and the WebSocket
middleware.
"""
from __future__ import annotations

from rest_framework import authentication
from rest_framework.authtoken.models import Token


class TokenAuthentication(authentication.TokenAuthentication):
    """DRF token authentication using the ``Token`` keyword."""

    keyword = 'Token'


def user_from_token(key: str | None):
    """Return the active user owning ``key`` or ``None``."""
    if not key:
        return None
    token = Token.objects.select_related('user').filter(key=key).first()
    if token is None or not token.user.is_active:
        return None
    return token.user
