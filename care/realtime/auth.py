"""
WebSocket authentication from the page cookie.

Must be wrapped by ``channels.sessions.CookieMiddleware`` so that
``scope["cookies"]`` is populated.
"""
from channels.db import database_sync_to_async
from channels.middleware import BaseMiddleware
from django.conf import settings
from django.contrib.auth.models import AnonymousUser

from care.authentication import user_from_token


@database_sync_to_async
def _resolve(key):
    return user_from_token(key) or AnonymousUser()


class CookieTokenAuthMiddleware(BaseMiddleware):
    async def __call__(self, scope, receive, send):
        scope = dict(scope)
        key = scope.get("cookies", {}).get(settings.AUTH_COOKIE_NAME)
        scope["user"] = await _resolve(key)
        return await super().__call__(scope, receive, send)
