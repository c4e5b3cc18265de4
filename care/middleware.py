"""
Login guard for the server-rendered pages.

Pages under ``PROTECTED_PATH_PREFIXES`` need the auth cookie set at
login.  The cookie holds a DRF token key; the middleware resolves it
to a user, sends anonymous visitors to the login page (keeping the
requested path in ``redirect``) and sends admins to the admin UI.
"""
import logging
from urllib.parse import urlencode

from django.conf import settings
from django.db import DatabaseError
from django.http import HttpResponseRedirect

from .authentication import user_from_token
from .permissions import is_admin

logger = logging.getLogger(__name__)


def _is_protected(path: str) -> bool:
    for prefix in settings.PROTECTED_PATH_PREFIXES:
        if path == prefix or path.startswith(prefix.rstrip('/') + '/'):
            return True
    return False


def login_redirect(path: str) -> HttpResponseRedirect:
    return HttpResponseRedirect(f"{settings.LOGIN_PAGE_URL}?{urlencode({'redirect': path})}")


class ProtectedPageMiddleware:
    """Redirect unauthenticated visitors and admins away from member pages."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.pawie_user = None
        path = request.path or ''
        if not _is_protected(path):
            return self.get_response(request)

        key = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
        if not key:
            logger.debug("no auth cookie for %s", path)
            return login_redirect(path)
        try:
            user = user_from_token(key)
        except DatabaseError:
            logger.exception("auth lookup failed for %s", path)
            return self.get_response(request)
        if user is None:
            logger.debug("stale auth cookie for %s", path)
            return login_redirect(path)
        if is_admin(user):
            return HttpResponseRedirect(settings.ADMIN_REDIRECT_URL)
        request.pawie_user = user
        return self.get_response(request)
