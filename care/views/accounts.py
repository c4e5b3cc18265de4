"""
Account endpoints: sign-up, login/logout, token refresh and profiles.

Login answers with the DRF token (``token``) and a JWT pair, and also
sets the page cookie so that the server-rendered member pages work
right after an API login.
"""
from __future__ import annotations

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle, SimpleRateThrottle, UserRateThrottle
from rest_framework_simplejwt.views import TokenRefreshView

from care.serializers.accounts import (
    LoginSerializer,
    MeSerializer,
    PasswordChangeSerializer,
    RegisterSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from care.permissions import is_admin
from care.services import accounts as account_service


def set_auth_cookie(response, key: str) -> None:
    response.set_cookie(
        settings.AUTH_COOKIE_NAME, key,
        max_age=settings.AUTH_COOKIE_MAX_AGE,
        httponly=True, samesite='Lax', secure=settings.AUTH_COOKIE_SECURE,
    )


def clear_auth_cookie(response) -> None:
    response.delete_cookie(settings.AUTH_COOKIE_NAME, samesite='Lax')


class LoginRateThrottle(SimpleRateThrottle):
    """Login attempts per client address."""
    scope = 'login'

    def get_cache_key(self, request, view):
        return self.cache_format % {'scope': self.scope, 'ident': self.get_ident(request)}


class SignupRateThrottle(LoginRateThrottle):
    """Sign-up POSTs per client address; reads are not counted."""
    scope = 'signup'

    def allow_request(self, request, view):
        if request.method != 'POST':
            return True
        return super().allow_request(request, view)


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([AnonRateThrottle, LoginRateThrottle])
def login_view(request):
    """Log in with username (or email) and password."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = account_service.authenticate_account(request, s.validated_data['account'], s.validated_data['password'])
    if user is None:
        return Response(
            {'ok': False, 'error': {'code': 'invalid_credentials', 'message': 'Invalid username or password'}},
            status=status.HTTP_400_BAD_REQUEST,
        )
    key, refresh = account_service.issue_tokens(user)
    resp = Response({
        'ok': True,
        'token': key,
        'jwt_access': str(refresh.access_token),
        'jwt_refresh': str(refresh),
        'user': UserSerializer(user, context={'request': request}).data,
    })
    set_auth_cookie(resp, key)
    return resp


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    count = account_service.revoke_tokens(request.user, request.data.get('refresh'))
    resp = Response({'ok': True, 'blacklisted': count})
    clear_auth_cookie(resp)
    return resp


@api_view(['POST'])
@permission_classes([AllowAny])
def refresh_view(request):
    """Return a new access token from a refresh token."""
    resp = TokenRefreshView.as_view()(request._request)
    data = dict(resp.data)
    if 'access' in data:
        data['jwt_access'] = data.pop('access')
    if 'refresh' in data:
        data['jwt_refresh'] = data.pop('refresh')
    return Response(data, status=resp.status_code)


@api_view(['GET'])
@permission_classes([AllowAny])
def me_view(request):
    user = request.user
    if not (user and user.is_authenticated):
        return Response({'error': 'Unauthorized'}, status=status.HTTP_401_UNAUTHORIZED)
    return Response({'user': MeSerializer(user, context={'request': request}).data})


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
@throttle_classes([AnonRateThrottle, UserRateThrottle, SignupRateThrottle])
def users_view(request):
    """``GET`` lists users (admins see everyone); ``POST`` registers a new account."""
    if request.method == 'POST':
        s = RegisterSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        user = account_service.register_user(s.validated_data)
        return Response({'ok': True, 'doc': UserSerializer(user, context={'request': request}).data},
                        status=status.HTTP_201_CREATED)

    if not (request.user and request.user.is_authenticated):
        return Response({'error': 'Unauthorized'}, status=status.HTTP_401_UNAUTHORIZED)
    qs = account_service.list_users(request.user)
    return Response({'docs': UserSerializer(qs, many=True, context={'request': request}).data,
                     'totalDocs': qs.count()})


@api_view(['GET', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def user_detail_view(request, user_id: int):
    target = account_service.get_user_or_404(user_id)
    if request.method == 'GET':
        if not (target.pk == request.user.pk or is_admin(request.user)):
            return Response({'ok': False, 'error': {'code': 'not_found', 'message': f'User with ID {user_id} not found'}},
                            status=status.HTTP_404_NOT_FOUND)
        return Response(UserSerializer(target, context={'request': request}).data)
    if request.method == 'DELETE':
        account_service.delete_user(request.user, target)
        return Response(status=status.HTTP_204_NO_CONTENT)

    s = UserUpdateSerializer(target, data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    user = account_service.update_user(request.user, target, s.validated_data)
    return Response({'ok': True, 'doc': UserSerializer(user, context={'request': request}).data})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def update_password_view(request):
    s = PasswordChangeSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    account_service.change_password(request.user, s.validated_data['currentPassword'], s.validated_data['newPassword'])
    key, _ = account_service.issue_tokens(request.user)
    resp = Response({'ok': True, 'token': key})
    set_auth_cookie(resp, key)
    return resp
