"""
Account services: registration, login tokens and profile updates.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from django.contrib.auth import authenticate
from django.db import transaction
from rest_framework.authtoken.models import Token
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken

from care.models import CarerCertification, CarerProfile, User
from care.permissions import is_admin
from care.services.audit import log_action

logger = logging.getLogger(__name__)


def register_user(data: Dict[str, Any]) -> User:
    """Create a user from validated sign-up data."""
    with transaction.atomic():
        user = User.objects.create_user(
            username=data['username'],
            email=data['email'],
            password=data['password'],
            name=data['name'],
            phone=data.get('phone') or '',
            address=data.get('address') or '',
            bio=data.get('bio') or '',
            role=data['roles'],
        )
        if user.role == User.ROLE_CARER:
            CarerProfile.objects.create(user=user)
    logger.info("registered user %s (%s)", user.username, user.role)
    log_action(user=user, action='register', object_type='user', object_id=user.id,
               detail={'role': user.role})
    return user


def authenticate_account(request, account: str, password: str) -> Optional[User]:
    """Authenticate by username, falling back to a case-insensitive email match."""
    user = authenticate(request, username=account, password=password)
    if user is None and '@' in account:
        match = User.objects.filter(email__iexact=account).first()
        if match is not None:
            user = authenticate(request, username=match.username, password=password)
    ip = request.META.get('REMOTE_ADDR') if request is not None else None
    if user is None:
        logger.info("login failed for %s", account)
        log_action(user=None, action='login_failed', object_type='user',
                   detail={'account': account, 'ip': ip})
        return None
    logger.info("login ok for %s", user.username)
    log_action(user=user, action='login', object_type='user', object_id=user.id, detail={'ip': ip})
    return user


def issue_tokens(user: User) -> Tuple[str, RefreshToken]:
    token, _ = Token.objects.get_or_create(user=user)
    return token.key, RefreshToken.for_user(user)


def revoke_tokens(user: User, refresh: Optional[str] = None) -> int:
    """Delete the API token and blacklist refresh tokens; returns the blacklist count."""
    Token.objects.filter(user=user).delete()
    if refresh:
        try:
            RefreshToken(refresh).blacklist()
        except TokenError:
            logger.info("logout with invalid refresh token for %s", user.username)
            return 0
        return 1
    count = 0
    for outstanding in OutstandingToken.objects.filter(user=user):
        _, created = BlacklistedToken.objects.get_or_create(token=outstanding)
        count += int(created)
    return count


def get_user_or_404(user_id: int) -> User:
    user = User.objects.filter(pk=user_id).first()
    if user is None:
        raise NotFound(f'User with ID {user_id} not found')
    return user


def _ensure_self_or_admin(actor: User, target: User) -> None:
    if not (is_admin(actor) or actor.pk == target.pk):
        raise PermissionDenied('You can only manage your own account')


def update_user(actor: User, target: User, data: Dict[str, Any]) -> User:
    """Apply validated profile changes to ``target``."""
    _ensure_self_or_admin(actor, target)
    if 'roles' in data and data['roles'] != target.role and not is_admin(actor):
        raise PermissionDenied('Only administrators can change roles')
    carer_fields = {'availability', 'certifications'} & set(data)
    if carer_fields and data.get('roles', target.role) != User.ROLE_CARER:
        raise ValidationError({f: 'Only available for pet carers' for f in carer_fields})

    with transaction.atomic():
        for src, attr in (('name', 'name'), ('email', 'email'), ('phone', 'phone'),
                          ('address', 'address'), ('bio', 'bio'), ('avatar', 'avatar'), ('roles', 'role')):
            if src in data:
                setattr(target, attr, data[src])
        target.save()

        if 'availability' in data:
            profile, _ = CarerProfile.objects.get_or_create(user=target)
            for attr, value in data['availability'].items():
                setattr(profile, attr, value)
            profile.save()
        if 'certifications' in data:
            target.certifications.all().delete()
            CarerCertification.objects.bulk_create(
                CarerCertification(user=target, **item) for item in data['certifications']
            )
    return target


def change_password(user: User, current: str, new: str) -> None:
    if not user.check_password(current):
        raise ValidationError({'currentPassword': 'Current password is incorrect'})
    user.set_password(new)
    user.save(update_fields=['password'])
    # old API tokens stop working with the old password
    Token.objects.filter(user=user).delete()


def delete_user(actor: User, target: User) -> None:
    _ensure_self_or_admin(actor, target)
    log_action(user=actor, action='user_delete', object_type='user', object_id=target.id)
    target.delete()


def list_users(actor: User):
    qs = User.objects.select_related('avatar').order_by('id')
    if not is_admin(actor):
        qs = qs.filter(pk=actor.pk)
    return qs
