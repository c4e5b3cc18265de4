"""
Server-rendered pages of the public site and the member area.

Member pages sit under ``PROTECTED_PATH_PREFIXES``; by the time they
run, ``ProtectedPageMiddleware`` has put the cookie user on
``request.pawie_user``.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.core.paginator import Paginator
from django.http import Http404, HttpResponseRedirect
from django.shortcuts import render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST
from rest_framework.exceptions import NotFound
from rest_framework.authtoken.models import Token

from care.authentication import user_from_token
from care.permissions import can_edit_pet, is_admin
from care.serializers.accounts import LoginSerializer, UserUpdateSerializer, validate_registration_form
from care.serializers.pets import PetSerializer
from care.services import accounts as account_service
from care.services import medical as medical_service
from care.services import news as news_service
from care.services import pets as pet_service
from care.services import reminders as reminder_service
from care.views.accounts import clear_auth_cookie, set_auth_cookie

logger = logging.getLogger(__name__)

DEFAULT_AFTER_LOGIN = '/my-dashboard'


def page_user(request):
    """User for the current page, from the middleware or the cookie."""
    user = getattr(request, 'pawie_user', None)
    if user is None:
        user = user_from_token(request.COOKIES.get(settings.AUTH_COOKIE_NAME))
    return user


def _member(request):
    user = page_user(request)
    if user is None:
        logger.debug("member page %s without a resolved user", request.path)
        raise Http404
    return user


def _safe_redirect(request, target: str | None) -> str:
    if target and url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()},
                                                  require_https=request.is_secure()):
        return target
    return DEFAULT_AFTER_LOGIN


def _render(request, template, context=None, status=200):
    ctx = {'current_user': page_user(request)}
    ctx.update(context or {})
    return render(request, f'care/{template}', ctx, status=status)


def home(request):
    return _render(request, 'home.html', {'latest_news': news_service.latest_published(3)})


def news_list(request):
    paginator = Paginator(news_service.visible_news(None).order_by('-published_at', '-id'),
                          settings.NEWS_PAGE_SIZE)
    page = paginator.get_page(request.GET.get('page'))
    return _render(request, 'news_list.html', {'page': page})


def news_detail(request, slug: str):
    try:
        news = news_service.get_news_by_slug(None, slug)
    except NotFound:
        raise Http404
    return _render(request, 'news_detail.html', {'news': news})


def contact(request):
    return _render(request, 'contact.html', {
        'phone': settings.CONTACT_PHONE,
        'email': settings.CONTACT_EMAIL,
    })


@require_http_methods(['GET', 'POST'])
def login_page(request):
    redirect_to = request.POST.get('redirect') or request.GET.get('redirect') or ''
    if request.method == 'GET':
        return _render(request, 'login.html', {'redirect': redirect_to})

    s = LoginSerializer(data=request.POST)
    user = None
    if s.is_valid():
        user = account_service.authenticate_account(request, s.validated_data['account'], s.validated_data['password'])
    if user is None:
        return _render(request, 'login.html', {
            'redirect': redirect_to,
            'username': request.POST.get('username', ''),
            'error': 'Invalid username or password',
        }, status=400)
    if is_admin(user):
        target = settings.ADMIN_REDIRECT_URL
    else:
        target = _safe_redirect(request, redirect_to)
    resp = HttpResponseRedirect(target)
    key, _ = account_service.issue_tokens(user)
    set_auth_cookie(resp, key)
    return resp


@require_http_methods(['GET', 'POST'])
def signup_page(request):
    if request.method == 'GET':
        return _render(request, 'signup.html', {'form': {}, 'errors': {}})

    success, data, errors = validate_registration_form(request.POST)
    if not success:
        form = {k: v for k, v in request.POST.items() if 'password' not in k.lower()}
        return _render(request, 'signup.html', {'form': form, 'errors': errors}, status=400)
    user = account_service.register_user(data)
    key, _ = account_service.issue_tokens(user)
    resp = HttpResponseRedirect(DEFAULT_AFTER_LOGIN)
    set_auth_cookie(resp, key)
    return resp


@require_POST
def logout_page(request):
    key = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
    if key:
        Token.objects.filter(key=key).delete()
    resp = HttpResponseRedirect('/')
    clear_auth_cookie(resp)
    return resp


def dashboard(request):
    user = _member(request)
    upcoming = reminder_service.reminders_for_user(user, filter='upcoming', limit=3)
    return _render(request, 'dashboard.html', {
        'owned_pets': user.owned_pets.select_related('photo').order_by('name'),
        'cared_pets': user.cared_pets.select_related('photo').order_by('name'),
        'upcoming': upcoming['data'],
        'has_more_reminders': upcoming['hasMore'],
    })


@require_http_methods(['GET', 'POST'])
def profile(request):
    user = _member(request)
    errors = {}
    if request.method == 'POST':
        data = {k: request.POST[k] for k in ('name', 'email', 'phone', 'address', 'bio') if k in request.POST}
        s = UserUpdateSerializer(user, data=data, partial=True)
        if s.is_valid():
            account_service.update_user(user, user, s.validated_data)
            return HttpResponseRedirect('/profile')
        errors = {k: str(v[0]) for k, v in s.errors.items()}
    return _render(request, 'profile.html', {'profile': user, 'errors': errors},
                   status=400 if errors else 200)


def reminders(request):
    user = _member(request)
    current = request.GET.get('filter', 'upcoming')
    if current not in ('all', 'upcoming', 'past'):
        current = 'upcoming'
    result = reminder_service.reminders_for_user(user, filter=current)
    return _render(request, 'reminders.html', {
        'reminders': result['data'],
        'total': result['total'],
        'filter': current,
        'filters': ['upcoming', 'past', 'all'],
    })


def pet_detail(request, pet_id: int):
    user = _member(request)
    try:
        pet = pet_service.get_pet_for(user, pet_id)
    except NotFound:
        raise Http404
    return _render(request, 'pet_detail.html', {
        'pet': pet,
        'can_edit': can_edit_pet(user, pet),
        'medical_record': medical_service.get_medical_record(pet, context={'request': request}),
        'daily_care': pet_service.get_daily_care(pet),
        'reminders': pet.reminders.order_by('date', 'time', 'id'),
    })


@require_http_methods(['GET', 'POST'])
def pet_edit(request, pet_id: int):
    user = _member(request)
    try:
        pet = pet_service.get_pet_for(user, pet_id)
    except NotFound:
        raise Http404
    if not can_edit_pet(user, pet):
        return HttpResponseRedirect(f'/pets/{pet.pk}')

    errors = {}
    if request.method == 'POST':
        fields = ('name', 'species', 'breed', 'sex', 'age', 'height', 'weight')
        data = {k: request.POST[k] for k in fields if k in request.POST}
        s = PetSerializer(pet, data=data, partial=True, context={'request': request})
        if s.is_valid():
            pet_service.update_pet(user, pet, s.validated_data)
            return HttpResponseRedirect(f'/pets/{pet.pk}')
        errors = {k: str(v[0]) for k, v in s.errors.items()}
    return _render(request, 'pet_edit.html', {
        'pet': pet,
        'errors': errors,
        'species_choices': pet.SPECIES_CHOICES,
        'sex_choices': pet.SEX_CHOICES,
    }, status=400 if errors else 200)
