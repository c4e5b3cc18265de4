"""
News listing with a versioned cache for anonymous readers.

Every change to a news item bumps ``news:version`` (see
``care.signals``), which retires all cached pages at once.
"""
import math

from django.conf import settings
from django.core.cache import cache
from django.db.models import Q
from rest_framework.exceptions import NotFound

from care.models import News

VERSION_KEY = 'news:version'


def current_version() -> int:
    version = cache.get(VERSION_KEY)
    if version is None:
        cache.add(VERSION_KEY, 1, None)
        version = cache.get(VERSION_KEY, 1)
    return version


def bump_version() -> None:
    try:
        cache.incr(VERSION_KEY)
    except ValueError:
        cache.set(VERSION_KEY, 2, None)


def visible_news(user):
    qs = News.objects.select_related('image', 'meta_image').prefetch_related('authors')
    if user is not None and getattr(user, 'is_authenticated', False):
        return qs
    return qs.filter(status=News.STATUS_PUBLISHED)


def paginate_news(user, page: int, serialize, page_size: int = 0):
    """Return ``{docs, page, totalPages, totalDocs}``, cached for anonymous users."""
    page_size = page_size or settings.NEWS_PAGE_SIZE
    anonymous = user is None or not getattr(user, 'is_authenticated', False)
    ck = f'news:v{current_version()}:p={page}:ps={page_size}'
    if anonymous:
        cached = cache.get(ck)
        if cached is not None:
            return cached

    qs = visible_news(user).order_by('-published_at', '-id')
    total = qs.count()
    total_pages = max(1, math.ceil(total / page_size))
    start = (page - 1) * page_size
    payload = {
        'docs': serialize(list(qs[start:start + page_size])),
        'page': page,
        'totalPages': total_pages,
        'totalDocs': total,
    }
    if anonymous:
        cache.set(ck, payload, settings.NEWS_CACHE_SECONDS)
    return payload


def latest_published(count: int = 3):
    return list(visible_news(None).order_by('-published_at', '-id')[:count])


def get_news_by_slug(user, slug: str) -> News:
    news = visible_news(user).filter(Q(slug=slug)).first()
    if news is None:
        raise NotFound(f'News "{slug}" not found')
    return news
