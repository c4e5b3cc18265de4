from django.db.models.signals import m2m_changed, post_delete, post_save
from django.dispatch import receiver

from .models import News
from .services.news import bump_version


@receiver(post_save, sender=News)
@receiver(post_delete, sender=News)
def revalidate_news(sender, instance, **kwargs):
    bump_version()


@receiver(m2m_changed, sender=News.authors.through)
def revalidate_news_authors(sender, instance, action, **kwargs):
    if action in ('post_add', 'post_remove', 'post_clear'):
        bump_version()
