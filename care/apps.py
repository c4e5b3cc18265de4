from django.apps import AppConfig


class CareConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'care'
    verbose_name = 'Pet care'

    def ready(self):
        # News cache revalidation hooks
        from . import signals  # noqa: F401
