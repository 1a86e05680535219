from django.apps import AppConfig


class SaferpayConfig(AppConfig):
    name = 'saferpay'
    verbose_name = 'Saferpay'
    default_auto_field = 'django.db.models.AutoField'
