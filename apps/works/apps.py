from django.apps import AppConfig


class WorksConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.works'
    label = 'works'
