from django.apps import AppConfig


class WemdConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'wemd'
    verbose_name = 'WeMD typesetting'
