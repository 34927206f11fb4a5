from django.apps import AppConfig


class SitesettingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sitesetting'
    verbose_name = 'Site settings'
