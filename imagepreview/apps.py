from django.apps import AppConfig


class ImagePreviewConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'imagepreview'
    verbose_name = 'Image previews'
