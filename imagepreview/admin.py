from django.db import models
from django.utils.html import format_html
from .widgets import AdminImageWidget, image_url, preview_setting

# Use as ModelAdmin.formfield_overrides to preview every ImageField on a model
IMAGE_FIELD_OVERRIDES = {
    models.ImageField: {'widget': AdminImageWidget},
}


class ImagePreviewAdminMixin:
    """
    Mixin for ModelAdmin classes.

    List the image fields that should get a preview in ``preview_fields``;
    every other field keeps whatever widget the admin would pick.
    """
    preview_fields = ()

    def formfield_for_dbfield(self, db_field, request, **kwargs):
        if db_field.name in self.preview_fields:
            kwargs['widget'] = AdminImageWidget
        return super().formfield_for_dbfield(db_field, request, **kwargs)

    def thumbnail(self, obj, field_name):
        url = image_url(getattr(obj, field_name))
        if url:
            return format_html(
                '<img src="{}" style="height:{}px;object-fit:cover;border-radius:4px" />',
                url, preview_setting('THUMBNAIL_HEIGHT', 40),
            )
        return "-"
