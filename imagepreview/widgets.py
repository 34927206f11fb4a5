from django.conf import settings
from django.contrib.admin.widgets import AdminFileWidget
from django.utils.html import format_html
from django.utils.safestring import mark_safe
import logging

logger = logging.getLogger(__name__)


def preview_setting(name, default):
    return getattr(settings, f'IMAGE_PREVIEW_{name}', default)


def image_url(value):
    """Return the URL of a stored file value, or None when there is nothing to show"""
    if not value:
        return None
    try:
        # UploadedFile on a re-rendered form has no url
        return getattr(value, 'url', None) or None
    except ValueError as e:
        logger.warning(f"Could not resolve image url for {value!r}: {e}")
        return None


class AdminImageWidget(AdminFileWidget):
    """
    File input for image fields that shows the current image above the
    stock "Currently / Change" controls.
    """

    def render(self, name, value, attrs=None, renderer=None):
        output = []
        url = image_url(value)
        if url:
            style = 'max-height:{}px;max-width:{}px;'.format(
                preview_setting('MAX_HEIGHT', 150),
                preview_setting('MAX_WIDTH', 300),
            )
            output.append(format_html(
                '<a href="{}" target="_blank"><img src="{}" alt="{}" class="image-preview" style="{}" /></a> ',
                url, url, str(value), style,
            ))
        output.append(super().render(name, value, attrs, renderer))
        return mark_safe(''.join(output))
