import logging
from io import StringIO

import pytest
from django.contrib.admin.widgets import AdminFileWidget
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import call_command
from django.core.management.base import CommandError

from banners.models import Banner
from .admin import ImagePreviewAdminMixin
from .widgets import AdminImageWidget, image_url


class BannerProxy(Banner):
    class Meta:
        proxy = True
        app_label = 'banners'


def stored(name):
    return Banner(image=name).image


class BrokenFile:
    def __bool__(self):
        return True

    @property
    def url(self):
        raise ValueError("The 'image' attribute has no file associated with it.")


def test_render_with_url_prepends_preview():
    value = stored('banners/hero.jpg')
    html = AdminImageWidget().render('image', value)

    assert html.startswith('<a href="/media/banners/hero.jpg" target="_blank">')
    assert '<img src="/media/banners/hero.jpg" alt="banners/hero.jpg" class="image-preview"' in html
    assert html.endswith(AdminFileWidget().render('image', value))


def test_render_without_value_is_default_markup():
    assert AdminImageWidget().render('image', None) == AdminFileWidget().render('image', None)
    assert '<img' not in AdminImageWidget().render('image', None)


def test_render_empty_field_file_is_default_markup():
    value = stored('')
    assert AdminImageWidget().render('image', value) == AdminFileWidget().render('image', value)


def test_render_uploaded_file_has_no_preview():
    upload = SimpleUploadedFile('new.jpg', b'data', content_type='image/jpeg')
    html = AdminImageWidget().render('image', upload)
    assert '<img' not in html


def test_render_escapes_alt_text():
    html = AdminImageWidget().render('image', stored('banners/a"b.jpg'))
    assert 'alt="banners/a&quot;b.jpg"' in html


def test_preview_size_follows_settings(settings):
    settings.IMAGE_PREVIEW_MAX_HEIGHT = 80
    settings.IMAGE_PREVIEW_MAX_WIDTH = 120
    html = AdminImageWidget().render('image', stored('banners/hero.jpg'))
    assert 'style="max-height:80px;max-width:120px;"' in html


def test_thumbnail_height_follows_settings(settings):
    settings.IMAGE_PREVIEW_THUMBNAIL_HEIGHT = 64
    html = ImagePreviewAdminMixin().thumbnail(Banner(image='banners/hero.jpg'), 'image')
    assert 'height:64px' in html
    assert 'src="/media/banners/hero.jpg"' in html


def test_image_url_swallows_storage_value_error(caplog):
    with caplog.at_level(logging.WARNING, logger='imagepreview.widgets'):
        assert image_url(BrokenFile()) is None
    assert 'Could not resolve image url' in caplog.text


def test_image_url():
    assert image_url(None) is None
    assert image_url(stored('')) is None
    assert image_url(stored('banners/hero.jpg')) == '/media/banners/hero.jpg'


@pytest.mark.django_db
def test_check_image_previews_reports_missing_files(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    (tmp_path / 'banners').mkdir()
    (tmp_path / 'banners' / 'ok.jpg').write_bytes(b'jpeg')
    Banner.objects.create(title='Present', image='banners/ok.jpg')
    gone = Banner.objects.create(title='Gone', image='banners/gone.jpg')
    Banner.objects.create(title='Empty', image='')

    out = StringIO()
    call_command('check_image_previews', 'banners.Banner', stdout=out)
    output = out.getvalue()

    assert f'Banner #{gone.pk} image: missing banners/gone.jpg' in output
    assert 'ok.jpg' not in output
    assert 'Checked 2 images, 1 missing' in output


@pytest.mark.django_db
def test_check_image_previews_all_models(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    out = StringIO()
    call_command('check_image_previews', stdout=out)
    assert 'Checked 0 images, 0 missing' in out.getvalue()


def test_check_image_previews_unknown_model():
    with pytest.raises(CommandError):
        call_command('check_image_previews', 'banners.Nope', stdout=StringIO())


@pytest.mark.django_db
def test_check_image_previews_counts_proxy_rows_once(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    gone = Banner.objects.create(title='Gone', image='banners/gone.jpg')

    out = StringIO()
    call_command('check_image_previews', stdout=out)
    output = out.getvalue()

    assert f'Banner #{gone.pk} image: missing banners/gone.jpg' in output
    assert 'BannerProxy' not in output
    assert 'Checked 1 images, 1 missing' in output


@pytest.mark.django_db
def test_check_image_previews_reports_unsafe_paths(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    bad = Banner.objects.create(title='Legacy', image='../../etc/passwd')

    out = StringIO()
    call_command('check_image_previews', 'banners.Banner', stdout=out)
    output = out.getvalue()

    assert f'Banner #{bad.pk} image: unsafe path ../../etc/passwd' in output
    assert 'Checked 1 images, 1 missing' in output
