from datetime import timedelta

import pytest
from django.contrib import admin
from django.urls import reverse
from django.utils import timezone

from imagepreview.widgets import AdminImageWidget
from .admin import BannerAdmin
from .models import Banner


@pytest.fixture
def banner_admin():
    return BannerAdmin(Banner, admin.site)


def test_image_field_gets_preview_widget(banner_admin, rf):
    formfield = banner_admin.formfield_for_dbfield(Banner._meta.get_field('image'), rf.get('/'))
    assert isinstance(formfield.widget, AdminImageWidget)


def test_other_fields_keep_default_widgets(banner_admin, rf):
    request = rf.get('/')
    for name in ('title', 'alt_text', 'link_url'):
        formfield = banner_admin.formfield_for_dbfield(Banner._meta.get_field(name), request)
        assert not isinstance(formfield.widget, AdminImageWidget)


def test_preview_column(banner_admin):
    assert banner_admin.preview(Banner(image='banners/hero.jpg')) == (
        '<img src="/media/banners/hero.jpg" style="height:40px;object-fit:cover;border-radius:4px" />'
    )
    assert banner_admin.preview(Banner(image='')) == '-'


def test_is_live_window():
    now = timezone.now()
    assert Banner(is_active=True).is_live()
    assert not Banner(is_active=False).is_live()
    assert not Banner(start_at=now + timedelta(days=1)).is_live()
    assert not Banner(end_at=now - timedelta(days=1)).is_live()
    assert Banner(start_at=now - timedelta(days=1), end_at=now + timedelta(days=1)).is_live()


def test_target_href():
    assert Banner(link_url='https://example.com/sale').target_href() == 'https://example.com/sale'
    assert Banner().target_href() == '/'


def test_str():
    assert str(Banner(title='Summer')) == 'Summer'
    assert str(Banner(pk=7)) == 'Banner #7'


@pytest.mark.django_db
def test_change_form_shows_preview(admin_client):
    banner = Banner.objects.create(title='Hero', image='banners/hero.jpg')
    response = admin_client.get(reverse('admin:banners_banner_change', args=[banner.pk]))

    assert response.status_code == 200
    content = response.content.decode()
    assert '<a href="/media/banners/hero.jpg" target="_blank"><img src="/media/banners/hero.jpg"' in content


@pytest.mark.django_db
def test_add_form_has_no_preview(admin_client):
    response = admin_client.get(reverse('admin:banners_banner_add'))

    assert response.status_code == 200
    assert 'class="image-preview"' not in response.content.decode()


@pytest.mark.django_db
def test_changelist_shows_thumbnail(admin_client):
    Banner.objects.create(title='Hero', image='banners/hero.jpg')
    response = admin_client.get(reverse('admin:banners_banner_changelist'))

    assert response.status_code == 200
    assert '<img src="/media/banners/hero.jpg" style="height:40px' in response.content.decode()


def test_widget_swap_does_not_rely_on_preview_fields(banner_admin, rf):
    assert banner_admin.preview_fields == ()
    formfield = banner_admin.formfield_for_dbfield(Banner._meta.get_field('image'), rf.get('/'))
    assert isinstance(formfield.widget, AdminImageWidget)
