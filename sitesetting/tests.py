import pytest
from django.contrib import admin
from django.contrib.admin.widgets import AdminFileWidget
from django.urls import reverse

from imagepreview.admin import ImagePreviewAdminMixin
from imagepreview.widgets import AdminImageWidget
from .admin import SiteSettingAdmin
from .models import SiteSetting


def formfield(model_admin, name, rf):
    return model_admin.formfield_for_dbfield(SiteSetting._meta.get_field(name), rf.get('/'))


def test_overrides_cover_every_image_field(rf):
    model_admin = SiteSettingAdmin(SiteSetting, admin.site)
    assert isinstance(formfield(model_admin, 'logo', rf).widget, AdminImageWidget)
    assert isinstance(formfield(model_admin, 'favicon', rf).widget, AdminImageWidget)
    assert not isinstance(formfield(model_admin, 'site_title', rf).widget, AdminImageWidget)


def test_preview_fields_limits_widget_to_named_fields(rf):
    class LogoOnlyAdmin(ImagePreviewAdminMixin, admin.ModelAdmin):
        preview_fields = ('logo',)

    model_admin = LogoOnlyAdmin(SiteSetting, admin.site)
    assert isinstance(formfield(model_admin, 'logo', rf).widget, AdminImageWidget)
    assert type(formfield(model_admin, 'favicon', rf).widget) is AdminFileWidget


def test_logo_column():
    model_admin = SiteSettingAdmin(SiteSetting, admin.site)
    assert 'src="/media/logos/site.png"' in model_admin.show_logo(SiteSetting(logo='logos/site.png'))
    assert model_admin.show_logo(SiteSetting()) == '-'


@pytest.mark.django_db
def test_load_returns_single_row():
    first = SiteSetting.load()
    first.site_title = 'Shop'
    first.save()

    assert SiteSetting.load().site_title == 'Shop'
    assert SiteSetting.objects.count() == 1


@pytest.mark.django_db
def test_change_form_previews_logo_and_favicon(admin_client):
    setting = SiteSetting.objects.create(site_title='Shop', logo='logos/site.png', favicon='favicons/icon.png')
    response = admin_client.get(reverse('admin:sitesetting_sitesetting_change', args=[setting.pk]))

    assert response.status_code == 200
    content = response.content.decode()
    assert '<img src="/media/logos/site.png"' in content
    assert '<img src="/media/favicons/icon.png"' in content
