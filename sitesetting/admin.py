from django.contrib import admin
from imagepreview.admin import IMAGE_FIELD_OVERRIDES, ImagePreviewAdminMixin
from .models import SiteSetting


@admin.register(SiteSetting)
class SiteSettingAdmin(ImagePreviewAdminMixin, admin.ModelAdmin):
    list_display = ('site_title', 'email', 'phone', 'show_logo')
    formfield_overrides = IMAGE_FIELD_OVERRIDES

    fieldsets = (
        ('Site', {
            'fields': ('site_title', 'meta_description', 'meta_keywords', 'logo', 'favicon')
        }),
        ('Footer', {
            'fields': ('phone', 'email', 'address', 'website_url')
        }),
        ('Social', {
            'fields': ('facebook_url', 'twitter_url', 'instagram_url'),
            'classes': ('collapse',),
        }),
    )

    def show_logo(self, obj):
        return self.thumbnail(obj, 'logo')
    show_logo.short_description = 'Logo'
