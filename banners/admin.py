from django.contrib import admin
from imagepreview.admin import ImagePreviewAdminMixin
from imagepreview.widgets import AdminImageWidget
from .models import Banner

@admin.register(Banner)
class BannerAdmin(ImagePreviewAdminMixin, admin.ModelAdmin):
    # mixin supplies thumbnail(); the image widget swap is spelled out in formfield_for_dbfield
    list_display = ('title', 'order', 'is_active', 'is_live', 'preview')
    list_filter = ('is_active',)
    search_fields = ('title', 'subtitle', 'alt_text')
    list_editable = ('order', 'is_active')
    exclude = ('created_at',)

    def formfield_for_dbfield(self, db_field, request, **kwargs):
        # only the banner image gets a preview
        if db_field.name == 'image':
            kwargs['widget'] = AdminImageWidget
        return super().formfield_for_dbfield(db_field, request, **kwargs)

    def preview(self, obj):
        return self.thumbnail(obj, 'image')
    preview.short_description = 'Preview'

    def is_live(self, obj):
        return obj.is_live()
    is_live.boolean = True
    is_live.short_description = 'Live'
