from django.db import models

class SiteSetting(models.Model):
    site_title = models.CharField(max_length=100, blank=True, default='')
    meta_description = models.TextField(blank=True, default='')
    meta_keywords = models.CharField(max_length=255, blank=True, default='')
    logo = models.ImageField(upload_to='logos/', blank=True, null=True)
    favicon = models.ImageField(upload_to='favicons/', blank=True, null=True,
                                help_text='Square image, 32x32 or larger')

    # Footer
    phone = models.CharField(max_length=20, blank=True, default='')
    email = models.EmailField(blank=True, default='')
    address = models.TextField(blank=True, default='')
    website_url = models.URLField(blank=True, default='')

    facebook_url = models.URLField(blank=True, default='')
    twitter_url = models.URLField(blank=True, default='')
    instagram_url = models.URLField(blank=True, default='')

    class Meta:
        verbose_name = "Site Setting"
        verbose_name_plural = "Site Settings"

    def __str__(self):
        return self.site_title or "Site Settings"

    @classmethod
    def load(cls):
        """The single settings row, created on first access"""
        obj, _ = cls.objects.get_or_create(pk=1)
        return obj
