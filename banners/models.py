from django.db import models
from django.utils import timezone

class Banner(models.Model):
    title = models.CharField(max_length=150, blank=True, default="")
    subtitle = models.CharField(max_length=255, blank=True, default="")
    image = models.ImageField(upload_to='banners/')
    alt_text = models.CharField(max_length=150, blank=True, default="")
    order = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    link_url = models.URLField(blank=True, default="")
    open_in_new_tab = models.BooleanField(default=False)

    # scheduling window
    start_at = models.DateTimeField(null=True, blank=True)
    end_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['order', '-created_at']

    def __str__(self):
        return self.title or f"Banner #{self.pk}"

    def is_live(self):
        now = timezone.now()
        if not self.is_active:
            return False
        if self.start_at and now < self.start_at:
            return False
        if self.end_at and now > self.end_at:
            return False
        return True

    def target_href(self):
        return self.link_url or "/"
