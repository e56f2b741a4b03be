from django.db import models
from django.conf import settings


class BadgeUnit(models.Model):
    """A measurement unit activities are tracked in, e.g. `distance`."""
    name = models.CharField(max_length=100)
    short_name = models.SlugField(max_length=50, unique=True)

    class Meta:
        db_table = 'units'

    def __str__(self):
        return self.short_name


class Badge(models.Model):
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    icon = models.URLField(blank=True, default='')
    unit = models.ForeignKey(BadgeUnit, on_delete=models.SET_NULL, null=True, blank=True, related_name='badges')
    threshold = models.FloatField(default=0, help_text="Grand total of `unit` needed to earn the badge")
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class UserBadge(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='user_badges')
    badge = models.ForeignKey(Badge, on_delete=models.CASCADE, related_name='awards')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'user_badge'
        unique_together = ('user', 'badge')

    def __str__(self):
        return f"{self.user} — {self.badge}"


class UserUnitTotal(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='unit_totals')
    unit = models.ForeignKey(BadgeUnit, on_delete=models.CASCADE, related_name='user_totals')
    grand_total = models.FloatField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'user_unit_totals'
        unique_together = ('user', 'unit')

    def __str__(self):
        return f"{self.user} | {self.unit}: {self.grand_total}"
