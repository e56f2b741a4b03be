import random
import uuid
from datetime import timedelta
from django.conf import settings
from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models
from django.utils import timezone
from common.models import SoftDeleteModel, SoftDeleteQuerySet


class AppUserManager(UserManager.from_queryset(SoftDeleteQuerySet)):
    use_in_migrations = True


class User(SoftDeleteModel, AbstractUser):
    name = models.CharField(max_length=150, blank=True)
    phone = models.CharField(max_length=20, unique=True, null=True, blank=True)
    user_code = models.CharField(max_length=12, unique=True, blank=True)
    height = models.FloatField(null=True, blank=True, help_text="Height in cm")
    weight = models.FloatField(null=True, blank=True, help_text="Weight in kg")
    headshot = models.URLField(blank=True, default='')

    phone_verified_at = models.DateTimeField(null=True, blank=True)
    verification_code = models.CharField(max_length=6, blank=True, default='')
    verification_code_expiry = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AppUserManager()

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username

    def save(self, *args, **kwargs):
        if not self.user_code:
            self.user_code = str(uuid.uuid4())[:8].upper()
        super().save(*args, **kwargs)

    @property
    def display_name(self):
        return self.name or self.username

    @property
    def has_verified_phone(self):
        return self.phone_verified_at is not None

    def issue_verification_code(self):
        self.verification_code = f"{random.randint(100000, 999999)}"
        self.verification_code_expiry = timezone.now() + timedelta(
            minutes=settings.PHONE_VERIFICATION_MINUTES
        )
        self.save(update_fields=['verification_code', 'verification_code_expiry'])
        return self.verification_code

    def mark_phone_as_verified(self):
        if self.verification_code_expiry and self.verification_code_expiry > timezone.now():
            self.phone_verified_at = timezone.now()
            self.verification_code = ''
            self.save(update_fields=['phone_verified_at', 'verification_code'])
            return True
        return False

    def call_to_verify(self):
        """Auto-verify the phone number (used while SMS delivery is disabled)."""
        self.phone_verified_at = timezone.now()
        self.save(update_fields=['phone_verified_at'])


class Profile(models.Model):
    GENDER_CHOICES = [('male', 'Male'), ('female', 'Female'), ('other', 'Other')]

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='profile')
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True, default='')
    dob = models.DateField(null=True, blank=True)
    country = models.CharField(max_length=100, blank=True, default='')
    city = models.CharField(max_length=100, blank=True, default='')
    bio = models.TextField(blank=True)
    address = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        verbose_name = 'Profile'
        verbose_name_plural = 'Profiles'

    def __str__(self):
        return f"{self.user} ({self.city}, {self.country})"
