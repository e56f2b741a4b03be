import uuid
from django.db import models
from django.conf import settings
from django.utils.text import slugify
from common.models import SoftDeleteModel


class Post(SoftDeleteModel):
    STATUS_CHOICES = [('draft', 'Draft'), ('published', 'Published')]

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    thumbnail = models.URLField(blank=True, default='')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='published')
    post_slug = models.SlugField(max_length=220, unique=True, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
        null=True, blank=True, related_name='posts'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Post'
        verbose_name_plural = 'Posts'

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.post_slug:
            self.post_slug = f"{slugify(self.title)[:200]}-{uuid.uuid4().hex[:8]}"
        super().save(*args, **kwargs)
