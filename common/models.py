from django.db import models
from django.utils import timezone


class SoftDeleteQuerySet(models.QuerySet):
    """Soft-deleted rows stay in the table; callers opt into hiding them."""

    def alive(self):
        return self.filter(deleted_at__isnull=True)

    def deleted(self):
        return self.filter(deleted_at__isnull=False)

    def newest_first(self, field='created_at'):
        return self.order_by(f'-{field}', '-pk')

    def soft_delete(self):
        return self.update(deleted_at=timezone.now())


class SoftDeleteModel(models.Model):
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)

    objects = SoftDeleteQuerySet.as_manager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self):
        return self.deleted_at is not None

    def soft_delete(self):
        self.deleted_at = timezone.now()
        self.save(update_fields=['deleted_at'])

    def restore(self):
        self.deleted_at = None
        self.save(update_fields=['deleted_at'])
