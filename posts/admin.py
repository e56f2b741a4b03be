from django.contrib import admin
from .models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["title", "created_by", "status", "created_at", "deleted_at"]
    list_filter = ["status", "created_at"]
    search_fields = ["title", "post_slug", "created_by__username"]
    readonly_fields = ["post_slug", "created_at", "updated_at"]
    actions = ["soft_delete_posts"]

    @admin.action(description="Soft delete selected posts")
    def soft_delete_posts(self, request, queryset):
        updated = queryset.alive().soft_delete()
        self.message_user(request, f"{updated} post(s) deleted.")
