from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils import timezone
from django.utils.html import format_html
from .models import User, Profile


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    extra = 0


@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = [
        'username', 'name', 'email', 'phone',
        'phone_badge', 'deleted_badge', 'created_at'
    ]
    list_filter = ['is_staff', 'is_active', 'date_joined']
    search_fields = ['username', 'name', 'email', 'phone', 'user_code']
    readonly_fields = ['user_code', 'created_at', 'updated_at', 'phone_verified_at', 'deleted_at']
    ordering = ['-created_at']
    inlines = [ProfileInline]

    fieldsets = (
        ("Account", {"fields": ("username", "name", "email", "phone", "password")}),
        ("Body", {"fields": ("height", "weight", "headshot", "user_code")}),
        ("Verification", {"fields": ("phone_verified_at", "verification_code", "verification_code_expiry")}),
        ("System", {"fields": ("is_staff", "is_active", "is_superuser", "groups", "user_permissions",
                               "date_joined", "created_at", "updated_at", "deleted_at")}),
    )
    actions = ['soft_delete_users', 'restore_users']

    def phone_badge(self, obj):
        if obj.has_verified_phone:
            return format_html('<span style="color:#28a745">✔ verified</span>')
        return format_html('<span style="color:#6c757d">—</span>')
    phone_badge.short_description = "Phone"

    def deleted_badge(self, obj):
        if obj.is_deleted:
            return format_html('<span style="color:#dc3545">deleted</span>')
        return ""
    deleted_badge.short_description = "Deleted"
    deleted_badge.admin_order_field = 'deleted_at'

    @admin.action(description="Soft delete selected users")
    def soft_delete_users(self, request, queryset):
        updated = queryset.alive().update(deleted_at=timezone.now())
        self.message_user(request, f"{updated} user(s) deleted.")

    @admin.action(description="Restore selected users")
    def restore_users(self, request, queryset):
        updated = queryset.deleted().update(deleted_at=None)
        self.message_user(request, f"{updated} user(s) restored.")


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["user", "gender", "city", "country"]
    list_filter = ["gender", "country"]
    search_fields = ["user__username", "city", "country"]
