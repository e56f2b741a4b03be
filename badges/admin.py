from django.contrib import admin
from .models import BadgeUnit, Badge, UserBadge, UserUnitTotal


@admin.register(BadgeUnit)
class BadgeUnitAdmin(admin.ModelAdmin):
    list_display = ["name", "short_name"]
    search_fields = ["name", "short_name"]


@admin.register(Badge)
class BadgeAdmin(admin.ModelAdmin):
    list_display = ["name", "unit", "threshold", "is_active", "award_count"]
    list_filter = ["unit", "is_active"]
    list_editable = ["is_active"]
    search_fields = ["name"]

    def award_count(self, obj):
        return obj.awards.count()


@admin.register(UserBadge)
class UserBadgeAdmin(admin.ModelAdmin):
    list_display = ["user", "badge", "created_at"]
    search_fields = ["user__username", "badge__name"]


@admin.register(UserUnitTotal)
class UserUnitTotalAdmin(admin.ModelAdmin):
    list_display = ["user", "unit", "grand_total", "updated_at"]
    list_filter = ["unit"]
    search_fields = ["user__username"]
