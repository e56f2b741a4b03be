import json
from django.contrib import admin
from django.utils.html import format_html
from .models import ActivityLog


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ["user", "distance_col", "created_at"]
    search_fields = ["user__username"]
    readonly_fields = ["user", "activity_pretty", "created_at"]
    exclude = ["activity"]
    date_hierarchy = "created_at"
    list_per_page = 30

    def has_change_permission(self, request, obj=None):
        return False

    def distance_col(self, obj):
        if isinstance(obj.activity, dict):
            return obj.activity.get("distance", "—")
        return "—"
    distance_col.short_description = "Distance"

    def activity_pretty(self, obj):
        return format_html("<pre>{}</pre>", json.dumps(obj.activity, indent=2, ensure_ascii=False))
    activity_pretty.short_description = "Activity"
