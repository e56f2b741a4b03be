from django.contrib import admin
from .models import Friendship, Follow


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    list_display = ["sender", "recipient", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["sender__username", "recipient__username"]


@admin.register(Follow)
class FollowAdmin(admin.ModelAdmin):
    list_display = ["follower", "followed", "created_at"]
    search_fields = ["follower__username", "followed__username"]
