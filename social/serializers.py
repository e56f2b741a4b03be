from rest_framework import serializers
from .models import Friendship


class SocialUserSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    username = serializers.CharField()
    name = serializers.CharField(source='display_name')
    headshot = serializers.CharField()


class FriendRequestSerializer(serializers.ModelSerializer):
    sender = SocialUserSerializer(read_only=True)
    status = serializers.SerializerMethodField()

    class Meta:
        model = Friendship
        fields = ['id', 'sender', 'status', 'created_at']

    def get_status(self, obj):
        return obj.get_status_display().upper()
