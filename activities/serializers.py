from rest_framework import serializers
from .models import ActivityLog
from .payload import MalformedActivityPayload, activity_distance, decode_activity
from .services import record_activity


class ActivityLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = ActivityLog
        fields = ['id', 'activity', 'created_at']
        read_only_fields = ['created_at']

    def validate_activity(self, value):
        try:
            activity_distance(value)
            return decode_activity(value)
        except MalformedActivityPayload as e:
            raise serializers.ValidationError(f"Invalid activity payload: {e}")

    def create(self, validated_data):
        return record_activity(validated_data['user'], validated_data['activity'])
