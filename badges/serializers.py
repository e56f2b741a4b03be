from rest_framework import serializers
from .models import Badge, UserBadge, UserUnitTotal


class BadgeSerializer(serializers.ModelSerializer):
    unit = serializers.CharField(source='unit.short_name', default=None, read_only=True)

    class Meta:
        model = Badge
        fields = ['id', 'name', 'description', 'icon', 'unit', 'threshold']


class UserBadgeSerializer(serializers.ModelSerializer):
    badge = BadgeSerializer(read_only=True)
    awarded_at = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = UserBadge
        fields = ['id', 'badge', 'awarded_at']


class UnitTotalSerializer(serializers.ModelSerializer):
    short_name = serializers.CharField(source='unit.short_name', read_only=True)

    class Meta:
        model = UserUnitTotal
        fields = ['short_name', 'grand_total']
