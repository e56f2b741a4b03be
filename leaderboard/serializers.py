from rest_framework import serializers


class LeaderboardEntrySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    headshot = serializers.CharField(allow_null=True)
    city = serializers.CharField(allow_null=True)
    country = serializers.CharField(allow_null=True)
    address = serializers.CharField(allow_null=True)
    metric = serializers.FloatField()
