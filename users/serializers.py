from rest_framework import serializers
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import authenticate
from django.conf import settings
from leaderboard.repository import RankingRepository
from social.services import friendship_status
from .models import User, Profile


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = Profile
        fields = ['gender', 'dob', 'country', 'city', 'bio', 'address']


class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)

    class Meta:
        model = User
        fields = ['username', 'email', 'password', 'name', 'phone', 'height', 'weight', 'headshot']

    def create(self, validated_data):
        password = validated_data.pop('password')
        user = User(**validated_data)
        user.set_password(password)
        user.save()
        return user


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, data):
        user = authenticate(**data)
        if not user or user.is_deleted:
            raise serializers.ValidationError('Invalid credentials')
        tokens = RefreshToken.for_user(user)
        return {
            'access': str(tokens.access_token),
            'refresh': str(tokens),
            'user': UserSerializer(user).data
        }


class UserSerializer(serializers.ModelSerializer):
    profile = serializers.SerializerMethodField()
    has_verified_phone = serializers.BooleanField(read_only=True)
    grand_total_distance = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'name', 'phone', 'user_code',
            'height', 'weight', 'headshot', 'has_verified_phone',
            'profile', 'grand_total_distance', 'created_at',
        ]
        read_only_fields = ['user_code']

    def get_profile(self, obj):
        profile = Profile.objects.filter(user=obj).first()
        return ProfileSerializer(profile).data if profile else None

    def get_grand_total_distance(self, obj):
        total = RankingRepository().fetch_unit_total(obj.id, settings.LEADERBOARD_DISTANCE_UNIT)
        return total or 0


class UserUpdateSerializer(serializers.ModelSerializer):
    profile = ProfileSerializer(required=False)

    class Meta:
        model = User
        fields = ['name', 'phone', 'height', 'weight', 'headshot', 'profile']

    def update(self, instance, validated_data):
        profile_data = validated_data.pop('profile', None)
        instance = super().update(instance, validated_data)
        if profile_data is not None:
            Profile.objects.update_or_create(user=instance, defaults=profile_data)
        return instance

    def to_representation(self, instance):
        return UserSerializer(instance, context=self.context).data


class UserListSerializer(serializers.ModelSerializer):
    """Directory row; `friendship_status` is relative to the `viewer` in context."""
    name = serializers.CharField(source='display_name', read_only=True)
    friendship_status = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'username', 'name', 'headshot', 'friendship_status']

    def get_friendship_status(self, obj):
        return friendship_status(self.context.get('viewer'), obj)


class VerifyPhoneSerializer(serializers.Serializer):
    code = serializers.CharField(required=False, allow_blank=True, max_length=6)
