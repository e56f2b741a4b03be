from rest_framework import serializers
from users.models import User
from .models import Post


class PostAuthorSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'phone']


class PostSerializer(serializers.ModelSerializer):
    author = PostAuthorSerializer(source='created_by', read_only=True)

    class Meta:
        model = Post
        fields = ['id', 'title', 'description', 'thumbnail', 'status', 'post_slug',
                  'author', 'created_at', 'updated_at']
        read_only_fields = ['post_slug', 'created_at', 'updated_at']
