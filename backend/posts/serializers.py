from rest_framework import serializers

from .models import Post


class PostSerializer(serializers.ModelSerializer):
    author = serializers.ReadOnlyField(source="user.username")

    class Meta:
        model = Post
        fields = ["id", "user", "author", "title", "body", "created_at", "updated_at"]
        read_only_fields = ["id", "user", "author", "created_at", "updated_at"]
