from comment.models import Comment, Reply
from rest_framework import serializers
from user.models import public_name_of, public_photo_of


class ContentSerializer(serializers.Serializer):
    """댓글/답글 작성 요청"""

    content = serializers.CharField()


class ReplySerializer(serializers.ModelSerializer):
    user_name = serializers.SerializerMethodField()
    user_photo = serializers.SerializerMethodField()

    class Meta:
        model = Reply
        fields = [
            "id",
            "content",
            "comment_id",
            "author_id",
            "user_name",
            "user_photo",
            "created_at",
            "updated_at",
        ]

    def get_user_name(self, obj) -> str:
        return public_name_of(obj.author)

    def get_user_photo(self, obj) -> str | None:
        return public_photo_of(obj.author)


class CommentSerializer(serializers.ModelSerializer):
    user_name = serializers.SerializerMethodField()
    user_photo = serializers.SerializerMethodField()
    replies = ReplySerializer(many=True, read_only=True)

    class Meta:
        model = Comment
        fields = [
            "id",
            "content",
            "job_id",
            "author_id",
            "user_name",
            "user_photo",
            "created_at",
            "updated_at",
            "replies",
        ]

    def get_user_name(self, obj) -> str:
        return public_name_of(obj.author)

    def get_user_photo(self, obj) -> str | None:
        return public_photo_of(obj.author)
