from job.models import Job
from rest_framework import serializers
from user.models import public_name_of, public_photo_of

REQUIRED_JOB_FIELDS = ("title", "description", "budget", "category")


def missing_required_fields(data) -> list[str]:
    """생성 요청에서 비어 있는 필수 필드 목록."""
    return [field for field in REQUIRED_JOB_FIELDS if data.get(field) in (None, "")]


class JobSerializer(serializers.ModelSerializer):
    user_name = serializers.SerializerMethodField()
    user_photo = serializers.SerializerMethodField()

    class Meta:
        model = Job
        fields = [
            "id",
            "title",
            "description",
            "budget",
            "category",
            "skills",
            "status",
            "owner_id",
            "user_name",
            "user_photo",
            "created_at",
            "updated_at",
        ]

    def get_user_name(self, obj) -> str:
        return public_name_of(obj.owner)

    def get_user_photo(self, obj) -> str | None:
        return public_photo_of(obj.owner)


class JobWriteSerializer(serializers.Serializer):
    """생성/수정 요청 검증. 수정은 partial=True로 사용합니다."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    budget = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    category = serializers.CharField(max_length=100)
    skills = serializers.JSONField(required=False)
    status = serializers.ChoiceField(choices=Job.Status.choices, required=False)

    def validate_skills(self, value):
        # 배열이 아니면 빈 목록으로 저장
        if not isinstance(value, list):
            return []
        return [str(skill).strip() for skill in value if str(skill).strip()]
