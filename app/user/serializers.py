from django.contrib.auth import authenticate
from rest_framework import serializers
from user.models import User


class UserRegistrationSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={"input_type": "password"},
        help_text="최소 8자 이상의 비밀번호를 입력하세요.",
    )

    class Meta:
        model = User
        fields = ["id", "username", "email", "password", "display_name", "avatar"]
        read_only_fields = ["id"]

    def validate_password(self, value):
        """
        비밀번호 복잡도 검증
        """
        if value.isdigit():
            raise serializers.ValidationError("Password cannot be entirely numeric.")
        if value.isalpha():
            raise serializers.ValidationError(
                "Password must contain at least one non-letter character."
            )
        return value

    def create(self, validated_data):
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class UserLoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, data):
        user = authenticate(
            request=self.context.get("request"),
            username=data.get("username"),
            password=data.get("password"),
        )
        if not user:
            raise serializers.ValidationError("Invalid credentials")

        data["user"] = user
        return data


class UserSummarySerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="public_name", read_only=True)
    user_photo = serializers.CharField(
        source="public_photo", read_only=True, allow_null=True
    )

    class Meta:
        model = User
        fields = ["id", "username", "email", "user_name", "user_photo"]
