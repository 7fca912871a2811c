from django.contrib.auth.models import AbstractUser
from django.db import models

UNKNOWN_USER_NAME = "Unknown user"


class User(AbstractUser):
    display_name = models.CharField(
        max_length=100, blank=True, default="", help_text="화면에 표시할 이름"
    )
    avatar = models.URLField(
        max_length=500, blank=True, default="", help_text="프로필 이미지 URL"
    )

    @property
    def public_name(self) -> str:
        return self.display_name or self.username

    @property
    def public_photo(self) -> str | None:
        return self.avatar or None


def public_name_of(user: User | None) -> str:
    """작성자/소유자 이름. 사용자를 찾을 수 없으면 대체 문구를 돌려줍니다."""
    return user.public_name if user is not None else UNKNOWN_USER_NAME


def public_photo_of(user: User | None) -> str | None:
    return user.public_photo if user is not None else None
