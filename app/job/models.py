from django.conf import settings
from django.db import models


class Job(models.Model):
    """
    마켓플레이스에 올라온 작업(프로젝트) 공고.

    수정/삭제는 owner만 가능합니다 (common.authorization 참고).
    """

    class Status(models.TextChoices):
        OPEN = "open", "Open"
        IN_PROGRESS = "in_progress", "In progress"
        COMPLETED = "completed", "Completed"

    owner_field = "owner_id"

    title = models.CharField(max_length=255)
    description = models.TextField()
    budget = models.DecimalField(max_digits=12, decimal_places=2)
    category = models.CharField(max_length=100, db_index=True)
    skills = models.JSONField(
        default=list, blank=True, help_text="요구 기술 목록 (JSON 배열)"
    )
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.OPEN, db_index=True
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="jobs"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "marketplace_job"
        ordering = ["-created_at", "-id"]
        verbose_name = "job"

    def __str__(self):
        return f"{self.title} ({self.status}) by user {self.owner_id}"
