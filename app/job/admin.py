from django.contrib import admin
from job.models import Job


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "category", "status", "budget", "owner", "created_at"]
    search_fields = ["title", "description", "category"]
    list_filter = ["status", "category", "created_at"]
    ordering = ["-created_at"]
    list_per_page = 100
    raw_id_fields = ["owner"]
