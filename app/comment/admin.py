from comment.models import Comment, Reply
from django.contrib import admin


class ReplyInline(admin.TabularInline):
    model = Reply
    extra = 0
    raw_id_fields = ["author"]


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["id", "job", "author", "created_at"]
    search_fields = ["content"]
    list_filter = ["created_at"]
    ordering = ["-created_at"]
    raw_id_fields = ["job", "author"]
    inlines = [ReplyInline]


@admin.register(Reply)
class ReplyAdmin(admin.ModelAdmin):
    list_display = ["id", "comment", "author", "created_at"]
    search_fields = ["content"]
    ordering = ["-created_at"]
    raw_id_fields = ["comment", "author"]
