from comment.views import CommentViewSet, JobCommentsView, ReplyViewSet
from django.urls import include, path
from rest_framework.routers import SimpleRouter

router = SimpleRouter()
router.register(r"comments", CommentViewSet, basename="comment")
router.register(r"replies", ReplyViewSet, basename="reply")

urlpatterns = [
    path(
        "jobs/<int:job_id>/comments/", JobCommentsView.as_view(), name="job-comments"
    ),
    path("", include(router.urls)),
]
