from django.urls import include, path
from job.views import JobViewSet, UserJobsView
from rest_framework.routers import SimpleRouter

router = SimpleRouter()
router.register(r"jobs", JobViewSet, basename="job")

urlpatterns = [
    path("", include(router.urls)),
    path("users/<int:user_id>/jobs/", UserJobsView.as_view(), name="user-jobs"),
]
