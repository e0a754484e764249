# mood/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from mood.views import MoodLogViewSet, AnalyzeMoodView

router = DefaultRouter()
router.register(r"logs", MoodLogViewSet, basename="mood-log")

urlpatterns = [
    path("analyze/", AnalyzeMoodView.as_view(), name="mood-analyze"),
    path("", include(router.urls)),
]
