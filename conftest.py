# conftest.py
import pytest
from django.core.cache import cache
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(django_user_model):
    counter = {"n": 0}

    def _make_user(role="member", **extra):
        counter["n"] += 1
        username = extra.pop("username", f"student{counter['n']}")
        return django_user_model.objects.create_user(
            username=username,
            email=extra.pop("email", f"{username}@campus.test"),
            password=extra.pop("password", "Str0ng-pass-123"),
            role=role,
            **extra,
        )

    return _make_user


@pytest.fixture
def member(make_user):
    return make_user()


@pytest.fixture
def other_member(make_user):
    return make_user()


@pytest.fixture
def admin_user(make_user):
    return make_user(role="admin")


@pytest.fixture
def member_client(api_client, member):
    api_client.force_authenticate(user=member)
    return api_client


@pytest.fixture
def admin_client(api_client, admin_user):
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture
def pending_log(member):
    """Unanalyzed mood log; post_save analysis never fires inside the test transaction"""
    from mood.models import MoodLog

    return MoodLog.objects.create(user=member, mood_level=2, note="Exam tomorrow, feeling anxious")
