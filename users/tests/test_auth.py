import re

import pytest

from users.models import CustomUser

AUTH_URL = "/api/v1/auth"


@pytest.mark.django_db
class TestRegister:
    def test_register_returns_tokens(self, api_client):
        response = api_client.post(
            f"{AUTH_URL}/register/",
            {"email": "Alex@Campus.test", "password": "Str0ng-pass-123", "first_name": "Alex"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["access"]
        assert response.data["refresh"]
        user = CustomUser.objects.get(email="alex@campus.test")
        assert user.username == "alex@campus.test"
        assert user.role == CustomUser.ROLE_MEMBER
        assert response.data["user"]["anonymous_id"] == user.anonymous_id

    def test_role_cannot_be_chosen(self, api_client):
        api_client.post(
            f"{AUTH_URL}/register/",
            {"email": "sam@campus.test", "password": "Str0ng-pass-123", "role": "admin"},
            format="json",
        )
        assert CustomUser.objects.get(email="sam@campus.test").role == CustomUser.ROLE_MEMBER

    def test_duplicate_email(self, api_client, member):
        response = api_client.post(
            f"{AUTH_URL}/register/",
            {"email": member.email.upper(), "password": "Str0ng-pass-123"},
            format="json",
        )
        assert response.status_code == 400
        assert "email" in response.data

    def test_weak_password(self, api_client):
        response = api_client.post(
            f"{AUTH_URL}/register/",
            {"email": "weak@campus.test", "password": "12345678"},
            format="json",
        )
        assert response.status_code == 400

    def test_token_login(self, api_client, member):
        response = api_client.post(
            f"{AUTH_URL}/token/",
            {"username": member.username, "password": "Str0ng-pass-123"},
            format="json",
        )
        assert response.status_code == 200
        assert "access" in response.data


@pytest.mark.django_db
class TestCurrentUser:
    def test_me(self, member_client, member):
        response = member_client.get(f"{AUTH_URL}/me/")
        assert response.status_code == 200
        assert response.data["id"] == member.id
        assert response.data["role"] == "member"
        assert response.data["is_admin"] is False

    def test_admin_flag(self, admin_client):
        assert admin_client.get(f"{AUTH_URL}/me/").data["is_admin"] is True

    def test_update_name_but_not_role(self, member_client, member):
        response = member_client.patch(
            f"{AUTH_URL}/me/", {"first_name": "Robin", "role": "admin"}, format="json"
        )
        assert response.status_code == 200
        member.refresh_from_db()
        assert member.first_name == "Robin"
        assert member.role == "member"

    def test_anonymous_request(self, api_client):
        assert api_client.get(f"{AUTH_URL}/me/").status_code == 401


@pytest.mark.django_db
def test_anonymous_ids_are_unique_and_formatted(make_user):
    ids = {make_user().anonymous_id for _ in range(5)}
    assert len(ids) == 5
    assert all(re.fullmatch(r"anon_[0-9a-f]{8}", anonymous_id) for anonymous_id in ids)


@pytest.mark.django_db
def test_superuser_gets_admin_role(django_user_model):
    user = django_user_model.objects.create_superuser(
        username="boss", email="boss@campus.test", password="Str0ng-pass-123"
    )
    assert user.role == CustomUser.ROLE_ADMIN
    assert user.is_admin_role
