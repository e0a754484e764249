# users/serializers.py
from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.db import transaction
import logging

logger = logging.getLogger(__name__)
CustomUser = get_user_model()


class CustomUserSerializer(serializers.ModelSerializer):
    """Session context exposed to the client: identity, role and anonymous id"""

    name = serializers.SerializerMethodField()
    is_admin = serializers.BooleanField(source="is_admin_role", read_only=True)

    class Meta:
        model = CustomUser
        fields = [
            "id",
            "email",
            "username",
            "first_name",
            "last_name",
            "name",
            "role",
            "anonymous_id",
            "is_admin",
            "created_at",
        ]
        read_only_fields = [
            "id",
            "email",
            "username",
            "role",
            "anonymous_id",
            "is_admin",
            "created_at",
        ]

    def get_name(self, obj) -> str:
        return obj.get_full_name() or obj.username


class RegisterSerializer(serializers.ModelSerializer):
    """
    Serializer for member sign-up. Accounts are always created with the
    member role; admins are promoted through the Django admin.
    """

    email = serializers.EmailField(required=True)
    username = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, min_length=8)

    class Meta:
        model = CustomUser
        fields = ["email", "username", "first_name", "last_name", "password"]

    def validate_email(self, value):
        email = value.lower().strip()
        if CustomUser.objects.filter(email__iexact=email).exists():
            logger.warning(f"Registration rejected, email already exists: {email}")
            raise serializers.ValidationError("This email is already registered.")
        return email

    def validate(self, data):
        username = (data.get("username") or "").strip() or data["email"]
        if CustomUser.objects.filter(username__iexact=username).exists():
            raise serializers.ValidationError(
                {"username": "A user with that username already exists."}
            )
        data["username"] = username
        validate_password(data["password"])
        return data

    @transaction.atomic
    def create(self, validated_data):
        password = validated_data.pop("password")
        user = CustomUser(role=CustomUser.ROLE_MEMBER, **validated_data)
        user.set_password(password)
        user.save()
        logger.info(f"Registered new member {user.id} ({user.anonymous_id})")
        return user
