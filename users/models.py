# users/models.py
from django.db import models
from django.contrib.auth.models import AbstractUser, UserManager
from django.utils import timezone
import logging
import uuid
from model_utils import FieldTracker

logger = logging.getLogger(__name__)


def generate_anonymous_id():
    return f"anon_{uuid.uuid4().hex[:8]}"


class CustomUserManager(UserManager):
    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("role", CustomUser.ROLE_ADMIN)
        return super().create_superuser(username, email, password, **extra_fields)


class CustomUser(AbstractUser):
    ROLE_MEMBER = "member"
    ROLE_ADMIN = "admin"
    ROLE_CHOICES = [
        (ROLE_MEMBER, "Member"),
        (ROLE_ADMIN, "Admin"),
    ]

    role = models.CharField(
        max_length=10,
        choices=ROLE_CHOICES,
        default=ROLE_MEMBER,
    )
    email = models.EmailField(unique=True)
    anonymous_id = models.CharField(
        max_length=20,
        unique=True,
        default=generate_anonymous_id,
        editable=False,
        help_text="Display id shown to peers in anonymous chat",
    )
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    tracker = FieldTracker(["role", "email"])

    objects = CustomUserManager()

    REQUIRED_FIELDS = ["email"]

    class Meta:
        db_table = "users"
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["-date_joined"]

    def __str__(self):
        return self.username

    @property
    def is_admin_role(self):
        return self.is_superuser or self.role == self.ROLE_ADMIN

    def save(self, *args, **kwargs):
        is_new = self._state.adding
        super().save(*args, **kwargs)

        if not is_new and self.tracker.has_changed("role"):
            logger.info(
                f"User {self.id} role changed from {self.tracker.previous('role')} to {self.role}"
            )
