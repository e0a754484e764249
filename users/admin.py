from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    list_display = ["username", "email", "role", "anonymous_id", "date_joined"]
    list_filter = ["role", "date_joined"]
    search_fields = ["username", "email", "anonymous_id"]
    readonly_fields = ["anonymous_id", "created_at", "updated_at"]
    fieldsets = UserAdmin.fieldsets + (
        ("CampusMind", {"fields": ["role", "anonymous_id", "created_at", "updated_at"]}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        (None, {"fields": ["email", "role"]}),
    )
