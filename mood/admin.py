# mood/admin.py
from django.contrib import admin
from mood.models import MoodLog, Recommendation


class RecommendationInline(admin.TabularInline):
    model = Recommendation
    extra = 0
    readonly_fields = ["title", "description", "content_url", "category", "position", "created_at"]
    can_delete = False


@admin.register(MoodLog)
class MoodLogAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "mood_level", "stress_level", "analyzed_at", "created_at"]
    list_filter = ["mood_level", "stress_level", "created_at"]
    search_fields = ["user__email", "note"]
    readonly_fields = ["sentiment", "stress_level", "analyzed_at", "created_at"]
    inlines = [RecommendationInline]


@admin.register(Recommendation)
class RecommendationAdmin(admin.ModelAdmin):
    list_display = ["title", "category", "mood_log", "position", "created_at"]
    list_filter = ["category"]
    readonly_fields = ["created_at"]
