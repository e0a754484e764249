# mood/serializers.py
from rest_framework import serializers
from mood.models import MoodLog, Recommendation


class RecommendationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Recommendation
        fields = [
            "id",
            "title",
            "description",
            "content_url",
            "category",
            "position",
            "created_at",
        ]
        read_only_fields = fields


class MoodLogSerializer(serializers.ModelSerializer):
    mood_description = serializers.SerializerMethodField()
    recommendations = RecommendationSerializer(many=True, read_only=True)
    is_analyzed = serializers.BooleanField(read_only=True)

    class Meta:
        model = MoodLog
        fields = [
            "id",
            "mood_level",
            "mood_description",
            "note",
            "sentiment",
            "stress_level",
            "is_analyzed",
            "analyzed_at",
            "created_at",
            "recommendations",
        ]
        read_only_fields = [
            "sentiment",
            "stress_level",
            "analyzed_at",
            "created_at",
        ]

    def get_mood_description(self, obj) -> str:
        return obj.get_mood_level_display()

    def validate_note(self, value):
        if value is not None and not value.strip():
            return None
        return value


class MoodAnalysisRequestSerializer(serializers.Serializer):
    """Payload of the analysis endpoint"""

    mood_log_id = serializers.IntegerField()
    mood_level = serializers.IntegerField(min_value=1, max_value=5)
    note = serializers.CharField(required=False, allow_blank=True, allow_null=True)
