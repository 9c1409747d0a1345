from rest_framework import serializers

from apps.profiles.serializers import ProfileCardSerializer
from .models import Match
from .services import is_mutual


class MatchSerializer(serializers.ModelSerializer):
    """Match with the liked profile's card."""

    matched_profile = ProfileCardSerializer(read_only=True)
    is_mutual = serializers.SerializerMethodField()

    class Meta:
        model = Match
        fields = ['id', 'matched_profile', 'is_mutual', 'created_at']
        read_only_fields = fields

    def get_is_mutual(self, obj):
        # Listings carry it as an annotation
        annotated = getattr(obj, 'is_mutual', None)
        if annotated is not None:
            return annotated
        return is_mutual(obj)


class RecordInterestSerializer(serializers.Serializer):
    """Input for liking a profile."""

    profile_id = serializers.UUIDField()
