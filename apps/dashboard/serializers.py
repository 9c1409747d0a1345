from rest_framework import serializers

from apps.profiles.serializers import ProfileCardSerializer


# =============================================================================
# Response serializers (for OpenAPI documentation)
# =============================================================================

class DashboardStatsSerializer(serializers.Serializer):
    total_users = serializers.IntegerField()
    seed_profiles = serializers.IntegerField()
    total_matches = serializers.IntegerField()
    total_messages = serializers.IntegerField()
    total_credits = serializers.IntegerField()
    total_purchased = serializers.IntegerField()


class UserOverviewSerializer(serializers.Serializer):
    profile_id = serializers.UUIDField()
    user_id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()
    credits = serializers.IntegerField()
    match_count = serializers.IntegerField()
    message_count = serializers.IntegerField()
    joined_at = serializers.DateTimeField()


class AddCreditsResponseSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    amount = serializers.IntegerField()
    balance = serializers.IntegerField()


class HomeSummarySerializer(serializers.Serializer):
    matches = serializers.IntegerField()
    messages = serializers.IntegerField()
    credits = serializers.IntegerField()
    featured_profiles = ProfileCardSerializer(many=True)
