from rest_framework import serializers

from .models import CreditAccount, CreditEntry


class CreditBalanceSerializer(serializers.ModelSerializer):
    """Current user's balance."""

    class Meta:
        model = CreditAccount
        fields = ['balance', 'total_purchased', 'updated_at']
        read_only_fields = fields


class CreditEntrySerializer(serializers.ModelSerializer):
    """Ledger history row."""

    class Meta:
        model = CreditEntry
        fields = ['id', 'delta', 'kind', 'balance_after', 'message', 'created_at']
        read_only_fields = fields


class AddCreditsSerializer(serializers.Serializer):
    """Input for an admin top-up."""

    user_id = serializers.UUIDField()
    amount = serializers.IntegerField(min_value=1, max_value=100000)
