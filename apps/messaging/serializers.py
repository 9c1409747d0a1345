from rest_framework import serializers

from .models import Message


MAX_MESSAGE_LENGTH = 2000


class MessageSerializer(serializers.ModelSerializer):
    """Conversation message."""

    class Meta:
        model = Message
        fields = ['id', 'match', 'sender', 'content', 'is_admin_reply', 'created_at']
        read_only_fields = fields


class SendMessageSerializer(serializers.Serializer):
    """Input for sending a message. Blank content is rejected by the service."""

    content = serializers.CharField(max_length=MAX_MESSAGE_LENGTH, allow_blank=True, trim_whitespace=False)
