# ==========================================
# apps/messaging/models.py
# ==========================================

from django.db import models


class Message(models.Model):
    """
    Chat message in the conversation belonging to a match.

    Messages are append-only. Ordinary messages cost the sender one
    credit; operator replies (``is_admin_reply``) are free.
    """

    # Sequential so equal timestamps still sort in insertion order
    id = models.BigAutoField(primary_key=True)
    match = models.ForeignKey(
        'matches.Match',
        on_delete=models.CASCADE,
        related_name='messages'
    )
    sender = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='sent_messages'
    )
    content = models.TextField()
    is_admin_reply = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'messages'
        indexes = [
            models.Index(fields=['match', 'created_at'], name='messages_match_created_idx'),
            models.Index(fields=['sender'], name='messages_sender_idx'),
        ]
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.sender}: {self.content[:50]}"
