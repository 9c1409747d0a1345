# ==========================================
# apps/matches/models.py
# ==========================================

from django.db import models
import uuid


class Match(models.Model):
    """
    One user's recorded interest in one profile.

    Matches are one-directional: the row exists as soon as the user
    likes the profile, whether or not the other side reciprocates.
    The match is also the scope of a conversation.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='matches'
    )
    matched_profile = models.ForeignKey(
        'profiles.Profile',
        on_delete=models.PROTECT,
        related_name='matched_by'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'matches'
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'matched_profile'],
                name='unique_match_per_profile'
            ),
        ]
        indexes = [
            models.Index(fields=['user', '-created_at'], name='matches_user_created_idx'),
        ]
        ordering = ['-created_at']
        verbose_name_plural = 'Matches'

    def __str__(self):
        return f"{self.user} -> {self.matched_profile.name}"
