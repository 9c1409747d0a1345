# ==========================================
# apps/profiles/models.py
# ==========================================

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Q
import uuid


MIN_AGE = 18
MAX_AGE = 120


class Gender(models.TextChoices):
    MALE = 'male', 'Male'
    FEMALE = 'female', 'Female'
    OTHER = 'other', 'Other'


class Profile(models.Model):
    """
    Dating profile shown in discovery.

    Real profiles belong to exactly one account. Seed profiles
    (``is_fake_profile``) have no account and exist to populate
    discovery before there is a real user base.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='profiles'
    )

    # Display attributes
    name = models.CharField(max_length=100)
    age = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_AGE), MaxValueValidator(MAX_AGE)]
    )
    gender = models.CharField(max_length=10, choices=Gender.choices)
    seeking_gender = models.CharField(max_length=10, choices=Gender.choices)
    location = models.CharField(max_length=200, blank=True, default='')
    bio = models.TextField(blank=True, default='')
    interests = models.JSONField(default=list, blank=True)

    # Media references (upload/storage happens elsewhere)
    profile_picture_url = models.URLField(max_length=500, blank=True, default='')
    intro_video_url = models.URLField(max_length=500, blank=True, default='')

    # Flags
    is_fake_profile = models.BooleanField(default=False)
    is_admin = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'profiles'
        constraints = [
            models.UniqueConstraint(
                fields=['user'],
                condition=Q(is_fake_profile=False),
                name='unique_real_profile_per_user',
            ),
        ]
        indexes = [
            models.Index(fields=['gender'], name='profiles_gender_idx'),
            models.Index(fields=['is_fake_profile'], name='profiles_fake_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        kind = 'seed' if self.is_fake_profile else 'real'
        return f"{self.name}, {self.age} ({self.gender}, {kind})"
