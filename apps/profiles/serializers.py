from rest_framework import serializers

from .models import Profile, Gender, MIN_AGE, MAX_AGE


class ProfileSerializer(serializers.ModelSerializer):
    """Full profile representation."""

    class Meta:
        model = Profile
        fields = [
            'id',
            'user',
            'name',
            'age',
            'gender',
            'seeking_gender',
            'location',
            'bio',
            'interests',
            'profile_picture_url',
            'intro_video_url',
            'is_fake_profile',
            'is_admin',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ProfileCardSerializer(serializers.ModelSerializer):
    """What a discovery card shows about a candidate."""

    class Meta:
        model = Profile
        fields = [
            'id',
            'name',
            'age',
            'gender',
            'location',
            'bio',
            'interests',
            'profile_picture_url',
            'intro_video_url',
        ]
        read_only_fields = fields


class ProfileUpsertSerializer(serializers.Serializer):
    """Input for the full-record profile save."""

    name = serializers.CharField(max_length=100)
    age = serializers.IntegerField(min_value=MIN_AGE, max_value=MAX_AGE)
    gender = serializers.ChoiceField(choices=Gender.choices)
    seeking_gender = serializers.ChoiceField(choices=Gender.choices)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    bio = serializers.CharField(required=False, allow_blank=True, default='')
    interests = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False,
        default=list,
    )
    profile_picture_url = serializers.URLField(max_length=500, required=False, allow_blank=True, default='')
    intro_video_url = serializers.URLField(max_length=500, required=False, allow_blank=True, default='')


class DiscoverQuerySerializer(serializers.Serializer):
    """Query parameters for the discovery batch."""

    limit = serializers.IntegerField(min_value=1, max_value=50, required=False)
