"""
Seed profile generator.

Populates discovery with synthetic profiles before a real user base
exists. Seed profiles have no owning account.
"""

from django.db import transaction
from loguru import logger

from apps.profiles.models import Profile, Gender


FAKE_PROFILES = [
    {
        'name': 'Emily Johnson',
        'age': 25,
        'gender': Gender.FEMALE,
        'seeking_gender': Gender.MALE,
        'bio': 'Love hiking, yoga, and trying new cuisines. Looking for someone who shares my passion for adventure!',
        'location': 'Nairobi, Kenya',
        'interests': ['Hiking', 'Yoga', 'Cooking', 'Travel'],
        'profile_picture_url': 'https://images.unsplash.com/photo-1494790108755-2616b612b786?w=400&h=400&fit=crop&crop=face',
    },
    {
        'name': 'Sarah Wilson',
        'age': 28,
        'gender': Gender.FEMALE,
        'seeking_gender': Gender.MALE,
        'bio': 'Professional photographer with a love for art and music. Seeking meaningful connections and deep conversations.',
        'location': 'Mombasa, Kenya',
        'interests': ['Photography', 'Art', 'Music', 'Coffee'],
        'profile_picture_url': 'https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=400&h=400&fit=crop&crop=face',
    },
    {
        'name': 'Michael Chen',
        'age': 30,
        'gender': Gender.MALE,
        'seeking_gender': Gender.FEMALE,
        'bio': 'Tech entrepreneur who loves weekend getaways and good food. Always up for trying something new!',
        'location': 'Kisumu, Kenya',
        'interests': ['Technology', 'Travel', 'Food', 'Movies'],
        'profile_picture_url': 'https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=400&h=400&fit=crop&crop=face',
    },
    {
        'name': 'David Martinez',
        'age': 27,
        'gender': Gender.MALE,
        'seeking_gender': Gender.FEMALE,
        'bio': 'Fitness enthusiast and nature lover. Looking for someone to share outdoor adventures and quiet moments.',
        'location': 'Nakuru, Kenya',
        'interests': ['Fitness', 'Nature', 'Reading', 'Cycling'],
        'profile_picture_url': 'https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=400&h=400&fit=crop&crop=face',
    },
    {
        'name': 'Jessica Taylor',
        'age': 26,
        'gender': Gender.FEMALE,
        'seeking_gender': Gender.MALE,
        'bio': 'Artist and dancer with a passion for creativity. Seeking someone who appreciates the beauty in everyday life.',
        'location': 'Eldoret, Kenya',
        'interests': ['Art', 'Dancing', 'Music', 'Literature'],
        'profile_picture_url': 'https://images.unsplash.com/photo-1544005313-94ddf0286df2?w=400&h=400&fit=crop&crop=face',
    },
]


@transaction.atomic
def create_fake_profiles() -> int:
    """
    Insert the seed profiles once.

    Returns:
        Number of profiles created; 0 if seed profiles already exist.
    """
    if Profile.objects.filter(is_fake_profile=True).exists():
        logger.info("Seed profiles already exist, skipping")
        return 0

    created = Profile.objects.bulk_create([
        Profile(is_fake_profile=True, **data) for data in FAKE_PROFILES
    ])

    logger.info(f"Created {len(created)} seed profiles")
    return len(created)
