"""
Profile store service.

Full-record upsert keyed by the owning account, lookups, and the
gender-filtered candidate query that feeds discovery.
"""

from typing import List, Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction, IntegrityError
from loguru import logger

from apps.accounts.models import User
from apps.profiles.models import Profile, Gender, MIN_AGE, MAX_AGE

from .exceptions import ProfileNotFoundError, InvalidProfileError


def _normalize_interests(interests) -> list:
    """Strip, drop blanks and de-duplicate while keeping first-seen order."""
    seen = []
    for interest in interests or []:
        value = str(interest).strip()
        if value and value not in seen:
            seen.append(value)
    return seen


def _validate_attributes(*, name: str, age: int, gender: str, seeking_gender: str) -> None:
    if not name or not name.strip():
        raise InvalidProfileError("Name is required")
    if not (MIN_AGE <= age <= MAX_AGE):
        raise InvalidProfileError(f"Age must be between {MIN_AGE} and {MAX_AGE}")
    for label, value in (('gender', gender), ('seeking_gender', seeking_gender)):
        if value not in Gender.values:
            raise InvalidProfileError(
                f"Invalid {label}: '{value}'. Valid options: {', '.join(Gender.values)}"
            )


@transaction.atomic
def upsert_profile(
    *,
    user: User,
    name: str,
    age: int,
    gender: str,
    seeking_gender: str,
    location: str = '',
    bio: str = '',
    interests: Optional[List[str]] = None,
    profile_picture_url: str = '',
    intro_video_url: str = '',
) -> Profile:
    """
    Create or replace the user's profile.

    This is a full-record write: every attribute not passed is reset to
    its default. A user never ends up with two real profiles; the
    second save replaces the first instead of failing. ``is_admin`` is
    never touched here.

    Args:
        user: Owning account
        name, age, gender, seeking_gender: Required display attributes
        location, bio, interests, profile_picture_url, intro_video_url:
            Optional display attributes

    Returns:
        The saved Profile

    Raises:
        InvalidProfileError: If an attribute breaks a business rule
    """
    _validate_attributes(name=name, age=age, gender=gender, seeking_gender=seeking_gender)

    attributes = {
        'name': name.strip(),
        'age': age,
        'gender': gender,
        'seeking_gender': seeking_gender,
        'location': location or '',
        'bio': bio or '',
        'interests': _normalize_interests(interests),
        'profile_picture_url': profile_picture_url or '',
        'intro_video_url': intro_video_url or '',
    }

    try:
        with transaction.atomic():
            profile, created = Profile.objects.update_or_create(
                user=user,
                is_fake_profile=False,
                defaults=attributes,
            )
    except IntegrityError:
        # A concurrent first save won the insert; replace its contents
        profile = (
            Profile.objects
            .select_for_update()
            .get(user=user, is_fake_profile=False)
        )
        for field, value in attributes.items():
            setattr(profile, field, value)
        profile.save()
        created = False

    logger.info(f"Profile {'created' if created else 'updated'} for user {user.id}")
    return profile


def get_profile_for_user(*, user: User) -> Profile:
    """
    Get the user's own (non-seed) profile.

    Raises:
        ProfileNotFoundError: If the user has not created a profile yet
    """
    try:
        return Profile.objects.get(user=user, is_fake_profile=False)
    except Profile.DoesNotExist:
        raise ProfileNotFoundError("You have not created a profile yet")


def get_profile_by_id(*, profile_id: UUID) -> Profile:
    """
    Raises:
        ProfileNotFoundError: If profile doesn't exist
    """
    try:
        return Profile.objects.get(id=profile_id)
    except Profile.DoesNotExist:
        raise ProfileNotFoundError(f"Profile with ID {profile_id} not found")


def find_candidates(
    *,
    seeking_gender: str,
    exclude_user: Optional[User],
    limit: int
) -> List[Profile]:
    """
    Profiles whose gender equals ``seeking_gender``.

    The caller's own profile is excluded. The result is capped at
    ``limit`` and carries no pagination cursor; candidates already
    matched are not filtered out.
    """
    if limit <= 0:
        return []

    queryset = Profile.objects.filter(gender=seeking_gender)
    if exclude_user is not None:
        queryset = queryset.exclude(user=exclude_user)

    return list(queryset[:limit])


def get_candidates_for_user(*, user: User, limit: Optional[int] = None) -> List[Profile]:
    """Discovery batch for ``user`` based on their own seeking preference."""
    try:
        own_profile = get_profile_for_user(user=user)
    except ProfileNotFoundError:
        return []

    if limit is None:
        limit = settings.DISCOVER_BATCH_SIZE

    return find_candidates(
        seeking_gender=own_profile.seeking_gender,
        exclude_user=user,
        limit=limit,
    )


def is_app_admin(user) -> bool:
    """Staff accounts and accounts whose profile is flagged admin."""
    if user is None or not user.is_authenticated:
        return False
    if user.is_staff:
        return True
    return Profile.objects.filter(user=user, is_admin=True).exists()
