"""
Match engine service.

Records one user's interest in a profile and answers ownership
questions for the conversation layer.
"""

from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import Exists, OuterRef, QuerySet
from loguru import logger

from apps.accounts.models import User
from apps.matches.models import Match
from apps.profiles.models import Profile
from apps.profiles.services import (
    get_profile_by_id,
    get_profile_for_user,
    ProfileNotFoundError,
)

from .exceptions import (
    MatchNotFoundError,
    NotMatchOwnerError,
    AlreadyMatchedError,
    ProfileRequiredError,
    SelfMatchError,
    IncompatibleCandidateError,
)


def record_interest(*, user: User, profile_id: UUID) -> Match:
    """
    Record that ``user`` likes the profile ``profile_id``.

    The match is listable immediately; the other side does not have
    to reciprocate.

    Args:
        user: Acting user
        profile_id: Candidate profile

    Returns:
        The created Match

    Raises:
        ProfileNotFoundError: If the candidate doesn't exist
        ProfileRequiredError: If the acting user has no profile
        SelfMatchError: If the candidate is the user's own profile
        IncompatibleCandidateError: If the candidate's gender isn't the one sought
        AlreadyMatchedError: If the user already matched this profile
    """
    candidate = get_profile_by_id(profile_id=profile_id)

    try:
        own_profile = get_profile_for_user(user=user)
    except ProfileNotFoundError:
        raise ProfileRequiredError("Create your profile before matching")

    if candidate.user_id == user.id:
        raise SelfMatchError("You cannot match your own profile")

    if candidate.gender != own_profile.seeking_gender:
        raise IncompatibleCandidateError(
            f"{candidate.name} is not a {own_profile.seeking_gender} profile"
        )

    if Match.objects.filter(user=user, matched_profile=candidate).exists():
        raise AlreadyMatchedError(f"You already matched with {candidate.name}")

    try:
        with transaction.atomic():
            match = Match.objects.create(user=user, matched_profile=candidate)
    except IntegrityError:
        # Concurrent like of the same profile
        raise AlreadyMatchedError(f"You already matched with {candidate.name}")

    logger.info(f"User {user.id} matched profile {candidate.id}")
    return match


def _reciprocal_matches():
    """Matches by the matched profile's owner on the outer match owner's real profile."""
    return Match.objects.filter(
        user_id=OuterRef('matched_profile__user_id'),
        matched_profile__user_id=OuterRef('user_id'),
        matched_profile__is_fake_profile=False,
    )


def list_matches(*, user: User) -> QuerySet[Match]:
    """The user's matches, newest first, each annotated with ``is_mutual``."""
    return (
        Match.objects
        .filter(user=user)
        .select_related('matched_profile')
        .annotate(is_mutual=Exists(_reciprocal_matches()))
        .order_by('-created_at')
    )


def get_match_by_id(*, match_id: UUID) -> Match:
    """
    Raises:
        MatchNotFoundError: If match doesn't exist
    """
    try:
        return Match.objects.select_related('matched_profile', 'user').get(id=match_id)
    except Match.DoesNotExist:
        raise MatchNotFoundError(f"Match with ID {match_id} not found")


def get_match_for_user(*, match_id: UUID, user: User) -> Match:
    """
    Get a match owned by ``user``.

    Raises:
        MatchNotFoundError: If match doesn't exist
        NotMatchOwnerError: If the match belongs to another user
    """
    match = get_match_by_id(match_id=match_id)

    if match.user_id != user.id:
        logger.warning(f"User {user.id} tried to access match {match_id} owned by {match.user_id}")
        raise NotMatchOwnerError("This conversation belongs to another user")

    return match


def is_mutual(match: Match) -> bool:
    """
    Whether the matched profile's owner has also liked the user back.

    Informational only; seed profiles never reciprocate.
    """
    other_user_id = match.matched_profile.user_id
    if other_user_id is None:
        return False

    own_profiles = Profile.objects.filter(user_id=match.user_id, is_fake_profile=False)
    return Match.objects.filter(
        user_id=other_user_id,
        matched_profile__in=own_profiles,
    ).exists()
