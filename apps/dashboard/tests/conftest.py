import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.credits.models import EntryKind
from apps.credits.services import adjust_balance
from apps.matches.models import Match
from apps.messaging.services import send_message
from apps.profiles.models import Profile, Gender
from apps.profiles.services import create_fake_profiles


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """User whose profile is flagged admin."""
    admin = User.objects.create_user(
        email='admin@example.com',
        password='TestPass123!',
        display_name='Admin',
    )
    Profile.objects.create(
        user=admin,
        name='Admin',
        age=35,
        gender=Gender.OTHER,
        seeking_gender=Gender.OTHER,
        is_admin=True,
    )
    return admin


@pytest.fixture
def member(db):
    """Regular user with a profile, 5 purchased credits and one match."""
    user = User.objects.create_user(
        email='alex@example.com',
        password='TestPass123!',
        display_name='Alex',
    )
    Profile.objects.create(
        user=user,
        name='Alex',
        age=29,
        gender=Gender.MALE,
        seeking_gender=Gender.FEMALE,
    )
    adjust_balance(user=user, delta=5, kind=EntryKind.TOP_UP)
    return user


@pytest.fixture
def activity(member):
    """Member matched a seed profile and sent two messages."""
    create_fake_profiles()
    seed = Profile.objects.filter(is_fake_profile=True, gender=Gender.FEMALE).first()
    match = Match.objects.create(user=member, matched_profile=seed)
    send_message(match_id=match.id, sender=member, content='hi')
    send_message(match_id=match.id, sender=member, content='still there?')
    return match


@pytest.fixture
def admin_client(api_client, admin_user):
    """Return API client authenticated as admin."""
    refresh = RefreshToken.for_user(admin_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def member_client(api_client, member):
    """Return API client authenticated as a regular user."""
    refresh = RefreshToken.for_user(member)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
