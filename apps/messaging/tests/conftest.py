import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.credits.models import EntryKind
from apps.credits.services import adjust_balance
from apps.matches.models import Match
from apps.messaging.services import broker
from apps.profiles.models import Profile, Gender


@pytest.fixture(autouse=True)
def clean_broker():
    """Every test starts and ends without live subscriptions."""
    yield
    with broker._lock:
        broker._subscriptions.clear()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return the sending user (0 credits)."""
    return User.objects.create_user(
        email='alex@example.com',
        password='TestPass123!',
        display_name='Alex',
    )


@pytest.fixture
def other_user(db):
    """Create and return a user who doesn't own the match."""
    return User.objects.create_user(
        email='sam@example.com',
        password='TestPass123!',
        display_name='Sam',
    )


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
def profile(db, user):
    """Male profile seeking women."""
    return Profile.objects.create(
        user=user,
        name='Alex',
        age=29,
        gender=Gender.MALE,
        seeking_gender=Gender.FEMALE,
    )


@pytest.fixture
def seed_profile(db):
    """A single seed profile without an owner."""
    return Profile.objects.create(
        name='Emily Johnson',
        age=25,
        gender=Gender.FEMALE,
        seeking_gender=Gender.MALE,
        is_fake_profile=True,
    )


@pytest.fixture
def match(db, user, profile, seed_profile):
    """Alex's conversation with the seed profile."""
    return Match.objects.create(user=user, matched_profile=seed_profile)


@pytest.fixture
def funded_user(user):
    """Sending user with 3 credits."""
    adjust_balance(user=user, delta=3, kind=EntryKind.TOP_UP)
    return user


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def authenticated_client(user):
    """Return API client authenticated as the sending user."""
    return _client_for(user)


@pytest.fixture
def other_client(other_user):
    """Return API client authenticated as a non-owner."""
    return _client_for(other_user)


@pytest.fixture
def admin_client(admin_user):
    """Return API client authenticated as an admin."""
    return _client_for(admin_user)
