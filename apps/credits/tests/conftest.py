import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.credits.services import adjust_balance
from apps.credits.models import EntryKind
from apps.profiles.models import Profile, Gender


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user (starts with 0 credits)."""
    return User.objects.create_user(
        email='alex@example.com',
        password='TestPass123!',
        display_name='Alex',
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
def funded_user(user):
    """Test user with 5 purchased credits."""
    adjust_balance(user=user, delta=5, kind=EntryKind.TOP_UP)
    return user


@pytest.fixture
def authenticated_client(api_client, user):
    """Return API client authenticated as test user."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
