import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.profiles.models import Profile, Gender


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        display_name='Test User',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return API client authenticated as test user."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def user_profile(db, user):
    """Profile owned by the test user."""
    return Profile.objects.create(
        user=user,
        name='Test User',
        age=30,
        gender=Gender.MALE,
        seeking_gender=Gender.FEMALE,
    )
