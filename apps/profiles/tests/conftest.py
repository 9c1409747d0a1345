import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.profiles.models import Profile, Gender
from apps.profiles.services import create_fake_profiles


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='alex@example.com',
        password='TestPass123!',
        display_name='Alex',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='sam@example.com',
        password='TestPass123!',
        display_name='Sam',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return API client authenticated as test user."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def profile(db, user):
    """Male profile seeking women."""
    return Profile.objects.create(
        user=user,
        name='Alex',
        age=29,
        gender=Gender.MALE,
        seeking_gender=Gender.FEMALE,
        location='Nairobi, Kenya',
        bio='Sunsets and long walks.',
        interests=['Hiking', 'Coffee'],
    )


@pytest.fixture
def other_profile(db, other_user):
    """Female profile seeking men."""
    return Profile.objects.create(
        user=other_user,
        name='Sam',
        age=27,
        gender=Gender.FEMALE,
        seeking_gender=Gender.MALE,
    )


@pytest.fixture
def seed_profiles(db):
    """The built-in seed profiles (3 female, 2 male)."""
    create_fake_profiles()
    return list(Profile.objects.filter(is_fake_profile=True))


@pytest.fixture
def profile_data():
    """Valid payload for PUT /api/profiles/me/."""
    return {
        'name': 'Alex',
        'age': 29,
        'gender': 'male',
        'seeking_gender': 'female',
        'location': 'Nairobi, Kenya',
        'bio': 'Sunsets and long walks.',
        'interests': ['Hiking', 'Coffee'],
    }
