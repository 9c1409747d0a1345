"""
Profiles app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    ProfilesServiceError,
    ProfileNotFoundError,
    InvalidProfileError,
)

from .profile_management import (
    upsert_profile,
    get_profile_for_user,
    get_profile_by_id,
    find_candidates,
    get_candidates_for_user,
    is_app_admin,
)

from .seeding import create_fake_profiles, FAKE_PROFILES


__all__ = [
    # Exceptions
    'ProfilesServiceError',
    'ProfileNotFoundError',
    'InvalidProfileError',

    # Profile store
    'upsert_profile',
    'get_profile_for_user',
    'get_profile_by_id',
    'find_candidates',
    'get_candidates_for_user',
    'is_app_admin',

    # Seed data
    'create_fake_profiles',
    'FAKE_PROFILES',
]
