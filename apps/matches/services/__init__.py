"""
Matches app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    MatchesServiceError,
    MatchNotFoundError,
    NotMatchOwnerError,
    AlreadyMatchedError,
    ProfileRequiredError,
    SelfMatchError,
    IncompatibleCandidateError,
)

from .match_management import (
    record_interest,
    list_matches,
    get_match_by_id,
    get_match_for_user,
    is_mutual,
)

from .discovery import DiscoveryDeck


__all__ = [
    # Exceptions
    'MatchesServiceError',
    'MatchNotFoundError',
    'NotMatchOwnerError',
    'AlreadyMatchedError',
    'ProfileRequiredError',
    'SelfMatchError',
    'IncompatibleCandidateError',

    # Match engine
    'record_interest',
    'list_matches',
    'get_match_by_id',
    'get_match_for_user',
    'is_mutual',

    # Discovery
    'DiscoveryDeck',
]
