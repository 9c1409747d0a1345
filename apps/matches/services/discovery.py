"""
Swipe deck for one discovery session.

The deck owns the fetched batch and the cursor into it. Callers hold
on to the deck for as long as the session lasts; there is no shared
cursor between sessions.
"""

from typing import List, Optional

from apps.accounts.models import User
from apps.matches.models import Match
from apps.profiles.models import Profile
from apps.profiles.services import get_candidates_for_user, ProfilesServiceError

from .exceptions import MatchesServiceError
from .match_management import record_interest


class DiscoveryDeck:
    """
    Usage:
        deck = DiscoveryDeck.for_user(user)
        while deck.current() is not None:
            deck.swipe(liked=True)
    """

    def __init__(self, user: User, candidates: List[Profile]):
        self.user = user
        self.candidates = list(candidates)
        self.position = 0
        self.last_error: Optional[Exception] = None

    @classmethod
    def for_user(cls, user: User, limit: Optional[int] = None) -> 'DiscoveryDeck':
        return cls(user, get_candidates_for_user(user=user, limit=limit))

    def __len__(self):
        return len(self.candidates)

    @property
    def remaining(self) -> int:
        return max(len(self.candidates) - self.position, 0)

    def current(self) -> Optional[Profile]:
        """Candidate under the cursor, or None once the deck is exhausted."""
        if self.position >= len(self.candidates):
            return None
        return self.candidates[self.position]

    def swipe(self, *, liked: bool) -> Optional[Match]:
        """
        Pass on or like the current candidate and move to the next one.

        A like records interest. The cursor advances whether or not the
        match could be recorded; the failure is kept in ``last_error``.
        """
        candidate = self.current()
        if candidate is None:
            return None

        self.last_error = None
        match = None
        try:
            if liked:
                match = record_interest(user=self.user, profile_id=candidate.id)
        except (MatchesServiceError, ProfilesServiceError) as e:
            self.last_error = e
        finally:
            self.position += 1

        return match
