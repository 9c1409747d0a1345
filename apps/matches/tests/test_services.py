"""
Service layer unit tests for matches app.

Tests cover:
- Interest recording and its validation order
- Duplicate protection
- Ownership checks
- Discovery deck cursor behaviour
"""

import pytest
from uuid import uuid4

from django.db.models import ProtectedError

from apps.matches.models import Match
from apps.matches.serializers import MatchSerializer
from apps.matches.services import (
    record_interest,
    list_matches,
    get_match_for_user,
    is_mutual,
    DiscoveryDeck,
)
from apps.matches.services.exceptions import (
    MatchNotFoundError,
    NotMatchOwnerError,
    AlreadyMatchedError,
    ProfileRequiredError,
    SelfMatchError,
    IncompatibleCandidateError,
)
from apps.profiles.models import Gender
from apps.profiles.services import ProfileNotFoundError


# =============================================================================
# Record Interest Tests
# =============================================================================

@pytest.mark.django_db
class TestRecordInterest:
    """Tests for record_interest()."""

    def test_record_interest_success(self, user, profile, female_seed):
        match = record_interest(user=user, profile_id=female_seed.id)

        assert match.user == user
        assert match.matched_profile == female_seed
        assert list(list_matches(user=user)) == [match]

    def test_match_with_real_profile(self, user, profile, other_profile):
        match = record_interest(user=user, profile_id=other_profile.id)

        assert match.matched_profile == other_profile

    def test_profile_not_found(self, user, profile):
        with pytest.raises(ProfileNotFoundError):
            record_interest(user=user, profile_id=uuid4())

        assert Match.objects.count() == 0

    def test_acting_user_needs_profile(self, user, female_seed):
        with pytest.raises(ProfileRequiredError):
            record_interest(user=user, profile_id=female_seed.id)

    def test_cannot_match_self(self, user, profile):
        profile.seeking_gender = Gender.MALE
        profile.save()

        with pytest.raises(SelfMatchError):
            record_interest(user=user, profile_id=profile.id)

    def test_incompatible_gender(self, user, profile, male_seed):
        with pytest.raises(IncompatibleCandidateError):
            record_interest(user=user, profile_id=male_seed.id)

        assert Match.objects.count() == 0

    def test_duplicate_rejected(self, user, profile, female_seed):
        record_interest(user=user, profile_id=female_seed.id)

        with pytest.raises(AlreadyMatchedError):
            record_interest(user=user, profile_id=female_seed.id)

        assert Match.objects.filter(user=user, matched_profile=female_seed).count() == 1

    def test_no_reciprocity_needed(self, user, profile, other_user, other_profile):
        """The match is listed for the actor even though the other side never liked back."""
        match = record_interest(user=user, profile_id=other_profile.id)

        assert match in list_matches(user=user)
        assert list(list_matches(user=other_user)) == []


# =============================================================================
# Lookup Tests
# =============================================================================

@pytest.mark.django_db
class TestMatchLookup:
    """Tests for list_matches() and get_match_for_user()."""

    def test_list_matches_newest_first(self, user, profile, seed_profiles):
        females = [p for p in seed_profiles if p.gender == Gender.FEMALE]
        created = [record_interest(user=user, profile_id=p.id) for p in females]

        listed = list(list_matches(user=user))
        created_ats = [m.created_at for m in listed]

        assert {m.id for m in listed} == {m.id for m in created}
        assert created_ats == sorted(created_ats, reverse=True)

    def test_get_match_for_owner(self, user, match):
        assert get_match_for_user(match_id=match.id, user=user) == match

    def test_get_match_not_found(self, user):
        with pytest.raises(MatchNotFoundError):
            get_match_for_user(match_id=uuid4(), user=user)

    def test_get_match_not_owner(self, other_user, match):
        with pytest.raises(NotMatchOwnerError):
            get_match_for_user(match_id=match.id, user=other_user)

    def test_matched_profile_cannot_be_deleted(self, match, female_seed):
        with pytest.raises(ProtectedError):
            female_seed.delete()

        assert Match.objects.filter(id=match.id).exists()


@pytest.mark.django_db
class TestIsMutual:
    """Tests for is_mutual()."""

    def test_one_sided(self, user, profile, other_profile):
        match = record_interest(user=user, profile_id=other_profile.id)

        assert is_mutual(match) is False

    def test_both_sides(self, user, profile, other_user, other_profile):
        match = record_interest(user=user, profile_id=other_profile.id)
        record_interest(user=other_user, profile_id=profile.id)

        assert is_mutual(match) is True

    def test_listing_annotates_in_one_query(
        self, django_assert_num_queries, user, profile, other_user, other_profile, female_seed
    ):
        record_interest(user=user, profile_id=female_seed.id)
        record_interest(user=user, profile_id=other_profile.id)
        record_interest(user=other_user, profile_id=profile.id)

        with django_assert_num_queries(1):
            data = MatchSerializer(list_matches(user=user), many=True).data

        mutual = {item['matched_profile']['id']: item['is_mutual'] for item in data}
        assert mutual == {str(other_profile.id): True, str(female_seed.id): False}

    def test_seed_profiles_never_reciprocate(self, match):
        assert is_mutual(match) is False


# =============================================================================
# Discovery Deck Tests
# =============================================================================

@pytest.mark.django_db
class TestDiscoveryDeck:
    """Tests for DiscoveryDeck."""

    def test_deck_holds_sought_candidates(self, user, profile, seed_profiles):
        deck = DiscoveryDeck.for_user(user)

        assert len(deck) == 3
        assert deck.current().gender == Gender.FEMALE

    def test_like_records_match_and_advances(self, user, profile, seed_profiles):
        deck = DiscoveryDeck.for_user(user)
        first = deck.current()

        match = deck.swipe(liked=True)

        assert match.matched_profile == first
        assert deck.position == 1
        assert deck.current() != first

    def test_pass_advances_without_match(self, user, profile, seed_profiles):
        deck = DiscoveryDeck.for_user(user)

        assert deck.swipe(liked=False) is None
        assert deck.position == 1
        assert Match.objects.count() == 0

    def test_failed_like_still_advances(self, user, profile, female_seed):
        record_interest(user=user, profile_id=female_seed.id)
        deck = DiscoveryDeck(user, [female_seed])

        assert deck.swipe(liked=True) is None
        assert isinstance(deck.last_error, AlreadyMatchedError)
        assert deck.current() is None

    def test_exhausted_deck(self, user, profile, seed_profiles):
        deck = DiscoveryDeck.for_user(user)
        while deck.current() is not None:
            deck.swipe(liked=True)

        assert deck.remaining == 0
        assert deck.swipe(liked=True) is None
        assert Match.objects.filter(user=user).count() == 3

    def test_decks_are_independent(self, user, profile, seed_profiles):
        first = DiscoveryDeck.for_user(user)
        second = DiscoveryDeck.for_user(user)

        first.swipe(liked=False)

        assert second.position == 0
