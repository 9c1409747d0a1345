"""
Dashboard Module
================

Read-only aggregates behind the admin dashboard (platform totals and a
per-user overview of credits and activity) and the member home summary.

Example::

    from apps.dashboard.queries import DashboardQueries

    stats = DashboardQueries.dashboard_stats()
    print(f"{stats['total_users']} users sent {stats['total_messages']} messages")
"""

from django.db.models import Sum, Count, OuterRef, Subquery, IntegerField, Value
from django.db.models.functions import Coalesce

from apps.credits.models import CreditAccount
from apps.credits.services import get_balance
from apps.matches.models import Match
from apps.messaging.models import Message
from apps.profiles.models import Profile


FEATURED_PROFILE_COUNT = 5


def _count_subquery(queryset, field='user'):
    """Correlated COUNT(*) per user, 0 when there are no rows."""
    counts = (
        queryset
        .filter(**{field: OuterRef('user')})
        .order_by()
        .values(field)
        .annotate(count=Count('id'))
        .values('count')
    )
    return Coalesce(Subquery(counts, output_field=IntegerField()), Value(0))


class DashboardQueries:
    """Aggregate queries for the dashboard and home pages. All methods are static."""

    @staticmethod
    def dashboard_stats() -> dict:
        """
        Platform totals.

        Returns:
            dict with total_users (real profiles), seed_profiles,
            total_matches, total_messages, total_credits (outstanding
            balance) and total_purchased
        """
        credit_totals = CreditAccount.objects.aggregate(
            total_credits=Coalesce(Sum('balance'), 0),
            total_purchased=Coalesce(Sum('total_purchased'), 0),
        )

        return {
            'total_users': Profile.objects.filter(is_fake_profile=False).count(),
            'seed_profiles': Profile.objects.filter(is_fake_profile=True).count(),
            'total_matches': Match.objects.count(),
            'total_messages': Message.objects.count(),
            'total_credits': credit_totals['total_credits'],
            'total_purchased': credit_totals['total_purchased'],
        }

    @staticmethod
    def user_overview() -> list:
        """One row per real profile, newest first."""
        balance = (
            CreditAccount.objects
            .filter(user=OuterRef('user'))
            .values('balance')[:1]
        )

        profiles = (
            Profile.objects
            .filter(is_fake_profile=False)
            .select_related('user')
            .annotate(
                credits=Coalesce(Subquery(balance, output_field=IntegerField()), Value(0)),
                match_count=_count_subquery(Match.objects.all()),
                message_count=_count_subquery(Message.objects.all(), field='sender'),
            )
            .order_by('-created_at')
        )

        return [
            {
                'profile_id': profile.id,
                'user_id': profile.user_id,
                'name': profile.name,
                'email': profile.user.email,
                'credits': profile.credits,
                'match_count': profile.match_count,
                'message_count': profile.message_count,
                'joined_at': profile.created_at,
            }
            for profile in profiles
        ]

    @staticmethod
    def home_summary(user) -> dict:
        """
        Member's own activity plus a few featured seed profiles.

        Messages are counted across all of the user's matches, operator
        replies included.

        Returns:
            dict with matches, messages, credits and featured_profiles
            (up to FEATURED_PROFILE_COUNT seed profiles, oldest first)
        """
        featured = (
            Profile.objects
            .filter(is_fake_profile=True)
            .order_by('created_at', 'id')[:FEATURED_PROFILE_COUNT]
        )

        return {
            'matches': Match.objects.filter(user=user).count(),
            'messages': Message.objects.filter(match__user=user).count(),
            'credits': get_balance(user=user),
            'featured_profiles': list(featured),
        }
