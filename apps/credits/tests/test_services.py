"""
Service layer unit tests for credits app.

Tests cover:
- Account creation and balances
- Locked adjustments and the audit ledger
- Admin top-ups
- Conditional message debit
- Reconciliation
"""

import pytest
from uuid import uuid4
from django.db import transaction

from apps.accounts.models import User
from apps.credits.models import CreditAccount, CreditEntry, EntryKind
from apps.credits.services import (
    ensure_account,
    get_balance,
    adjust_balance,
    add_credits,
    debit_for_message,
    reconcile_account,
)
from apps.credits.services.exceptions import (
    InsufficientCreditError,
    InvalidCreditAmountError,
    AccountNotFoundError,
    InsufficientPermissionsError,
)


# =============================================================================
# Account Tests
# =============================================================================

@pytest.mark.django_db
class TestAccounts:
    """Tests for ensure_account() and get_balance()."""

    def test_account_created_with_user(self, user):
        account = CreditAccount.objects.get(user=user)

        assert account.balance == 0
        assert account.total_purchased == 0
        assert account.entries.count() == 0

    def test_missing_account_reads_as_zero(self, user):
        CreditAccount.objects.filter(user=user).delete()

        assert get_balance(user=user) == 0

    def test_ensure_account_recreates(self, user):
        CreditAccount.objects.filter(user=user).delete()

        account = ensure_account(user=user)

        assert account.balance == 0
        assert CreditAccount.objects.filter(user=user).count() == 1

    def test_signup_credits_setting(self, settings, db):
        settings.SIGNUP_CREDITS = 3

        user = User.objects.create_user(email='new@example.com', password='TestPass123!')

        assert get_balance(user=user) == 3
        entry = CreditEntry.objects.get(account__user=user)
        assert entry.kind == EntryKind.ADJUSTMENT
        assert entry.delta == 3
        assert reconcile_account(user=user)['is_consistent'] is True


# =============================================================================
# Adjustment Tests
# =============================================================================

@pytest.mark.django_db
class TestAdjustBalance:
    """Tests for adjust_balance()."""

    def test_top_up(self, user):
        balance = adjust_balance(user=user, delta=10, kind=EntryKind.TOP_UP)

        account = CreditAccount.objects.get(user=user)
        assert balance == 10
        assert account.balance == 10
        assert account.total_purchased == 10

        entry = account.entries.get()
        assert entry.delta == 10
        assert entry.kind == EntryKind.TOP_UP
        assert entry.balance_after == 10

    def test_adjustment_does_not_count_as_purchase(self, user):
        adjust_balance(user=user, delta=2)

        account = CreditAccount.objects.get(user=user)
        assert account.balance == 2
        assert account.total_purchased == 0

    def test_negative_adjustment(self, funded_user):
        balance = adjust_balance(user=funded_user, delta=-2)

        assert balance == 3

    def test_cannot_go_negative(self, funded_user):
        with pytest.raises(InsufficientCreditError):
            adjust_balance(user=funded_user, delta=-6)

        assert get_balance(user=funded_user) == 5
        assert CreditEntry.objects.filter(account__user=funded_user).count() == 1

    def test_zero_delta_rejected(self, user):
        with pytest.raises(InvalidCreditAmountError):
            adjust_balance(user=user, delta=0)

    def test_missing_account_not_found(self, user):
        CreditAccount.objects.filter(user=user).delete()

        with pytest.raises(AccountNotFoundError):
            adjust_balance(user=user, delta=4)
        with pytest.raises(AccountNotFoundError):
            adjust_balance(user=user, delta=-1)

        assert not CreditAccount.objects.filter(user=user).exists()
        assert get_balance(user=user) == 0


# =============================================================================
# Admin Top-up Tests
# =============================================================================

@pytest.mark.django_db
class TestAddCredits:
    """Tests for add_credits()."""

    def test_admin_adds_credits(self, admin_user, user):
        balance = add_credits(user_id=user.id, amount=10, added_by=admin_user)

        assert balance == 10
        entry = CreditEntry.objects.get(account__user=user)
        assert entry.created_by == admin_user
        assert entry.kind == EntryKind.TOP_UP

    def test_staff_can_add_credits(self, user):
        staff = User.objects.create_user(
            email='staff@example.com',
            password='TestPass123!',
            is_staff=True,
        )

        assert add_credits(user_id=user.id, amount=1, added_by=staff) == 1

    def test_non_admin_rejected(self, user):
        with pytest.raises(InsufficientPermissionsError):
            add_credits(user_id=user.id, amount=10, added_by=user)

        assert get_balance(user=user) == 0

    @pytest.mark.parametrize('amount', [0, -5])
    def test_amount_must_be_positive(self, admin_user, user, amount):
        with pytest.raises(InvalidCreditAmountError):
            add_credits(user_id=user.id, amount=amount, added_by=admin_user)

    def test_unknown_user(self, admin_user):
        with pytest.raises(AccountNotFoundError):
            add_credits(user_id=uuid4(), amount=10, added_by=admin_user)


# =============================================================================
# Message Debit Tests
# =============================================================================

@pytest.mark.django_db
class TestDebitForMessage:
    """Tests for debit_for_message()."""

    def test_debit_one_credit(self, funded_user):
        with transaction.atomic():
            entry = debit_for_message(user=funded_user)

        assert get_balance(user=funded_user) == 4
        assert entry.delta == -1
        assert entry.kind == EntryKind.MESSAGE
        assert entry.balance_after == 4

    def test_zero_balance_rejected(self, user):
        with pytest.raises(InsufficientCreditError):
            with transaction.atomic():
                debit_for_message(user=user)

        assert get_balance(user=user) == 0
        assert CreditEntry.objects.filter(account__user=user).count() == 0

    def test_no_account_rejected(self, user):
        CreditAccount.objects.filter(user=user).delete()

        with pytest.raises(InsufficientCreditError):
            debit_for_message(user=user)

    def test_last_credit_then_empty(self, user):
        adjust_balance(user=user, delta=1, kind=EntryKind.TOP_UP)

        debit_for_message(user=user)

        with pytest.raises(InsufficientCreditError):
            debit_for_message(user=user)
        assert get_balance(user=user) == 0


# =============================================================================
# Reconciliation Tests
# =============================================================================

@pytest.mark.django_db
class TestReconcile:
    """Tests for reconcile_account()."""

    def test_consistent_after_mixed_activity(self, funded_user):
        adjust_balance(user=funded_user, delta=3, kind=EntryKind.TOP_UP)
        debit_for_message(user=funded_user)
        debit_for_message(user=funded_user)
        adjust_balance(user=funded_user, delta=-1)

        report = reconcile_account(user=funded_user)

        assert report == {
            'balance': 5,
            'ledger_total': 5,
            'drift': 0,
            'is_consistent': True,
        }

    def test_detects_drift(self, funded_user):
        CreditAccount.objects.filter(user=funded_user).update(balance=50)

        report = reconcile_account(user=funded_user)

        assert report['drift'] == 45
        assert report['is_consistent'] is False

    def test_no_account(self, user):
        CreditAccount.objects.filter(user=user).delete()

        assert reconcile_account(user=user)['is_consistent'] is True
