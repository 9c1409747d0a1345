"""
Credit ledger service.

Balances are only ever changed through this module. Every change
writes a CreditEntry in the same transaction, so an account's entries
always sum to its balance.
"""

from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.db.models import F, Sum
from django.utils import timezone
from loguru import logger

from apps.accounts.models import User
from apps.credits.models import CreditAccount, CreditEntry, EntryKind
from apps.profiles.services import is_app_admin

from .exceptions import (
    InsufficientCreditError,
    InvalidCreditAmountError,
    AccountNotFoundError,
    InsufficientPermissionsError,
)


MESSAGE_COST = 1


def ensure_account(*, user: User) -> CreditAccount:
    """
    Get the user's credit account, creating it on first use.

    New accounts start with ``settings.SIGNUP_CREDITS``.
    """
    account, created = CreditAccount.objects.get_or_create(
        user=user,
        defaults={'balance': settings.SIGNUP_CREDITS},
    )
    if created and account.balance:
        CreditEntry.objects.create(
            account=account,
            delta=account.balance,
            kind=EntryKind.ADJUSTMENT,
            balance_after=account.balance,
        )
    return account


def get_balance(*, user: User) -> int:
    """Current balance; a user without an account has 0."""
    balance = (
        CreditAccount.objects
        .filter(user=user)
        .values_list('balance', flat=True)
        .first()
    )
    return balance or 0


@transaction.atomic
def adjust_balance(
    *,
    user: User,
    delta: int,
    kind: str = EntryKind.ADJUSTMENT,
    created_by: User = None
) -> int:
    """
    Apply ``delta`` to the user's balance under a row lock.

    Positive top-ups also count towards ``total_purchased``. A negative
    delta may not take the balance below zero.

    Returns:
        The new balance

    Raises:
        InvalidCreditAmountError: If delta is zero
        InsufficientCreditError: If a negative delta exceeds the balance
        AccountNotFoundError: If the user has no credit account
    """
    if delta == 0:
        raise InvalidCreditAmountError("Credit change must not be zero")

    try:
        account = CreditAccount.objects.select_for_update().get(user=user)
    except CreditAccount.DoesNotExist:
        raise AccountNotFoundError(f"No credit account for user {user.id}")

    if account.balance + delta < 0:
        raise InsufficientCreditError(
            f"Cannot remove {-delta} credits, balance is {account.balance}"
        )

    account.balance += delta
    update_fields = ['balance', 'updated_at']
    if kind == EntryKind.TOP_UP and delta > 0:
        account.total_purchased += delta
        update_fields.append('total_purchased')
    account.save(update_fields=update_fields)

    CreditEntry.objects.create(
        account=account,
        delta=delta,
        kind=kind,
        balance_after=account.balance,
        created_by=created_by,
    )

    return account.balance


def add_credits(*, user_id: UUID, amount: int, added_by: User) -> int:
    """
    Admin top-up.

    Args:
        user_id: Account receiving the credits
        amount: Number of credits (> 0)
        added_by: Admin performing the top-up

    Returns:
        The recipient's new balance

    Raises:
        InsufficientPermissionsError: If added_by is not an app admin
        InvalidCreditAmountError: If amount is not positive
        AccountNotFoundError: If the recipient doesn't exist
    """
    if not is_app_admin(added_by):
        logger.warning(f"User {added_by.id} tried to add credits without admin rights")
        raise InsufficientPermissionsError("Only admins can add credits")

    if amount <= 0:
        raise InvalidCreditAmountError("Credit amount must be positive")

    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise AccountNotFoundError(f"User with ID {user_id} not found")

    new_balance = adjust_balance(
        user=user,
        delta=amount,
        kind=EntryKind.TOP_UP,
        created_by=added_by,
    )

    logger.info(f"Admin {added_by.id} added {amount} credits to user {user.id}, balance {new_balance}")
    return new_balance


def debit_for_message(*, user: User) -> CreditEntry:
    """
    Spend one credit for a message.

    A single conditional UPDATE (``balance >= MESSAGE_COST``) does the check and the
    write together, so two concurrent senders can never both spend the
    last credit. Must run inside the caller's transaction so the debit
    and the message insert commit or roll back together.

    Returns:
        The ledger entry for the debit (the caller links the message)

    Raises:
        InsufficientCreditError: If the balance is zero or there is no account
    """
    updated = (
        CreditAccount.objects
        .filter(user=user, balance__gte=MESSAGE_COST)
        .update(balance=F('balance') - MESSAGE_COST, updated_at=timezone.now())
    )
    if not updated:
        raise InsufficientCreditError("No credits remaining. Purchase more credits to continue messaging.")

    account = CreditAccount.objects.get(user=user)
    return CreditEntry.objects.create(
        account=account,
        delta=-MESSAGE_COST,
        kind=EntryKind.MESSAGE,
        balance_after=account.balance,
        created_by=user,
    )


def reconcile_account(*, user: User) -> dict:
    """
    Compare a balance with the sum of its ledger entries.

    Returns:
        dict with balance, ledger_total, drift and is_consistent
    """
    try:
        account = CreditAccount.objects.get(user=user)
    except CreditAccount.DoesNotExist:
        return {'balance': 0, 'ledger_total': 0, 'drift': 0, 'is_consistent': True}

    ledger_total = account.entries.aggregate(total=Sum('delta'))['total'] or 0
    drift = account.balance - ledger_total

    if drift:
        logger.warning(f"Credit drift of {drift} on account {account.id} (user {user.id})")

    return {
        'balance': account.balance,
        'ledger_total': ledger_total,
        'drift': drift,
        'is_consistent': drift == 0,
    }
