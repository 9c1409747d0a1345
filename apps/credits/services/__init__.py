"""
Credits app services layer.

All balance changes go through the ledger so they are locked,
audited and reconcilable.
"""

from .exceptions import (
    CreditsServiceError,
    InsufficientCreditError,
    InvalidCreditAmountError,
    AccountNotFoundError,
    InsufficientPermissionsError,
)

from .ledger import (
    MESSAGE_COST,
    ensure_account,
    get_balance,
    adjust_balance,
    add_credits,
    debit_for_message,
    reconcile_account,
)


__all__ = [
    # Exceptions
    'CreditsServiceError',
    'InsufficientCreditError',
    'InvalidCreditAmountError',
    'AccountNotFoundError',
    'InsufficientPermissionsError',

    # Ledger
    'MESSAGE_COST',
    'ensure_account',
    'get_balance',
    'adjust_balance',
    'add_credits',
    'debit_for_message',
    'reconcile_account',
]
