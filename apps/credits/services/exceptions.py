"""
Domain-specific exceptions for credits app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CreditsServiceError(Exception):
    """Base exception for all credits service errors."""
    pass


class InsufficientCreditError(CreditsServiceError):
    """Raised when a user has no credit left to spend."""
    pass


class InvalidCreditAmountError(CreditsServiceError):
    """Raised when a top-up or adjustment amount is not acceptable."""
    pass


class AccountNotFoundError(CreditsServiceError):
    """Raised when a user or their credit account does not exist."""
    pass


class InsufficientPermissionsError(CreditsServiceError):
    """Raised when a non-admin tries to grant credits."""
    pass
