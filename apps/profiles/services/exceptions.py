"""
Domain-specific exceptions for profiles app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ProfilesServiceError(Exception):
    """Base exception for all profiles service errors."""
    pass


class ProfileNotFoundError(ProfilesServiceError):
    """Raised when a profile does not exist."""
    pass


class InvalidProfileError(ProfilesServiceError):
    """Raised when profile attributes break a business rule."""
    pass
