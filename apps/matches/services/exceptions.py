"""
Domain-specific exceptions for matches app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class MatchesServiceError(Exception):
    """Base exception for all matches service errors."""
    pass


class MatchNotFoundError(MatchesServiceError):
    """Raised when a match does not exist."""
    pass


class NotMatchOwnerError(MatchesServiceError):
    """Raised when a user acts on a match that belongs to someone else."""
    pass


class AlreadyMatchedError(MatchesServiceError):
    """Raised when the user has already recorded interest in the profile."""
    pass


class ProfileRequiredError(MatchesServiceError):
    """Raised when the acting user has not created a profile yet."""
    pass


class SelfMatchError(MatchesServiceError):
    """Raised when a user tries to match their own profile."""
    pass


class IncompatibleCandidateError(MatchesServiceError):
    """Raised when the candidate's gender is not the one the user is seeking."""
    pass
