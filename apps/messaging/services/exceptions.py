"""
Domain-specific exceptions for messaging app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
Match lookups and credit checks raise the matches and credits
exceptions unchanged.
"""


class MessagingServiceError(Exception):
    """Base exception for all messaging service errors."""
    pass


class EmptyMessageError(MessagingServiceError):
    """Raised when message content is blank after trimming."""
    pass


class InsufficientPermissionsError(MessagingServiceError):
    """Raised when a non-admin tries to send an operator reply."""
    pass
