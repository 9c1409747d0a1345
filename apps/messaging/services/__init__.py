"""
Messaging app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    MessagingServiceError,
    EmptyMessageError,
    InsufficientPermissionsError,
)

from .conversation import (
    send_message,
    send_admin_reply,
    list_messages,
    list_messages_after,
)

from .realtime import (
    Subscription,
    MessageBroker,
    broker,
    subscribe,
    publish_on_commit,
)


__all__ = [
    # Exceptions
    'MessagingServiceError',
    'EmptyMessageError',
    'InsufficientPermissionsError',

    # Conversation log
    'send_message',
    'send_admin_reply',
    'list_messages',
    'list_messages_after',

    # Realtime
    'Subscription',
    'MessageBroker',
    'broker',
    'subscribe',
    'publish_on_commit',
]
