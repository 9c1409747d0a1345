"""
In-process fan-out of committed messages to live subscribers.

Subscribers register per match. ``publish_on_commit`` hands a message
to the broker only once the surrounding transaction commits, so
subscribers never see a message that was rolled back. The broker lives
in process memory: subscribers only hear about messages committed by
the same process.
"""

import queue
import threading
from collections import defaultdict
from typing import Callable, Optional

from django.db import transaction
from loguru import logger

from apps.messaging.models import Message


_CLOSED = object()


class Subscription:
    """
    Live feed of new messages in one conversation.

    With ``on_insert`` every message is passed to the callback on the
    publishing thread. Without it, messages queue up and are read with
    ``get()`` or by iterating. Closing the subscription stops delivery
    and ends any iteration in progress.
    """

    def __init__(self, broker: 'MessageBroker', match_id, on_insert: Optional[Callable] = None):
        self.broker = broker
        self.match_id = str(match_id)
        self.on_insert = on_insert
        self.closed = False
        self._queue = queue.Queue()

    def deliver(self, message: Message) -> None:
        if self.closed:
            return
        if self.on_insert is not None:
            self.on_insert(message)
        else:
            self._queue.put(message)

    def get(self, timeout: Optional[float] = None) -> Optional[Message]:
        """Next message, or None on timeout or once closed."""
        if self.closed and self._queue.empty():
            return None
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            return None
        return item

    def __iter__(self):
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                self._queue.put(_CLOSED)
                return
            yield item

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.broker.unsubscribe(self)
        self._queue.put(_CLOSED)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        state = 'closed' if self.closed else 'open'
        return f"<Subscription match={self.match_id} {state}>"


class MessageBroker:
    """Thread-safe registry of subscriptions keyed by match id."""

    def __init__(self):
        self._lock = threading.Lock()
        self._subscriptions = defaultdict(list)

    def subscribe(self, match_id, on_insert: Optional[Callable] = None) -> Subscription:
        subscription = Subscription(self, match_id, on_insert=on_insert)
        with self._lock:
            self._subscriptions[subscription.match_id].append(subscription)
        logger.debug(f"Subscribed to match {subscription.match_id}")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            subscribers = self._subscriptions.get(subscription.match_id, [])
            if subscription in subscribers:
                subscribers.remove(subscription)
            if not subscribers:
                self._subscriptions.pop(subscription.match_id, None)
        logger.debug(f"Unsubscribed from match {subscription.match_id}")

    def subscriber_count(self, match_id) -> int:
        with self._lock:
            return len(self._subscriptions.get(str(match_id), []))

    def publish(self, message: Message) -> int:
        """
        Deliver ``message`` to every open subscription of its match.

        A failing callback is logged and does not stop delivery to the
        other subscribers.

        Returns:
            Number of subscriptions the message was delivered to
        """
        with self._lock:
            subscribers = list(self._subscriptions.get(str(message.match_id), []))

        delivered = 0
        for subscription in subscribers:
            try:
                subscription.deliver(message)
            except Exception:
                logger.exception(f"Subscriber callback failed for match {message.match_id}")
                continue
            delivered += 1
        return delivered


broker = MessageBroker()


def subscribe(match_id, on_insert: Optional[Callable] = None) -> Subscription:
    """
    Subscribe to messages committed to the conversation of ``match_id``.

    Usage:
        with subscribe(match.id) as subscription:
            for message in subscription:
                ...
    """
    return broker.subscribe(match_id, on_insert=on_insert)


def publish_on_commit(message: Message) -> None:
    transaction.on_commit(lambda: broker.publish(message))
