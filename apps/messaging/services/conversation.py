"""
Conversation log service.

Sending a message and paying for it happen in one transaction: the
credit debit, the message insert and its ledger entry either all
commit or none do. Live subscribers are notified after commit.
"""

from typing import List
from uuid import UUID

from django.db import transaction
from loguru import logger

from apps.accounts.models import User
from apps.credits.services import (
    get_balance,
    debit_for_message,
    InsufficientCreditError,
)
from apps.matches.services import (
    get_match_by_id,
    get_match_for_user,
    NotMatchOwnerError,
)
from apps.matches.models import Match
from apps.messaging.models import Message
from apps.profiles.services import is_app_admin

from .exceptions import EmptyMessageError, InsufficientPermissionsError
from .realtime import publish_on_commit


def _clean_content(content: str) -> str:
    text = (content or '').strip()
    if not text:
        raise EmptyMessageError("Message cannot be empty")
    return text


def send_message(*, match_id: UUID, sender: User, content: str) -> Message:
    """
    Send a message in the sender's conversation, spending one credit.

    Checks run in this order: content, match existence, ownership,
    balance. The balance check up front only rejects early; the
    conditional debit inside the transaction is what guarantees two
    concurrent sends cannot spend the same last credit.

    Args:
        match_id: Conversation scope
        sender: Owner of the match
        content: Message text (trimmed before storing)

    Returns:
        The stored Message

    Raises:
        EmptyMessageError: If content is blank
        MatchNotFoundError: If match doesn't exist
        NotMatchOwnerError: If the match belongs to another user
        InsufficientCreditError: If the sender has no credit left
    """
    text = _clean_content(content)
    match = get_match_for_user(match_id=match_id, user=sender)

    if get_balance(user=sender) <= 0:
        logger.warning(f"User {sender.id} has no credits to message match {match.id}")
        raise InsufficientCreditError("No credits remaining. Purchase more credits to continue messaging.")

    try:
        with transaction.atomic():
            entry = debit_for_message(user=sender)
            message = Message.objects.create(
                match=match,
                sender=sender,
                content=text,
                is_admin_reply=False,
            )
            entry.message = message
            entry.save(update_fields=['message'])
            publish_on_commit(message)
    except InsufficientCreditError:
        logger.warning(f"User {sender.id} lost the race for their last credit on match {match.id}")
        raise

    logger.info(f"User {sender.id} sent message {message.id} on match {match.id}, balance {entry.balance_after}")
    return message


@transaction.atomic
def send_admin_reply(*, match_id: UUID, admin: User, content: str) -> Message:
    """
    Operator reply on behalf of the matched profile. Never debits credits.

    Raises:
        EmptyMessageError: If content is blank
        InsufficientPermissionsError: If admin is not an app admin
        MatchNotFoundError: If match doesn't exist
    """
    text = _clean_content(content)

    if not is_app_admin(admin):
        logger.warning(f"User {admin.id} tried to send an operator reply without admin rights")
        raise InsufficientPermissionsError("Only admins can reply on behalf of a profile")

    match = get_match_by_id(match_id=match_id)

    message = Message.objects.create(
        match=match,
        sender=admin,
        content=text,
        is_admin_reply=True,
    )
    publish_on_commit(message)

    logger.info(f"Admin {admin.id} replied on match {match.id}")
    return message


def list_messages(*, match_id: UUID, user: User) -> List[Message]:
    """
    Full conversation, oldest first.

    The match owner and app admins may read it.

    Raises:
        MatchNotFoundError: If match doesn't exist
        NotMatchOwnerError: If user is neither the owner nor an admin
    """
    match = get_match_by_id(match_id=match_id)

    if match.user_id != user.id and not is_app_admin(user):
        logger.warning(f"User {user.id} tried to read match {match_id} owned by {match.user_id}")
        raise NotMatchOwnerError("This conversation belongs to another user")

    return list(
        Message.objects
        .filter(match=match)
        .order_by('created_at', 'id')
    )


def list_messages_after(*, match: Match, after_id: int) -> List[Message]:
    """Messages in ``match`` stored after the message ``after_id``, oldest first."""
    return list(
        Message.objects
        .filter(match=match, id__gt=after_id)
        .order_by('id')
    )
