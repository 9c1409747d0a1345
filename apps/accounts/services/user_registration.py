"""User registration service."""

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
from loguru import logger

from .exceptions import UserRegistrationError

User = get_user_model()


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = ""
) -> User:
    """
    Register a new account.

    The credit account is opened by the post-save signal of the
    credits app, in the same transaction.

    Raises:
        UserRegistrationError: If the email is already taken
    """
    try:
        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=password,
                display_name=display_name
            )
    except IntegrityError:
        raise UserRegistrationError("An account with this email already exists")

    logger.info(f"Registered user {user.id}")
    return user
