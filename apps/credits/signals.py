from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .services import ensure_account


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_credit_account(sender, instance, created, **kwargs):
    """Every new account gets a credit balance."""
    if created:
        ensure_account(user=instance)
