# ==========================================
# apps/credits/models.py
# ==========================================

from django.db import models
import uuid


class EntryKind(models.TextChoices):
    TOP_UP = 'top_up', 'Top-up'
    MESSAGE = 'message', 'Message'
    ADJUSTMENT = 'adjustment', 'Adjustment'


class CreditAccount(models.Model):
    """Per-user credit balance. One credit is spent per message sent."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='credit_account'
    )
    balance = models.IntegerField(default=0)
    total_purchased = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'credit_accounts'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} - {self.balance} credits"


class CreditEntry(models.Model):
    """Append-only ledger row; the entries of an account sum to its balance."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    account = models.ForeignKey(
        CreditAccount,
        on_delete=models.CASCADE,
        related_name='entries'
    )
    delta = models.IntegerField()
    kind = models.CharField(max_length=20, choices=EntryKind.choices)
    balance_after = models.IntegerField()

    # Set for message debits
    message = models.OneToOneField(
        'messaging.Message',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='credit_entry'
    )
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='credit_entries_created'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'credit_entries'
        indexes = [
            models.Index(fields=['account', 'created_at'], name='credit_entry_account_idx'),
            models.Index(fields=['kind'], name='credit_entry_kind_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        sign = '+' if self.delta > 0 else ''
        return f"{sign}{self.delta} ({self.kind}) -> {self.balance_after}"
