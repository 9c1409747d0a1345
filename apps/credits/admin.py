# ==========================================
# apps/credits/admin.py
# ==========================================

from django.contrib import admin
from .models import CreditAccount, CreditEntry


class CreditEntryInline(admin.TabularInline):
    """Read-only ledger history on the account page."""
    model = CreditEntry
    fk_name = 'account'
    extra = 0
    can_delete = False
    fields = ['created_at', 'kind', 'delta', 'balance_after', 'created_by', 'message']
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(CreditAccount)
class CreditAccountAdmin(admin.ModelAdmin):
    """
    Balances are read-only here: top-ups go through the dashboard API
    so that every change is written to the ledger.
    """

    list_display = ['user', 'balance', 'total_purchased', 'updated_at']
    search_fields = ['user__email', 'user__display_name']
    readonly_fields = ['id', 'user', 'balance', 'total_purchased', 'created_at', 'updated_at']
    inlines = [CreditEntryInline]
    ordering = ['-updated_at']

    def has_add_permission(self, request):
        return False


@admin.register(CreditEntry)
class CreditEntryAdmin(admin.ModelAdmin):
    list_display = ['account', 'kind', 'delta', 'balance_after', 'created_by', 'created_at']
    list_filter = ['kind', 'created_at']
    search_fields = ['account__user__email']
    readonly_fields = ['id', 'account', 'delta', 'kind', 'balance_after', 'message', 'created_by', 'created_at']
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
