# ==========================================
# apps/messaging/admin.py
# ==========================================

from django.contrib import admin
from .models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ['match', 'sender', 'short_content', 'is_admin_reply', 'created_at']
    list_filter = ['is_admin_reply', 'created_at']
    search_fields = ['content', 'sender__email', 'match__matched_profile__name']
    readonly_fields = ['id', 'match', 'sender', 'content', 'is_admin_reply', 'created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def short_content(self, obj):
        return obj.content[:60]
    short_content.short_description = 'Content'

    def has_add_permission(self, request):
        return False
