# ==========================================
# apps/matches/admin.py
# ==========================================

from django.contrib import admin
from .models import Match


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = ['user', 'matched_profile', 'created_at']
    list_filter = ['matched_profile__is_fake_profile', 'created_at']
    search_fields = ['user__email', 'matched_profile__name']
    readonly_fields = ['id', 'user', 'matched_profile', 'created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
