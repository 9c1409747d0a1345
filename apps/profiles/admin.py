# ==========================================
# apps/profiles/admin.py
# ==========================================

from django.contrib import admin
from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    """Admin interface for dating profiles."""

    list_display = [
        'name',
        'age',
        'gender',
        'seeking_gender',
        'location',
        'user',
        'is_fake_profile',
        'is_admin',
        'created_at',
    ]
    list_filter = [
        'gender',
        'seeking_gender',
        'is_fake_profile',
        'is_admin',
        'created_at',
    ]
    search_fields = ['name', 'location', 'user__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    raw_id_fields = ['user']
    ordering = ['-created_at']

    fieldsets = (
        ('Owner', {
            'fields': ('id', 'user', 'is_fake_profile', 'is_admin')
        }),
        ('Profile', {
            'fields': ('name', 'age', 'gender', 'seeking_gender', 'location', 'bio', 'interests')
        }),
        ('Media', {
            'fields': ('profile_picture_url', 'intro_video_url'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
