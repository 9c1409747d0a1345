"""
Management command to seed discovery with synthetic profiles.

Seed profiles are only ever added. Users hold matches and paid
conversations with them, so there is no option to remove them.

Usage:
    python manage.py create_fake_profiles
"""

from django.core.management.base import BaseCommand

from apps.profiles.services import create_fake_profiles


class Command(BaseCommand):
    help = 'Create seed profiles for discovery'

    def handle(self, *args, **options):
        created = create_fake_profiles()

        if created:
            self.stdout.write(self.style.SUCCESS(f'Created {created} seed profiles'))
        else:
            self.stdout.write('Seed profiles already exist, nothing to do')
