"""
Django management command to list registered fixture names.

Usage:
    python manage.py lamp_fixtures
"""

from django.core.management.base import BaseCommand, CommandError

from djlamp.exceptions import LampError
from djlamp.session import FixtureSession


class Command(BaseCommand):
    help = "List the names of all djlamp fixtures"

    def handle(self, *args, **options):
        try:
            session = FixtureSession().load()
        except LampError as exc:
            raise CommandError(f"{exc.message}{exc.hint or ''}")

        for name in session.all_names():
            self.stdout.write(name)
