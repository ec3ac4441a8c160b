"""
Django management command to write every fixture to the scratch directory.

Usage:
    python manage.py lamp_generate           # render into tmp/djlamp/
    python manage.py lamp_generate --clean   # remove tmp/djlamp/
"""

from django.core.management.base import BaseCommand, CommandError

from djlamp.exceptions import LampError
from djlamp.session import FixtureSession


class Command(BaseCommand):
    help = "Render all djlamp fixtures into the scratch directory"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clean",
            action="store_true",
            help="Remove the scratch directory instead of generating fixtures",
        )

    def handle(self, *args, **options):
        session = FixtureSession()

        if options["clean"]:
            session.remove_tmp_directory()
            self.stdout.write(self.style.SUCCESS(f"Removed {session.tmp_path}"))
            return

        try:
            written = session.create_fixture_files()
        except LampError as exc:
            raise CommandError(f"{exc.message}{exc.hint or ''}")

        for path in written:
            self.stdout.write(f"  {path.relative_to(session.tmp_path)}")
        self.stdout.write(
            self.style.SUCCESS(f"Wrote {len(written)} fixture(s) to {session.tmp_path}")
        )
