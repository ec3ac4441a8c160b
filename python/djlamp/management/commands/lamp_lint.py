"""
Django management command to check fixture and config files for errors.

Usage:
    python manage.py lamp_lint
"""

import sys

from django.core.management.base import BaseCommand

from djlamp.lint import lint


class Command(BaseCommand):
    help = "Load and render every djlamp fixture, reporting errors per file"

    def handle(self, *args, **options):
        report = lint()

        sections = (
            ("Config files", report.config_files),
            ("Definition files", report.definition_files),
            ("Fixtures", report.fixtures),
        )
        for title, errors in sections:
            if not errors:
                continue
            self.stdout.write(self.style.HTTP_INFO(title))
            for where, error in errors.items():
                self.stdout.write(self.style.ERROR(f"  ❌ {where}: {error}"))

        if not report.ok:
            sys.exit(1)
        self.stdout.write(self.style.SUCCESS("✅ All fixtures load and render."))
