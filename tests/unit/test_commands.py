"""
Tests for the lamp_* management commands.
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


@pytest.fixture
def output_dir(settings, tmp_path):
    out = tmp_path / "out"
    settings.DJLAMP_CONFIG = {"output_dir": str(out)}
    return out


class TestLampGenerate:
    def test_writes_fixture_files(self, output_dir):
        out = StringIO()
        call_command("lamp_generate", stdout=out)

        assert (output_dir / "widgets" / "card.html").exists()
        assert (output_dir / "application" / "footer.html").exists()
        assert "Wrote 5 fixture(s)" in out.getvalue()

    def test_clean(self, output_dir):
        call_command("lamp_generate", stdout=StringIO())
        call_command("lamp_generate", "--clean", stdout=StringIO())
        assert not output_dir.exists()

    def test_lamp_error_becomes_command_error(self, settings, tmp_path):
        settings.BASE_DIR = tmp_path
        (tmp_path / "tests").mkdir()
        (tmp_path / "tests" / "a_lamp.py").write_text("def fixtures(lamp):\n    lamp.register_fixture()\n")

        with pytest.raises(CommandError, match="render directive"):
            call_command("lamp_generate", stdout=StringIO())


class TestLampFixtures:
    def test_lists_names(self):
        out = StringIO()
        call_command("lamp_fixtures", stdout=out)
        assert out.getvalue().split() == [
            "widgets/card",
            "widgets/empty",
            "widgets/index",
            "widgets/special",
            "application/footer",
        ]


class TestLampLint:
    def test_clean_project(self):
        out = StringIO()
        call_command("lamp_lint", stdout=out)
        assert "All fixtures load and render" in out.getvalue()

    def test_errors_exit_nonzero(self, settings, tmp_path):
        settings.BASE_DIR = tmp_path
        (tmp_path / "tests").mkdir()
        (tmp_path / "tests" / "a_lamp.py").write_text("X = 1\n")

        out = StringIO()
        with pytest.raises(SystemExit) as excinfo:
            call_command("lamp_lint", stdout=out)

        assert excinfo.value.code == 1
        assert "a_lamp.py" in out.getvalue()
