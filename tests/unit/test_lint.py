"""
Tests for lint().
"""

from djlamp.lint import lint


class TestLint:
    def test_clean_project(self, write_file, tmp_path):
        write_file(
            "tests/widgets_lamp.py",
            """
            from tests.views import WidgetsView


            def fixtures(lamp):
                lamp.register_fixture(lambda ctx: ctx.render("widgets/special"), controller=WidgetsView)
            """,
        )
        report = lint(tmp_path)
        assert report.ok
        assert report.as_dict() == {"config_files": {}, "definition_files": {}, "fixtures": {}}

    def test_errors_reported_per_file(self, write_file, tmp_path):
        broken_config = write_file("tests/lamp_config.py", "raise RuntimeError('boom')\n")
        broken = write_file("tests/a_lamp.py", "def fixtures(lamp):\n    lamp.register_fixture()\n")
        write_file(
            "tests/b_lamp.py",
            """
            def fixtures(lamp):
                lamp.register_fixture(lambda ctx: ctx.render("shared/missing"), name="missing")
                lamp.register_fixture(lambda ctx: ctx.render(partial="shared/nav"))
            """,
        )

        report = lint(tmp_path)

        assert not report.ok
        assert "RuntimeError: boom" in report.config_files[str(broken_config)]
        assert report.definition_files[str(broken)].startswith("ArgumentError")
        assert report.fixtures["missing"].startswith("TemplateDoesNotExist")
        assert "shared/nav" not in report.fixtures

    def test_duplicates_across_files(self, write_file, tmp_path):
        source = """
            def fixtures(lamp):
                lamp.register_fixture(lambda ctx: ctx.render(partial="shared/nav"))
            """
        first = write_file("tests/a_lamp.py", source)
        write_file("tests/b_lamp.py", source)

        report = lint(tmp_path)

        assert "already registered" in report.fixtures["shared/nav"]
        assert str(first) in report.fixtures["shared/nav"]
