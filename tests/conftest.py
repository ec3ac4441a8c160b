"""
Pytest configuration and fixtures for djlamp tests.
"""

import textwrap
from pathlib import Path

import pytest
from django.test import RequestFactory

from djlamp import FixtureSession, LampConfig

PROJECT_DIR = Path(__file__).parent / "project"


@pytest.fixture
def request_factory():
    """Provide Django RequestFactory for creating test requests."""
    return RequestFactory()


@pytest.fixture
def config():
    return LampConfig()


@pytest.fixture
def session(tmp_path):
    """An empty session rooted in a temporary project directory."""
    return FixtureSession(root=tmp_path, config=LampConfig())


@pytest.fixture
def project_session():
    """A session over the sample project under tests/project."""
    return FixtureSession(root=PROJECT_DIR, config=LampConfig())


@pytest.fixture
def write_file(tmp_path):
    """Write a dedented source file relative to the temporary project root."""

    def _write(relative_path, source):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write
