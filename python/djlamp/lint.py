"""
Lint fixture and config files.

Loads every file in isolation so one broken file doesn't hide problems in
the others, then renders each fixture that registered cleanly.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .exceptions import AlreadyRegisteredFixtureError
from .loader import CONFIGURE_HOOK, FIXTURES_HOOK, load_file
from .session import FixtureSession

logger = logging.getLogger(__name__)


@dataclass
class LintReport:
    config_files: Dict[str, str] = field(default_factory=dict)
    definition_files: Dict[str, str] = field(default_factory=dict)
    fixtures: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not (self.config_files or self.definition_files or self.fixtures)

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            "config_files": dict(self.config_files),
            "definition_files": dict(self.definition_files),
            "fixtures": dict(self.fixtures),
        }


def _describe(exc: Exception) -> str:
    return "%s: %s" % (type(exc).__name__, exc)


def lint(root: Optional[Path] = None) -> LintReport:
    report = LintReport()
    probe = FixtureSession(root)
    loader = probe.loader

    config_files = loader.config_files(probe.config)
    for path in config_files:
        try:
            load_file(path, CONFIGURE_HOOK, FixtureSession(root))
        except Exception as exc:
            report.config_files[str(path)] = _describe(exc)

    seen: Dict[str, Path] = {}
    for path in loader.definition_files(probe.config):
        session = _configured_session(root, config_files)
        try:
            load_file(path, FIXTURES_HOOK, session)
        except Exception as exc:
            report.definition_files[str(path)] = _describe(exc)
            continue

        for name in session.all_names():
            if name in seen:
                report.fixtures[name] = "%s (also in %s)" % (
                    _describe(AlreadyRegisteredFixtureError(name)),
                    seen[name],
                )
                continue
            seen[name] = path
            try:
                session.generate(name)
            except Exception as exc:
                report.fixtures[name] = _describe(exc)

    logger.info(
        "Lint: %d config, %d definition and %d fixture error(s)",
        len(report.config_files),
        len(report.definition_files),
        len(report.fixtures),
    )
    return report


def _configured_session(root: Optional[Path], config_files) -> FixtureSession:
    """Fresh session with every loadable config file applied."""
    session = FixtureSession(root)
    for path in config_files:
        try:
            load_file(path, CONFIGURE_HOOK, session)
        except Exception:
            logger.debug("Skipping broken config file %s", path)
    return session
