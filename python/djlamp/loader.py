"""
Discovery and loading of fixture definition and config files.

Under the project's test directory (the first of ``search_directories`` that
exists: ``spec/``, ``tests/`` or ``test/``) djlamp looks for:

- config files (``lamp_config.py``) defining ``configure(lamp)``
- definition files (``*_lamp.py``) defining ``fixtures(lamp)``

Each file is executed as a fresh module every cycle, so edits are picked up
without restarting the process.
"""

import importlib.util
import logging
from pathlib import Path
from typing import Any, List

from .config import LampConfig
from .exceptions import DefinitionFileError

logger = logging.getLogger(__name__)

CONFIGURE_HOOK = "configure"
FIXTURES_HOOK = "fixtures"


def fixture_directory(root: Path, config: LampConfig) -> Path:
    """First existing search directory under ``root``; the last candidate if none exist."""
    candidates = [Path(root) / name for name in config.search_directories]
    for candidate in candidates:
        if candidate.is_dir():
            return candidate
    return candidates[-1] if candidates else Path(root)


def discover(directory: Path, pattern: str) -> List[Path]:
    if not directory.is_dir():
        return []
    return sorted(path for path in directory.rglob(pattern) if path.is_file())


def load_file(path: Path, hook: str, session: Any) -> None:
    """
    Execute ``path`` and call its ``hook`` function with the session.

    Raises:
        DefinitionFileError: If the file doesn't define ``hook``.
    """
    module_name = "_djlamp_%s" % path.stem
    spec = importlib.util.spec_from_file_location(module_name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    func = getattr(module, hook, None)
    if not callable(func):
        raise DefinitionFileError(str(path), hook)

    logger.debug("Loading %s", path)
    func(session)


class FixtureLoader:
    """Finds and loads the files that populate a session."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def directory(self, config: LampConfig) -> Path:
        return fixture_directory(self.root, config)

    def config_files(self, config: LampConfig) -> List[Path]:
        return discover(self.directory(config), config.config_pattern)

    def definition_files(self, config: LampConfig) -> List[Path]:
        return discover(self.directory(config), config.definition_pattern)

    def load(self, session: Any) -> None:
        """Load config files, then definition files, into ``session``."""
        for path in self.config_files(session.config):
            load_file(path, CONFIGURE_HOOK, session)
        definition_files = self.definition_files(session.config)
        for path in definition_files:
            load_file(path, FIXTURES_HOOK, session)
        logger.info(
            "Loaded %d fixture(s) from %d file(s) under %s",
            len(session.registry),
            len(definition_files),
            self.directory(session.config),
        )
