"""
Configuration for djlamp.

Defaults can be overridden project-wide in settings.py:

    DJLAMP_CONFIG = {
        "infer_names": False,
        "default_controller": "myapp.views.BaseView",
        "output_dir": "tmp/js_fixtures",
    }

and per generation cycle from a ``lamp_config.py`` file:

    def configure(lamp):
        lamp.configure(infer_names=False, before_each=seed_database)

Each ``configure()`` call replaces the whole configuration; options that are
not passed fall back to the settings-level defaults.
"""

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Type

from django.utils.module_loading import import_string

from .exceptions import ArgumentError

logger = logging.getLogger(__name__)

TMP_PATH = ("tmp", "djlamp")


@dataclass(frozen=True)
class LampConfig:
    infer_names: bool = True
    default_controller: Any = None  # view class or dotted path; None = ApplicationView
    default_extensions: Tuple[Any, ...] = ()
    before_each: Optional[Callable[[], Any]] = None
    after_each: Optional[Callable[[], Any]] = None
    search_directories: Tuple[str, ...] = ("spec", "tests", "test")
    definition_pattern: str = "*_lamp.py"
    config_pattern: str = "lamp_config.py"
    output_dir: Optional[str] = None  # None = <root>/tmp/djlamp
    fixture_extension: str = ".html"
    template_extension: str = ".html"

    @classmethod
    def option_names(cls):
        return {f.name for f in dataclasses.fields(cls)}

    @classmethod
    def from_settings(cls, **overrides: Any) -> "LampConfig":
        """
        Build a configuration from ``settings.DJLAMP_CONFIG`` plus overrides.

        Raises:
            ArgumentError: If an option name is not recognised.
        """
        options = dict(_settings_options())
        options.update(overrides)
        return cls(**cls._checked_options(options))

    def with_options(self, **overrides: Any) -> "LampConfig":
        """
        A new configuration based on this one with ``overrides`` applied.

        Raises:
            ArgumentError: If an option name is not recognised.
        """
        return dataclasses.replace(self, **self._checked_options(overrides))

    @classmethod
    def _checked_options(cls, options: Dict[str, Any]) -> Dict[str, Any]:
        options = dict(options)
        unknown = sorted(set(options) - cls.option_names())
        if unknown:
            raise ArgumentError(
                "Unknown djlamp option(s): %s" % ", ".join(unknown),
                hint="\n    Valid options: %s" % ", ".join(sorted(cls.option_names())),
            )

        for key in ("default_extensions", "search_directories"):
            if key in options:
                options[key] = tuple(options[key] or ())
        return options

    def controller_class(self) -> Type:
        """The view class used when a fixture names none."""
        controller = self.default_controller
        if controller is None:
            from .controllers import ApplicationView

            return ApplicationView
        return _resolve(controller)

    def extension_classes(self) -> Tuple[Type, ...]:
        return tuple(_resolve(ext) for ext in self.default_extensions)

    def fixture_root(self, root: Path) -> Path:
        """
        Absolute scratch directory fixtures are written to.

        The directory is removed wholesale between cycles, so it may not be
        the project root or any directory above it.

        Raises:
            ArgumentError: If ``output_dir`` is the project root or an ancestor of it.
        """
        root = Path(root)
        if self.output_dir is None:
            return root.joinpath(*TMP_PATH)

        path = root / self.output_dir
        resolved, resolved_root = path.resolve(), root.resolve()
        if resolved == resolved_root or resolved in resolved_root.parents:
            raise ArgumentError(
                "output_dir %r resolves to %s, which contains the project root %s."
                % (self.output_dir, resolved, resolved_root),
                hint="\n    Point output_dir at a dedicated directory, e.g. \"tmp/djlamp\".",
            )
        return path


def _resolve(value: Any) -> Any:
    if isinstance(value, str):
        return import_string(value)
    return value


def _settings_options() -> Dict[str, Any]:
    """Read DJLAMP_CONFIG from Django settings if available"""
    from django.conf import settings

    if not settings.configured:
        return {}
    return getattr(settings, "DJLAMP_CONFIG", {}) or {}


def project_root() -> Path:
    """The project directory fixture files are discovered under."""
    from django.conf import settings

    base_dir = getattr(settings, "BASE_DIR", None) if settings.configured else None
    if base_dir is None:
        logger.debug("settings.BASE_DIR not set, using the working directory")
        return Path.cwd()
    return Path(base_dir)
