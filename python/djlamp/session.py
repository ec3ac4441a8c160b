"""
Fixture sessions.

A ``FixtureSession`` is one generation context: its own registry and
configuration, populated by loading definition files and then rendered.
Definition files receive the session as their only argument:

    # tests/widgets_lamp.py
    from myapp.views import WidgetsView

    def fixtures(lamp):
        @lamp.fixture(controller=WidgetsView)
        def card(ctx):
            ctx.render(partial="card", context={"widget": Widget(name="Lamp")})

        with lamp.define(controller=WidgetsView) as widgets:
            widgets.register_fixture(lambda ctx: ctx.render("widgets/index"))

Usage:
    session = FixtureSession()
    outputs = session.generate_all()   # {'widgets/card': '<div ...>', ...}
    session.create_fixture_files()     # writes tmp/djlamp/widgets/card.html, ...
"""

import logging
import shutil
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Type

from .config import LampConfig, project_root
from .exceptions import ArgumentError
from .generator import FixtureGenerator
from .loader import FixtureLoader
from .naming import resolve_fixture_name
from .registry import FixtureEntry, FixtureRegistry, RenderSpec

logger = logging.getLogger(__name__)


class FixtureDefiner:
    """Registers fixtures with shared defaults for controller and extensions."""

    def __init__(self, session: "FixtureSession", controller: Optional[Type] = None, extend: Iterable[Type] = ()):
        self.session = session
        self.controller = controller
        self.extend = tuple(extend)

    def __enter__(self) -> "FixtureDefiner":
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    def define(self, controller: Optional[Type] = None, extend: Iterable[Type] = ()) -> "FixtureDefiner":
        """Nested scope: overrides the controller, adds extensions."""
        return FixtureDefiner(
            self.session,
            controller=controller or self.controller,
            extend=self.extend + tuple(extend),
        )

    def register_fixture(
        self,
        directive: Optional[Callable[..., Any]] = None,
        *,
        name: Optional[str] = None,
        controller: Optional[Type] = None,
        extend: Iterable[Type] = (),
    ) -> FixtureEntry:
        return self.session.register_fixture(
            directive,
            name=name,
            controller=controller or self.controller,
            extend=self.extend + tuple(extend),
        )

    def fixture(self, name: Optional[str] = None, controller: Optional[Type] = None, extend: Iterable[Type] = ()):
        """Decorator form of ``register_fixture``. Returns the directive unchanged."""

        def decorator(directive: Callable[..., Any]) -> Callable[..., Any]:
            self.register_fixture(directive, name=name, controller=controller, extend=extend)
            return directive

        return decorator


class FixtureSession(FixtureDefiner):
    def __init__(self, root: Optional[Path] = None, config: Optional[LampConfig] = None):
        super().__init__(self)
        self.root = Path(root) if root is not None else project_root()
        self._base_config = config
        self.config = self._default_config()
        self.registry = FixtureRegistry()
        self.loader = FixtureLoader(self.root)

    # Registration

    def register_fixture(
        self,
        directive: Optional[Callable[..., Any]] = None,
        *,
        name: Optional[str] = None,
        controller: Optional[Type] = None,
        extend: Iterable[Type] = (),
    ) -> FixtureEntry:
        """
        Register a fixture.

        Args:
            directive: Callable receiving a render context; must call
                ``ctx.render(...)`` exactly once.
            name: Fixture name. Inferred from the render call when omitted.
            controller: View class to render against. Defaults to the
                configured ``default_controller``.
            extend: Mixin classes layered over the view before rendering,
                after the configured ``default_extensions``.

        Raises:
            ArgumentError: No directive, or no name while inference is disabled.
            AmbiguousFixtureNameError: Inference found nothing to name it after.
            AlreadyRegisteredFixtureError: The name is taken this cycle.
        """
        if directive is None:
            raise ArgumentError(
                "register_fixture() requires a render directive.",
                hint="\n    Example:\n        lamp.register_fixture(lambda ctx: ctx.render(\"widgets/index\"))",
            )

        controller_class = controller or self.config.controller_class()
        extensions = self.config.extension_classes() + tuple(extend)
        fixture_name = resolve_fixture_name(name, controller_class, directive, self.config, extensions)
        spec = RenderSpec(controller_class=controller_class, directive=directive, extensions=extensions)
        return self.registry.register(fixture_name, spec)

    # Configuration

    def configure(self, **options: Any) -> LampConfig:
        """
        Replace this session's configuration.

        Unset options fall back to the config the session was created with,
        or to settings defaults when it was created without one.
        """
        if self._base_config is None:
            self.config = LampConfig.from_settings(**options)
        else:
            self.config = self._base_config.with_options(**options)
        return self.config

    def _default_config(self) -> LampConfig:
        if self._base_config is None:
            return LampConfig.from_settings()
        return self._base_config

    # Cycle

    def load(self) -> "FixtureSession":
        """Start a fresh cycle: reset registry and config, then load all files."""
        self.registry.reset()
        self.config = self._default_config()
        self.loader.load(self)
        return self

    def all_names(self) -> Iterator[str]:
        return self.registry.all_names()

    def generate(self, name: str) -> str:
        return FixtureGenerator(self.registry, self.config).generate(name)

    def generate_all(self) -> Dict[str, str]:
        """Load a fresh cycle and render every fixture in it."""
        self.load()
        return FixtureGenerator(self.registry, self.config).generate_many(self.all_names())

    # Scratch directory

    @property
    def tmp_path(self) -> Path:
        return self.config.fixture_root(self.root)

    def create_tmp_directory(self) -> Path:
        path = self.tmp_path
        path.mkdir(parents=True, exist_ok=True)
        return path

    def remove_tmp_directory(self) -> None:
        path = self.tmp_path
        if path.exists():
            shutil.rmtree(path)
            logger.info("Removed %s", path)

    def fixture_path(self, name: str) -> Path:
        """File a fixture is written to; ``a/b`` becomes ``<tmp>/a/b.html``."""
        parts = name.split("/")
        if any(part in ("", ".", "..") for part in parts):
            raise ArgumentError(f"Fixture name '{name}' cannot be used as a file path.")
        path = self.tmp_path.joinpath(*parts)
        return path.with_name(path.name + self.config.fixture_extension)

    def write_fixtures(self, outputs: Dict[str, str]) -> List[Path]:
        written = []
        for name, output in outputs.items():
            path = self.fixture_path(name)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(output, encoding="utf-8")
            written.append(path)
        return written

    def create_fixture_files(self) -> List[Path]:
        """Render every fixture into a clean scratch directory."""
        outputs = self.generate_all()
        self.remove_tmp_directory()
        self.create_tmp_directory()
        written = self.write_fixtures(outputs)
        logger.info("Wrote %d fixture(s) to %s", len(written), self.tmp_path)
        return written
