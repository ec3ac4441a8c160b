"""
Fixture generation.
"""

import logging
from typing import Callable, Dict, Iterable

from .config import LampConfig
from .registry import FixtureRegistry, RenderSpec
from .renderer import render_fixture

logger = logging.getLogger(__name__)

Renderer = Callable[[str, RenderSpec, LampConfig], str]


class FixtureGenerator:
    """Renders registered fixtures one at a time."""

    def __init__(
        self,
        registry: FixtureRegistry,
        config: LampConfig,
        renderer: Renderer = render_fixture,
    ):
        self.registry = registry
        self.config = config
        self.renderer = renderer

    def generate(self, name: str) -> str:
        """
        Render one fixture.

        ``before_each`` and ``after_each`` hooks run around the render;
        ``after_each`` runs even when rendering fails.

        Raises:
            UnregisteredFixtureError: If ``name`` is not registered.
        """
        entry = self.registry.get(name)

        if self.config.before_each is not None:
            self.config.before_each()
        try:
            output = self.renderer(entry.name, entry.spec, self.config)
        finally:
            if self.config.after_each is not None:
                self.config.after_each()

        logger.debug("Generated fixture %r (%d chars)", name, len(output))
        return output

    def generate_many(self, names: Iterable[str]) -> Dict[str, str]:
        return {name: self.generate(name) for name in names}
