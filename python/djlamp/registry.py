"""
Fixture registry.

Holds the fixtures registered during one generation cycle. A session resets
it before loading definition files, so nothing carries over between cycles.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Tuple, Type

from .exceptions import AlreadyRegisteredFixtureError, ArgumentError, UnregisteredFixtureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderSpec:
    controller_class: Type
    directive: Callable[..., Any]
    extensions: Tuple[Type, ...] = ()


@dataclass(frozen=True)
class FixtureEntry:
    name: str
    spec: RenderSpec


class FixtureRegistry:
    def __init__(self):
        self._entries: Dict[str, FixtureEntry] = {}

    def register(self, name: str, spec: RenderSpec) -> FixtureEntry:
        """
        Add a fixture.

        Raises:
            ArgumentError: If ``name`` is empty.
            AlreadyRegisteredFixtureError: If ``name`` was registered this cycle.
        """
        if not name or not str(name).strip():
            raise ArgumentError("Fixture names must be non-empty strings.")
        if name in self._entries:
            raise AlreadyRegisteredFixtureError(name)

        entry = FixtureEntry(name=name, spec=spec)
        self._entries[name] = entry
        logger.debug("Registered fixture %r (%s)", name, spec.controller_class.__name__)
        return entry

    def reset(self) -> None:
        self._entries = {}

    def get(self, name: str) -> FixtureEntry:
        try:
            return self._entries[name]
        except KeyError:
            raise UnregisteredFixtureError(name) from None

    def all_names(self) -> Iterator[str]:
        """Registered names in registration order."""
        yield from list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
