"""
Exceptions raised by djlamp.

Every error carries a short message and, where it helps, a hint showing how
to fix the fixture definition that caused it.
"""

from typing import Optional


class LampError(Exception):
    """Base exception for djlamp errors."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class ArgumentError(LampError):
    """Raised when a fixture is registered with missing or invalid arguments."""


class AmbiguousFixtureNameError(LampError):
    """Raised when a fixture name cannot be inferred from its render call."""

    def __init__(self, controller_name: str):
        message = (
            f"Unable to infer a fixture name for a fixture on '{controller_name}'.\n"
            f"    The render call had no template or partial to name it after."
        )
        hint = (
            "\n    Pass a name explicitly:\n"
            "        @lamp.fixture(name=\"widgets/empty\")\n"
            "        def empty(ctx):\n"
            "            ctx.render(\"widgets/list\", context={\"widgets\": []})"
        )
        super().__init__(message, hint)


class AlreadyRegisteredFixtureError(LampError):
    """Raised when the same fixture name is registered twice in one cycle."""

    def __init__(self, name: str):
        message = f"A fixture named '{name}' is already registered."
        hint = (
            "\n    Fixture names must be unique across all *_lamp.py files.\n"
            "    Give one of them an explicit name=..."
        )
        super().__init__(message, hint)
        self.name = name


class UnregisteredFixtureError(LampError):
    """Raised when a fixture is requested that was never registered."""

    def __init__(self, name: str):
        super().__init__(f"No fixture named '{name}' is registered.")
        self.name = name


class RenderNotCalledError(LampError):
    """Raised when a render directive finishes without calling render()."""

    def __init__(self, name: str):
        message = f"The directive for fixture '{name}' never called render()."
        hint = (
            "\n    Every fixture must render exactly once:\n"
            "        def card(ctx):\n"
            "            ctx.render(partial=\"card\")"
        )
        super().__init__(message, hint)


class DoubleRenderError(LampError):
    """Raised when a render directive calls render() more than once."""

    def __init__(self):
        super().__init__("render() was called more than once for a single fixture.")


class DefinitionFileError(LampError):
    """Raised when a discovered fixture or config file lacks its hook function."""

    def __init__(self, path: str, hook: str):
        message = f"'{path}' does not define a {hook}() function."
        hint = (
            f"\n    Example:\n"
            f"        def {hook}(lamp):\n"
            f"            ..."
        )
        super().__init__(message, hint)
        self.path = path


__all__ = [
    "LampError",
    "ArgumentError",
    "AmbiguousFixtureNameError",
    "AlreadyRegisteredFixtureError",
    "UnregisteredFixtureError",
    "RenderNotCalledError",
    "DoubleRenderError",
    "DefinitionFileError",
]
