"""
djlamp: pre-rendered Django view fixtures for front-end tests.
"""

from .arguments import RenderOptions, TemplatePath
from .config import LampConfig
from .controllers import ApplicationView
from .exceptions import (
    AlreadyRegisteredFixtureError,
    AmbiguousFixtureNameError,
    ArgumentError,
    LampError,
    UnregisteredFixtureError,
)
from .interceptor import RenderContext
from .registry import FixtureEntry, FixtureRegistry, RenderSpec
from .session import FixtureSession

__version__ = "0.1.0"

__all__ = [
    "ApplicationView",
    "FixtureEntry",
    "FixtureRegistry",
    "FixtureSession",
    "LampConfig",
    "RenderContext",
    "RenderOptions",
    "RenderSpec",
    "TemplatePath",
    "LampError",
    "ArgumentError",
    "AmbiguousFixtureNameError",
    "AlreadyRegisteredFixtureError",
    "UnregisteredFixtureError",
]
