"""
Fixture name resolution.

Explicit names are used verbatim. Otherwise the name is inferred from what
the directive renders, and namespaced under the view's short name so that
unqualified partials from different views don't collide:

    WidgetsView, ctx.render(partial="card")              -> "widgets/card"
    WidgetsView, ctx.render(template="widgets/special")  -> "widgets/special"
    ApplicationView, ctx.render("shared/nav")            -> "shared/nav"
"""

import logging
from typing import Any, Callable, Iterable, Optional, Type

from .arguments import template_name_of
from .config import LampConfig
from .controllers import APPLICATION, controller_short_name
from .exceptions import AmbiguousFixtureNameError, ArgumentError
from .interceptor import capture_render_argument

logger = logging.getLogger(__name__)


def resolve_fixture_name(
    explicit_name: Optional[str],
    controller_class: Type,
    directive: Callable[..., Any],
    config: LampConfig,
    extensions: Iterable[Type] = (),
) -> str:
    """
    Work out the registry name of a fixture.

    Raises:
        ArgumentError: No name was given and inference is disabled.
        AmbiguousFixtureNameError: The directive rendered nothing nameable.
    """
    if explicit_name is not None:
        return explicit_name

    if not config.infer_names:
        raise ArgumentError(
            "A fixture name is required when name inference is disabled.",
            hint="\n    Pass name=... or set infer_names=True.",
        )

    argument = capture_render_argument(directive, controller_class, extensions)
    inferred = template_name_of(argument) if argument is not None else ""
    if not inferred.strip():
        raise AmbiguousFixtureNameError(controller_class.__name__)

    name = namespaced_name(inferred, controller_short_name(controller_class))
    logger.debug("Inferred fixture name %r from %s", name, controller_class.__name__)
    return name


def namespaced_name(inferred: str, short_name: str) -> str:
    """Prefix ``inferred`` with ``short_name`` unless it is already under it."""
    if short_name == APPLICATION or inferred.startswith(short_name):
        return inferred
    return f"{short_name}/{inferred}"
