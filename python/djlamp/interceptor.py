"""
Render interception for fixture name inference.

To infer a fixture's name we need to know what its directive would render
without rendering it. The directive runs against a ``RecordingRenderContext``
whose ``render()`` records its argument and then unwinds the directive.
Code before the render call still runs, so directives should keep their
preamble free of side effects they can't repeat.
"""

import logging
from typing import Any, Callable, Iterable, Optional, Type

from .arguments import RenderArgument, to_render_argument
from .controllers import build_controller

logger = logging.getLogger(__name__)


class RenderContext:
    """
    What a render directive sees.

    Attributes:
        view: The view instance the fixture renders against. Directives may
            set attributes on it for ``get_context_data()`` to pick up.
    """

    def __init__(self, view: Any):
        self.view = view

    @property
    def request(self):
        return getattr(self.view, "request", None)

    def render(self, arg: Any = None, **options: Any) -> Any:
        raise NotImplementedError


class _RenderCaptured(BaseException):
    """Unwinds a directive once its render argument is known."""


class RecordingRenderContext(RenderContext):
    """Records the first ``render()`` argument and stops the directive."""

    def __init__(self, view: Any):
        super().__init__(view)
        self.argument: Optional[RenderArgument] = None

    def render(self, arg: Any = None, **options: Any) -> Any:
        self.argument = to_render_argument(arg, **options)
        raise _RenderCaptured()


def capture_render_argument(
    directive: Callable[[RenderContext], Any],
    controller_class: Type,
    extensions: Iterable[Type] = (),
) -> Optional[RenderArgument]:
    """
    Run ``directive`` far enough to see what it renders.

    Returns:
        The normalised argument of the first ``render()`` call, or None if
        the directive returned without rendering.
    """
    ctx = RecordingRenderContext(build_controller(controller_class, extensions))
    try:
        directive(ctx)
    except _RenderCaptured:
        pass
    if ctx.argument is None:
        logger.debug("Directive %r returned without calling render()", directive)
    return ctx.argument
