"""
Real fixture rendering through Django's template engine.
"""

import logging
import posixpath
from typing import Any, Dict, Optional

from django.template.loader import render_to_string

from .arguments import RenderOptions, TemplatePath, to_render_argument
from .config import LampConfig
from .controllers import build_controller, controller_short_name
from .exceptions import DoubleRenderError, RenderNotCalledError
from .interceptor import RenderContext
from .registry import RenderSpec

logger = logging.getLogger(__name__)


class DjangoRenderContext(RenderContext):
    """Renders the directive's template with ``render_to_string``."""

    def __init__(self, view: Any, config: LampConfig):
        super().__init__(view)
        self.config = config
        self.output: Optional[str] = None

    def render(self, arg: Any = None, **options: Any) -> str:
        if self.output is not None:
            raise DoubleRenderError()

        argument = to_render_argument(arg, **options)
        if isinstance(argument, TemplatePath):
            argument = RenderOptions(template=argument.path)

        template_name = self.template_name(argument)
        self.output = render_to_string(
            template_name, self.context_data(argument.context), request=self.request
        )
        logger.debug("Rendered %s for %s", template_name, type(self.view).__name__)
        return self.output

    def template_name(self, options: RenderOptions) -> str:
        """
        Resolve a template path. Partials follow the underscore convention:

            partial="card"         -> "<short_name>/_card.html"
            partial="shared/card"  -> "shared/_card.html"
        """
        if options.template:
            name = options.template
        elif options.partial:
            directory, base = posixpath.split(options.partial)
            if not directory:
                directory = controller_short_name(type(self.view))
            name = posixpath.join(directory, "_" + base)
        else:
            name = self._default_template()
        return self._with_extension(name)

    def context_data(self, extra: Dict[str, Any]) -> Dict[str, Any]:
        if hasattr(self.view, "get_context_data"):
            return self.view.get_context_data(**extra)
        return dict(extra)

    def _default_template(self) -> str:
        names = self.view.get_template_names() if hasattr(self.view, "get_template_names") else []
        if not names:
            raise ValueError(
                "render() needs a template or partial when %s has no template_name"
                % type(self.view).__name__
            )
        return names[0]

    def _with_extension(self, name: str) -> str:
        if posixpath.splitext(name)[1]:
            return name
        return name + self.config.template_extension


def render_fixture(name: str, spec: RenderSpec, config: LampConfig) -> str:
    """
    Run a fixture's directive against a fresh view and return what it rendered.

    Raises:
        RenderNotCalledError: If the directive never called ``render()``.
    """
    view = build_controller(spec.controller_class, spec.extensions)
    ctx = DjangoRenderContext(view, config)
    spec.directive(ctx)
    if ctx.output is None:
        raise RenderNotCalledError(name)
    return ctx.output
