"""
Render arguments.

A render directive calls ``ctx.render(...)`` in one of two shapes:

    ctx.render("widgets/index")                   # TemplatePath
    ctx.render(partial="card", context={...})     # RenderOptions

Both are normalised into a ``RenderArgument`` so that name inference and the
real renderer read the same value.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class TemplatePath:
    path: str


@dataclass(frozen=True)
class RenderOptions:
    template: Optional[str] = None
    partial: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict, compare=False)


RenderArgument = Union[TemplatePath, RenderOptions]

_OPTION_KEYS = ("template", "partial", "context")


def to_render_argument(arg: Any = None, **options: Any) -> RenderArgument:
    """
    Normalise the arguments of a ``render()`` call.

    Raises:
        TypeError: If an unsupported option is passed.
    """
    if isinstance(arg, (TemplatePath, RenderOptions)) and not options:
        return arg

    if isinstance(arg, Mapping):
        options = {**arg, **options}
        arg = None

    unknown = sorted(set(options) - set(_OPTION_KEYS))
    if unknown:
        raise TypeError("render() got unexpected option(s): %s" % ", ".join(unknown))

    if options:
        if arg is not None and options.get("template") is None:
            options["template"] = str(arg)
        return RenderOptions(
            template=options.get("template"),
            partial=options.get("partial"),
            context=dict(options.get("context") or {}),
        )

    if arg is None:
        return RenderOptions()
    return TemplatePath(str(arg))


def template_name_of(argument: RenderArgument) -> str:
    """Template name a render argument refers to, or "" when it names none."""
    if isinstance(argument, RenderOptions):
        return str(argument.template or argument.partial or "")
    return str(argument.path)
