"""
Views fixtures are rendered against.

Fixtures name a view class the way a URLconf does. Before a directive runs,
the class gets any extension mixins layered on top, is instantiated, and is
given a synthetic GET request, much as ``View.as_view()`` would do for a real
request.
"""

import logging
import re
from typing import Any, Iterable, Optional, Tuple, Type

from django.test import RequestFactory
from django.views.generic import View
from django.views.generic.base import ContextMixin

logger = logging.getLogger(__name__)

APPLICATION = "application"

_SUFFIXES = ("LiveView", "Controller", "View")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class ApplicationView(ContextMixin, View):
    """Default view for fixtures that don't name one."""

    controller_name = APPLICATION


def controller_short_name(view_class: Type) -> str:
    """
    Namespace token for a view class.

    Example:
        controller_short_name(WidgetsView)          # 'widgets'
        controller_short_name(FooItemsController)   # 'foo_items'
    """
    explicit = getattr(view_class, "controller_name", None)
    if explicit:
        return str(explicit)

    name = view_class.__name__
    for suffix in _SUFFIXES:
        if name.endswith(suffix) and name != suffix:
            name = name[: -len(suffix)]
            break
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def with_extensions(view_class: Type, extensions: Iterable[Type]) -> Type:
    """Subclass ``view_class`` with the given mixins in front of it in the MRO."""
    mixins: Tuple[Type, ...] = tuple(
        ext for ext in extensions if not issubclass(view_class, ext)
    )
    if not mixins:
        return view_class
    return type(view_class.__name__, mixins + (view_class,), {"__module__": view_class.__module__})


def build_request(path: str = "/", user: Optional[Any] = None):
    """A GET request with an anonymous user and an unsaved session."""
    request = RequestFactory().get(path)
    if user is None:
        from django.contrib.auth.models import AnonymousUser

        user = AnonymousUser()
    request.user = user

    from django.contrib.sessions.backends.signed_cookies import SessionStore

    request.session = SessionStore()
    return request


def build_controller(view_class: Type, extensions: Iterable[Type] = (), request=None):
    """Instantiate ``view_class`` with extensions applied and a request attached."""
    cls = with_extensions(view_class, extensions)
    view = cls()
    if request is None:
        request = build_request()
    if hasattr(view, "setup"):
        view.setup(request)
    else:
        view.request = request
    logger.debug("Built %s for fixture rendering", cls.__name__)
    return view
