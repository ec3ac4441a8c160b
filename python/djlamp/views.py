"""
HTTP access to fixtures for JavaScript test runners.

Include in a development URLconf only:

    if settings.DEBUG:
        urlpatterns += [path("djlamp/", include("djlamp.urls"))]

Every request starts a fresh cycle, so edited definition files are picked up
on the next request.
"""

from django.http import Http404, HttpResponse, JsonResponse

from .exceptions import LampError, UnregisteredFixtureError
from .lint import lint
from .session import FixtureSession


def _error_response(exc: LampError) -> JsonResponse:
    return JsonResponse({"error": type(exc).__name__, "message": exc.message, "hint": exc.hint}, status=400)


def index(request):
    """Every fixture, as a JSON object of name to HTML."""
    try:
        fixtures = FixtureSession().generate_all()
    except LampError as exc:
        return _error_response(exc)
    return JsonResponse(fixtures)


def fixture(request, name):
    """One fixture's HTML."""
    session = FixtureSession()
    try:
        session.load()
        html = session.generate(name)
    except UnregisteredFixtureError:
        raise Http404("No fixture named '%s'" % name)
    except LampError as exc:
        return _error_response(exc)
    return HttpResponse(html)


def lint_view(request):
    report = lint()
    return JsonResponse(report.as_dict(), status=200 if report.ok else 422)
