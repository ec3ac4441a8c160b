"""Views used by the test suite's fixtures."""

from django.views.generic import TemplateView

from djlamp import ApplicationView


class WidgetsView(TemplateView):
    template_name = "widgets/index.html"

    def get_context_data(self, **kwargs):
        kwargs.setdefault("widgets", getattr(self, "widgets", ["alpha", "beta"]))
        return super().get_context_data(**kwargs)


class FooItemsController(ApplicationView):
    controller_name = None


class GreetingMixin:
    def get_context_data(self, **kwargs):
        kwargs.setdefault("greeting", "hello from a mixin")
        return super().get_context_data(**kwargs)
