from django.urls import path

from . import views

app_name = "djlamp"

urlpatterns = [
    path("", views.index, name="index"),
    path("lint/", views.lint_view, name="lint"),
    path("fixtures/<path:name>", views.fixture, name="fixture"),
]
