"""
Tests for FixtureRegistry.
"""

import pytest

from djlamp import (
    AlreadyRegisteredFixtureError,
    ApplicationView,
    ArgumentError,
    FixtureRegistry,
    RenderSpec,
    UnregisteredFixtureError,
)


def _spec():
    return RenderSpec(controller_class=ApplicationView, directive=lambda ctx: ctx.render("a"))


class TestFixtureRegistry:
    def test_register_and_get(self):
        registry = FixtureRegistry()
        spec = _spec()
        registry.register("widgets/card", spec)

        entry = registry.get("widgets/card")
        assert entry.name == "widgets/card"
        assert entry.spec is spec

    def test_duplicate_name_raises(self):
        registry = FixtureRegistry()
        registry.register("widgets/card", _spec())
        with pytest.raises(AlreadyRegisteredFixtureError) as excinfo:
            registry.register("widgets/card", _spec())
        assert excinfo.value.name == "widgets/card"

    def test_duplicate_does_not_overwrite(self):
        registry = FixtureRegistry()
        first = _spec()
        registry.register("widgets/card", first)
        with pytest.raises(AlreadyRegisteredFixtureError):
            registry.register("widgets/card", _spec())
        assert registry.get("widgets/card").spec is first

    def test_reset_allows_reregistration(self):
        registry = FixtureRegistry()
        registry.register("widgets/card", _spec())
        registry.reset()
        assert len(registry) == 0
        registry.register("widgets/card", _spec())
        assert "widgets/card" in registry

    def test_get_unregistered_raises(self):
        with pytest.raises(UnregisteredFixtureError):
            FixtureRegistry().get("missing")

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ArgumentError):
            FixtureRegistry().register(name, _spec())

    def test_all_names_in_registration_order_and_restartable(self):
        registry = FixtureRegistry()
        for name in ("b", "a", "c"):
            registry.register(name, _spec())

        assert list(registry.all_names()) == ["b", "a", "c"]
        assert list(registry.all_names()) == ["b", "a", "c"]

    def test_spec_is_immutable(self):
        spec = _spec()
        with pytest.raises(Exception):
            spec.controller_class = object
