"""Tests for the context_builder module."""

import dataclasses

import pytest

from twirp_typescript.context_builder import RenderContext, ServiceContext, build_context


class TestBuildContext:
    """Test context assembly from a two-service descriptor."""

    @pytest.fixture(autouse=True)
    def _context(self, two_service_file):
        self.ctx = build_context(two_service_file, "v5")

    def test_package(self):
        assert self.ctx.package == "shop.v1"

    def test_import_path(self):
        assert self.ctx.import_path == "shop"

    def test_twirp_prefix(self):
        assert self.ctx.twirp_prefix == "/twirp"

    def test_services_in_order(self):
        assert self.ctx.services == (
            ServiceContext(name="A", package="shop.v1", methods=("X", "Y")),
            ServiceContext(name="B", package="shop.v1", methods=("Z",)),
        )

    def test_path_prefix(self):
        assert self.ctx.path_prefix(self.ctx.services[1]) == "/twirp/shop.v1.B/"

    def test_immutable(self):
        """Contexts are frozen once built."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.ctx.package = "other"


class TestVersionSwitch:

    def test_v6_has_no_prefix(self, greeter_file):
        ctx = build_context(greeter_file, "v6")
        assert ctx.twirp_prefix == ""
        assert ctx.path_prefix(ctx.services[0]) == "/example.api.Greeter/"

    def test_default_version(self, greeter_file):
        ctx = build_context(greeter_file)
        assert ctx.path_prefix(ctx.services[0]) == "/twirp/example.api.Greeter/"


class TestEdgeCases:

    def test_no_services(self, file_factory):
        ctx = build_context(file_factory("types.proto", "pkg"))
        assert ctx == RenderContext(package="pkg", import_path="types", twirp_prefix="/twirp", services=())

    def test_empty_package(self, file_factory):
        ctx = build_context(file_factory("bare.proto", "", {"Bare": ["Ping"]}))
        assert ctx.package == ""
        assert ctx.services[0].package == ""
