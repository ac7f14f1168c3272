"""Test TypeRegistry registration and dispatch."""

import pytest
from pydantic import BaseModel

from monky_utilities.core.errors import JsonDecodeError, UnknownTypeTagError
from monky_utilities.serdes.registry import TypeRegistry


class Tag(BaseModel):
    name: str


class TestTypeRegistry:
    def test_register_type(self):
        registry = TypeRegistry()
        registry.register("com.monky.Tag", Tag)
        assert registry.decode("com.monky.Tag", {"name": "vip"}) == Tag(name="vip")

    def test_register_decoder(self):
        registry = TypeRegistry()
        registry.register_decoder("upper", lambda tree: tree.upper())
        assert registry.decode("upper", "abc") == "ABC"

    def test_unknown_tag(self):
        with pytest.raises(UnknownTypeTagError, match="nope"):
            TypeRegistry().decode("nope", {})

    def test_validation_failure_is_json_error(self):
        registry = TypeRegistry()
        registry.register("tag", Tag)
        with pytest.raises(JsonDecodeError):
            registry.decode("tag", {"name": {}})

    def test_reregister_replaces(self):
        registry = TypeRegistry()
        registry.register_decoder("x", lambda tree: 1)
        registry.register_decoder("x", lambda tree: 2)
        assert registry.decode("x", None) == 2
        assert len(registry) == 1

    def test_unregister(self):
        registry = TypeRegistry()
        registry.register("tag", Tag)
        registry.unregister("tag")
        registry.unregister("missing")
        assert "tag" not in registry

    def test_names_sorted(self):
        registry = TypeRegistry()
        registry.register("b", Tag)
        registry.register("a", Tag)
        assert registry.names() == ["a", "b"]
