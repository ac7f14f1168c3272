"""``@type`` → payload type registry.

Used by strict type-tag decoding to dispatch an adjacent wrapper to the
model registered under its tag, instead of trusting the caller's type.

Usage::

    registry = TypeRegistry()
    registry.register("com.monky.Message", MessageEvent)
    mapper = ObjectMapper(MapperConfig(type_tagging=TypeTagging.ADJACENT),
                          registry=registry)
    event = mapper.deserialize_with_type(text, strict=True)
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from monky_utilities.core.errors import UnknownTypeTagError

from .mapper import decode_tree


class TypeRegistry:
    """Thread-safe table of type tags and their decoders."""

    def __init__(self) -> None:
        self._decoders: dict[str, Callable[[Any], Any]] = {}
        self._lock = threading.Lock()

    def register(self, type_name: str, type_: Any) -> None:
        """Decode payloads tagged ``type_name`` as ``type_`` (pydantic validation)."""
        self.register_decoder(type_name, lambda tree: decode_tree(tree, type_))

    def register_decoder(
        self, type_name: str, decoder: Callable[[Any], Any]
    ) -> None:
        """Register a custom callable taking the ``value`` tree."""
        with self._lock:
            self._decoders[type_name] = decoder

    def unregister(self, type_name: str) -> None:
        with self._lock:
            self._decoders.pop(type_name, None)

    def decode(self, type_name: str, tree: Any) -> Any:
        decoder = self._decoders.get(type_name)
        if decoder is None:
            raise UnknownTypeTagError(type_name)
        return decoder(tree)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)

    def names(self) -> list[str]:
        return sorted(self._decoders)
