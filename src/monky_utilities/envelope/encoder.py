"""Envelope encoder: ``[MAGIC_BYTE | json_utf8]``."""

from __future__ import annotations

import io
import json
from typing import IO, TYPE_CHECKING, Any

from monky_utilities.core.errors import EnvelopeIOError, JsonEncodeError
from monky_utilities.serdes.mapper import (
    JSON_DUMP_OPTIONS,
    ObjectMapper,
    has_plain_keys,
    tree_default,
)

from .constants import MAGIC_BYTE

if TYPE_CHECKING:
    from monky_utilities.core.config import Settings
    from monky_utilities.topics.base import Topic


class EnvelopeEncoder:
    """Stateless serializer prepending the magic byte to the mapper's JSON.

    ``topic`` is accepted on every call for parity with broker SDK
    serializer interfaces; it never influences the output.
    """

    def __init__(self, mapper: ObjectMapper | None = None) -> None:
        self._mapper = mapper if mapper is not None else ObjectMapper()

    @classmethod
    def from_settings(cls, settings: Settings) -> EnvelopeEncoder:
        return cls(ObjectMapper.from_settings(settings))

    @property
    def mapper(self) -> ObjectMapper:
        return self._mapper

    def encode(
        self,
        topic: str | Topic | None,
        value: Any,
        type_name: str | None = None,
    ) -> bytes:
        """Serialize ``value`` into bytes that begin with the magic byte.

        Raises:
            JsonEncodeError: ``value`` has no JSON representation.
        """
        buf = io.BytesIO()
        self.encode_to(buf, topic, value, type_name)
        return buf.getvalue()

    def encode_to(
        self,
        stream: IO[bytes],
        topic: str | Topic | None,
        value: Any,
        type_name: str | None = None,
    ) -> None:
        """Write the envelope for ``value`` into a binary ``stream``.

        On error the stream may hold a partial envelope; callers writing to
        shared buffers must discard it.

        Raises:
            EnvelopeIOError: The stream is closed or a write failed.
            JsonEncodeError: ``value`` has no JSON representation.
        """
        if getattr(stream, "closed", False):
            raise EnvelopeIOError("io error during serialization: stream is closed")

        # Fast path: no tagging, no null filtering, stream the value directly.
        # Keys the json module would render differently go through the tree.
        if self._mapper.is_passthrough() and has_plain_keys(value):
            payload = value
        else:
            payload = self._mapper.to_wire_tree(value, type_name)

        try:
            stream.write(bytes((MAGIC_BYTE,)))
            _dump_utf8(payload, stream)
        except OSError as exc:
            raise EnvelopeIOError(f"io error during serialization: {exc}") from exc

    def __repr__(self) -> str:
        return f"EnvelopeEncoder(mapper={self._mapper!r})"


def _dump_utf8(payload: Any, stream: IO[bytes]) -> None:
    text = io.TextIOWrapper(
        stream, encoding="utf-8", errors="strict", newline="", write_through=True
    )
    try:
        json.dump(payload, text, default=tree_default, **JSON_DUMP_OPTIONS)
        text.flush()
    except (TypeError, ValueError) as exc:
        # UnicodeEncodeError (lone surrogates) is a ValueError
        raise JsonEncodeError(f"json serialization error: {exc}") from exc
    except RecursionError as exc:
        raise JsonEncodeError("value is nested too deeply for JSON") from exc
    finally:
        # Leave the caller's stream open
        text.detach()
