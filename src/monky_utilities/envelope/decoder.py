"""Envelope decoder: skip the header byte, UTF-8 decode, parse JSON.

The magic byte is NOT checked by default, so producers that evolved the
header keep being readable.  ``strict_magic_byte=True`` rejects any other
value.  Likewise adjacent wrappers are unwrapped leniently unless
``strict_type_tags=True``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from monky_utilities.core.errors import (
    InvalidUtf8Error,
    PayloadTooShortError,
    UnexpectedMagicByteError,
)
from monky_utilities.serdes.mapper import ObjectMapper

from .constants import HEADER_SIZE, MAGIC_BYTE

if TYPE_CHECKING:
    from monky_utilities.core.config import Settings
    from monky_utilities.serdes.registry import TypeRegistry
    from monky_utilities.topics.base import Topic

logger = logging.getLogger(__name__)


class EnvelopeDecoder:
    """Stateless deserializer built on an :class:`ObjectMapper`.

    ``topic`` is kept on every call for parity with broker SDKs but unused.
    Caller buffers are read, never retained.
    """

    def __init__(
        self,
        mapper: ObjectMapper | None = None,
        *,
        strict_magic_byte: bool = False,
        strict_type_tags: bool = False,
    ) -> None:
        self._mapper = mapper if mapper is not None else ObjectMapper()
        self._strict_magic_byte = strict_magic_byte
        self._strict_type_tags = strict_type_tags

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        registry: TypeRegistry | None = None,
    ) -> EnvelopeDecoder:
        return cls(
            ObjectMapper.from_settings(settings, registry=registry),
            strict_magic_byte=settings.strict_magic_byte,
            strict_type_tags=settings.strict_type_tags,
        )

    @property
    def mapper(self) -> ObjectMapper:
        return self._mapper

    @property
    def strict_magic_byte(self) -> bool:
        return self._strict_magic_byte

    @property
    def strict_type_tags(self) -> bool:
        return self._strict_type_tags

    def decode(self, topic: str | Topic | None, data: bytes | bytearray | memoryview) -> Any:
        """Decode an envelope into a JSON tree (adjacent wrapper stripped).

        Raises:
            PayloadTooShortError: ``data`` is empty.
            UnexpectedMagicByteError: strict magic mode and a foreign header.
            InvalidUtf8Error: bytes after the header are not UTF-8.
            JsonDecodeError: malformed JSON (or a strict-mode wrapper error).
        """
        return self.decode_as(topic, data, None)

    def decode_as(
        self,
        topic: str | Topic | None,
        data: bytes | bytearray | memoryview,
        type_: Any,
    ) -> Any:
        """Decode an envelope and validate the payload as ``type_``."""
        view = memoryview(data)
        if len(view) < HEADER_SIZE:
            raise PayloadTooShortError(len(view))

        if self._strict_magic_byte and view[0] != MAGIC_BYTE:
            logger.debug("Rejecting envelope with header 0x%02x", view[0])
            raise UnexpectedMagicByteError(view[0], MAGIC_BYTE)

        try:
            text = str(view[HEADER_SIZE:], "utf-8")
        except UnicodeDecodeError as exc:
            logger.debug("Envelope payload is not UTF-8: %s", exc)
            raise InvalidUtf8Error(f"invalid utf-8 payload: {exc}") from exc

        return self._mapper.deserialize_with_type(
            text, type_, strict=self._strict_type_tags
        )

    def __repr__(self) -> str:
        return (
            f"EnvelopeDecoder(mapper={self._mapper!r}, "
            f"strict_magic_byte={self._strict_magic_byte}, "
            f"strict_type_tags={self._strict_type_tags})"
        )
