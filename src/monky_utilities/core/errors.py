"""Exception hierarchy for the envelope codec and topic configuration.

Every serialization error carries a ``kind`` so consumers can route a bad
message (drop, dead-letter, abort) without matching on concrete classes.
"""

from __future__ import annotations

from .enums import ErrorKind


class MonkyError(Exception):
    """Base exception for all monky-utilities errors."""


# --- Configuration ---
class ConfigError(MonkyError):
    """Invalid or unreadable configuration."""


# --- Serialization ---
class SerializationError(MonkyError):
    """Base for envelope encode/decode failures."""

    kind: ErrorKind = ErrorKind.JSON


class EncodeError(SerializationError):
    """A value could not be turned into envelope bytes."""


class JsonEncodeError(EncodeError):
    """Value is not representable as JSON (NaN, bad key, unknown type)."""

    kind = ErrorKind.JSON


class EnvelopeIOError(EncodeError):
    """Writing the envelope to its output buffer failed."""

    kind = ErrorKind.IO


class DecodeError(SerializationError):
    """Envelope bytes could not be turned back into a value."""


class PayloadTooShortError(DecodeError):
    """Buffer is too short to skip the header byte."""

    kind = ErrorKind.PAYLOAD_TOO_SHORT

    def __init__(self, length: int = 0):
        self.length = length
        super().__init__(
            f"payload too short ({length} bytes, need at least 1 to skip header)"
        )


class InvalidUtf8Error(DecodeError):
    """Bytes after the header are not valid UTF-8."""

    kind = ErrorKind.INVALID_UTF8


class JsonDecodeError(DecodeError):
    """Malformed JSON, or JSON that does not match the requested type."""

    kind = ErrorKind.JSON


class UnexpectedMagicByteError(DecodeError):
    """First byte differs from the expected magic byte (strict mode)."""

    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"unexpected magic byte 0x{found:02x} (expected 0x{expected:02x})"
        )


class MalformedTypeWrapperError(JsonDecodeError):
    """Payload is not an exact {"@type", "value"} wrapper (strict mode)."""


class UnknownTypeTagError(JsonDecodeError):
    """No payload type is registered for the wrapper's ``@type``."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"no type registered for @type={type_name!r}")
