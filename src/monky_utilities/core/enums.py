"""Enumerations used across the envelope and topic modules."""

from enum import Enum


class TypeTagging(str, Enum):
    """How an ObjectMapper emits type metadata."""

    NONE = "none"
    ADJACENT = "adjacent"  # {"@type": "<name>", "value": <payload>}


class ErrorKind(str, Enum):
    PAYLOAD_TOO_SHORT = "payload_too_short"
    INVALID_UTF8 = "invalid_utf8"
    JSON = "json"
    IO = "io"


class TopicKind(str, Enum):
    APPLICATION = "application"
    SOURCE = "source"
    OPS = "ops"


class TopicDomain(str, Enum):
    COMMUNICATION = "communication"
    FACEBOOK = "facebook"
    WHATSAPP = "whatsapp"
    VIBER = "viber"
    TWILIO = "twilio"
    GOOGLE = "google"
    APPLICATION = "application"


class CleanupPolicy(str, Enum):
    COMPACT = "compact"
    DELETE = "delete"
