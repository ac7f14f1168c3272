"""Platform utilities: message-bus envelope codec and topic identities.

Usage::

    from monky_utilities import EnvelopeDecoder, EnvelopeEncoder
    from monky_utilities.topics.application import app_messages

    topic = app_messages()
    data = EnvelopeEncoder().encode(topic.name, {"id": 1, "text": "hi"})
    tree = EnvelopeDecoder().decode(topic.name, data)
"""

from monky_utilities.envelope import (
    MAGIC_BYTE,
    EnvelopeDecoder,
    EnvelopeEncoder,
    create_envelope_codec,
)
from monky_utilities.serdes import MapperConfig, ObjectMapper, TypeRegistry

__version__ = "0.1.0"

__all__ = [
    "MAGIC_BYTE",
    "EnvelopeDecoder",
    "EnvelopeEncoder",
    "MapperConfig",
    "ObjectMapper",
    "TypeRegistry",
    "create_envelope_codec",
]
