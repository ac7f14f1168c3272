"""Message-bus envelope: one magic byte followed by UTF-8 JSON."""

from monky_utilities.envelope.constants import MAGIC_BYTE
from monky_utilities.envelope.decoder import EnvelopeDecoder
from monky_utilities.envelope.encoder import EnvelopeEncoder
from monky_utilities.envelope.factory import create_envelope_codec

__all__ = [
    "MAGIC_BYTE",
    "EnvelopeDecoder",
    "EnvelopeEncoder",
    "create_envelope_codec",
]
