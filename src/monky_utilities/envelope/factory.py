"""Envelope codec factory.

Builds a matching encoder/decoder pair from :class:`Settings`.
"""

from __future__ import annotations

from monky_utilities.core.config import Settings
from monky_utilities.serdes.mapper import ObjectMapper
from monky_utilities.serdes.registry import TypeRegistry

from .decoder import EnvelopeDecoder
from .encoder import EnvelopeEncoder


def create_envelope_codec(
    settings: Settings | None = None,
    registry: TypeRegistry | None = None,
) -> tuple[EnvelopeEncoder, EnvelopeDecoder]:
    """Create an encoder and decoder sharing one mapper configuration.

    Args:
        settings: Library settings; loaded from the environment when ``None``.
        registry: Optional type-tag registry for strict decoding.
    """
    if settings is None:
        settings = Settings()
    mapper = ObjectMapper.from_settings(settings, registry=registry)
    return (
        EnvelopeEncoder(mapper),
        EnvelopeDecoder(
            mapper,
            strict_magic_byte=settings.strict_magic_byte,
            strict_type_tags=settings.strict_type_tags,
        ),
    )
