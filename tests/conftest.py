"""Shared fixtures for the monky-utilities test suite."""

from __future__ import annotations

import pytest

from monky_utilities.core.enums import TypeTagging
from monky_utilities.envelope.decoder import EnvelopeDecoder
from monky_utilities.envelope.encoder import EnvelopeEncoder
from monky_utilities.serdes.mapper import MapperConfig, ObjectMapper
from monky_utilities.topics.namespace import reset_namespace_cache


# ---------------------------------------------------------------------------
# Namespace isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_namespace(monkeypatch):
    """Every test starts without MONKY_CORE_NAMESPACE and an empty cache."""
    monkeypatch.delenv("MONKY_CORE_NAMESPACE", raising=False)
    reset_namespace_cache()
    yield
    reset_namespace_cache()


@pytest.fixture
def namespace(monkeypatch):
    """Set the topic namespace for one test: ``namespace("acme")``."""

    def _set(value: str) -> None:
        monkeypatch.setenv("MONKY_CORE_NAMESPACE", value)
        reset_namespace_cache()

    return _set


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

@pytest.fixture
def default_mapper() -> ObjectMapper:
    """No tagging, omit nulls."""
    return ObjectMapper()


@pytest.fixture
def adjacent_mapper() -> ObjectMapper:
    return ObjectMapper(MapperConfig(type_tagging=TypeTagging.ADJACENT))


@pytest.fixture
def passthrough_mapper() -> ObjectMapper:
    """No tagging, nulls kept: the encoder's streaming fast path."""
    return ObjectMapper(MapperConfig(omit_null_values=False))


# ---------------------------------------------------------------------------
# Envelope codecs
# ---------------------------------------------------------------------------

@pytest.fixture
def encoder() -> EnvelopeEncoder:
    return EnvelopeEncoder()


@pytest.fixture
def decoder() -> EnvelopeDecoder:
    return EnvelopeDecoder()


@pytest.fixture
def adjacent_encoder(adjacent_mapper) -> EnvelopeEncoder:
    return EnvelopeEncoder(adjacent_mapper)


@pytest.fixture
def adjacent_decoder(adjacent_mapper) -> EnvelopeDecoder:
    return EnvelopeDecoder(adjacent_mapper)
