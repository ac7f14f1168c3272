"""Broker configuration keys and shared defaults."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from monky_utilities.core.enums import CleanupPolicy

CLEANUP_POLICY_CONFIG = "cleanup.policy"
SEGMENT_BYTES_CONFIG = "segment.bytes"
MIN_COMPACTION_LAG_MS_CONFIG = "min.compaction.lag.ms"

# Key name used to enable specific Avro reader mode on consumers
SPECIFIC_AVRO_READER_CONFIG = "specific.avro.reader"

SEGMENT_BYTES = 10 * 1024 * 1024  # 10 MiB
MIN_COMPACTION_LAG_MS = 24 * 60 * 60 * 1000  # 24 h

# Shared by every application-communication topic; read-only
DEFAULT_COMPACT_CONFIG: Mapping[str, str] = MappingProxyType({
    CLEANUP_POLICY_CONFIG: CleanupPolicy.COMPACT.value,
    SEGMENT_BYTES_CONFIG: str(SEGMENT_BYTES),
    MIN_COMPACTION_LAG_MS_CONFIG: str(MIN_COMPACTION_LAG_MS),
})


def with_specific_avro_enabled(
    serializer_config: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Copy ``serializer_config`` (or start empty) and enable the specific Avro reader.

    The input mapping is never modified.
    """
    config = dict(serializer_config) if serializer_config is not None else {}
    config[SPECIFIC_AVRO_READER_CONFIG] = "true"
    return config
