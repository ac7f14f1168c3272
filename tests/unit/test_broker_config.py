"""Test broker config helpers."""

from monky_utilities.topics.broker_config import (
    DEFAULT_COMPACT_CONFIG,
    MIN_COMPACTION_LAG_MS,
    SEGMENT_BYTES,
    SPECIFIC_AVRO_READER_CONFIG,
    with_specific_avro_enabled,
)


class TestDefaults:
    def test_values(self):
        assert SEGMENT_BYTES == 10485760
        assert MIN_COMPACTION_LAG_MS == 86400000
        assert dict(DEFAULT_COMPACT_CONFIG) == {
            "cleanup.policy": "compact",
            "segment.bytes": "10485760",
            "min.compaction.lag.ms": "86400000",
        }


class TestWithSpecificAvroEnabled:
    def test_new_config(self):
        assert with_specific_avro_enabled() == {"specific.avro.reader": "true"}

    def test_augments_copy(self):
        original = {"group.id": "workers"}
        config = with_specific_avro_enabled(original)
        assert config == {"group.id": "workers", SPECIFIC_AVRO_READER_CONFIG: "true"}
        assert original == {"group.id": "workers"}

    def test_overrides_existing_flag(self):
        config = with_specific_avro_enabled({SPECIFIC_AVRO_READER_CONFIG: "false"})
        assert config[SPECIFIC_AVRO_READER_CONFIG] == "true"
