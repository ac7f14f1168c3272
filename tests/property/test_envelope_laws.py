"""Property test: envelope wire laws.

Uses hypothesis to verify header placement, encode/decode round-trips,
adjacent unwrapping and the whole-object fallthrough for arbitrary JSON.
"""

import json

from hypothesis import given, settings, strategies as st

from monky_utilities.core.enums import TypeTagging
from monky_utilities.envelope.constants import MAGIC_BYTE
from monky_utilities.envelope.decoder import EnvelopeDecoder
from monky_utilities.envelope.encoder import EnvelopeEncoder
from monky_utilities.serdes.mapper import MapperConfig, ObjectMapper, remove_nulls

from json_strategies import json_keys, json_trees

DEFAULT_ENCODER = EnvelopeEncoder()
PASSTHROUGH_ENCODER = EnvelopeEncoder(ObjectMapper(MapperConfig(omit_null_values=False)))
ADJACENT_ENCODER = EnvelopeEncoder(
    ObjectMapper(MapperConfig(type_tagging=TypeTagging.ADJACENT))
)
DECODER = EnvelopeDecoder()


@given(tree=json_trees)
@settings(max_examples=200)
def test_first_byte_is_magic(tree):
    for encoder in (DEFAULT_ENCODER, PASSTHROUGH_ENCODER, ADJACENT_ENCODER):
        assert encoder.encode("t", tree)[0] == MAGIC_BYTE


@given(tree=json_trees)
@settings(max_examples=200)
def test_round_trip_normalizes_nulls(tree):
    data = DEFAULT_ENCODER.encode("t", tree)
    assert DECODER.decode("t", data) == remove_nulls(tree)


@given(tree=json_trees)
@settings(max_examples=200)
def test_round_trip_passthrough_is_exact(tree):
    data = PASSTHROUGH_ENCODER.encode("t", tree)
    assert DECODER.decode("t", data) == tree


@given(tree=json_trees)
@settings(max_examples=200)
def test_payload_is_utf8_json(tree):
    data = DEFAULT_ENCODER.encode("t", tree)
    assert json.loads(data[1:].decode("utf-8")) == remove_nulls(tree)


@given(tree=json_trees, type_name=st.text(max_size=30))
@settings(max_examples=200)
def test_adjacent_unwrap_for_any_tag(tree, type_name):
    data = ADJACENT_ENCODER.encode("t", tree, type_name)
    assert json.loads(data[1:])["@type"] == type_name
    assert DECODER.decode("t", data) == remove_nulls(tree)


@given(
    members=st.dictionaries(json_keys.filter(lambda k: k != "value"), json_trees, max_size=4),
    tag=st.text(max_size=10),
)
@settings(max_examples=200)
def test_tag_without_value_decodes_whole_object(members, tag):
    obj = {"@type": tag, **members}
    data = bytes([MAGIC_BYTE]) + json.dumps(obj).encode("utf-8")
    assert DECODER.decode("t", data) == obj


@given(header=st.integers(min_value=0, max_value=255), tree=json_trees)
@settings(max_examples=100)
def test_any_header_accepted_by_lenient_decoder(header, tree):
    body = DEFAULT_ENCODER.encode("t", tree)[1:]
    assert DECODER.decode("t", bytes([header]) + body) == remove_nulls(tree)
