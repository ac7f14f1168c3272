"""Test AvroGenericArray encoding and type wrapper."""

import json

from monky_utilities.serdes.avro_array import AvroGenericArray
from monky_utilities.serdes.mapper import ObjectMapper


class TestAvroGenericArray:
    def test_serializes_as_array(self):
        arr = AvroGenericArray([1, "two", {"k": "v"}])
        assert json.dumps(arr, separators=(",", ":")) == '[1,"two",{"k":"v"}]'

    def test_empty_array(self):
        assert ObjectMapper().serialize(AvroGenericArray()) == "[]"

    def test_mapper_removes_null_elements(self):
        arr = AvroGenericArray([1, "two", None])
        assert ObjectMapper().to_tree(arr) == [1, "two"]

    def test_with_type_keeps_nulls(self):
        arr = AvroGenericArray([True, None])
        assert arr.with_type("com.example.Type") == {
            "@type": "com.example.Type",
            "value": [True, None],
        }

    def test_with_type_copies_elements(self):
        arr = AvroGenericArray([1])
        wrapped = arr.with_type("t")
        arr.append(2)
        assert wrapped["value"] == [1]

    def test_repr(self):
        assert repr(AvroGenericArray([1])) == "AvroGenericArray([1])"
