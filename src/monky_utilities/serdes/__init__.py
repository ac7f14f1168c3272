"""JSON object mapping for envelope payloads."""

from monky_utilities.serdes.avro_array import AvroGenericArray
from monky_utilities.serdes.mapper import (
    MapperConfig,
    ObjectMapper,
    infer_type_name,
    remove_nulls,
)
from monky_utilities.serdes.registry import TypeRegistry

__all__ = [
    "AvroGenericArray",
    "MapperConfig",
    "ObjectMapper",
    "TypeRegistry",
    "infer_type_name",
    "remove_nulls",
]
