"""JSON object mapper with null elision and adjacent type tagging.

The mapper sits between Python values and the generic JSON tree
(``dict`` / ``list`` / ``str`` / ``int`` / ``float`` / ``bool`` / ``None``)
that travels inside an envelope.  Configuration is immutable: "changing" a
mapper returns a new one.

Adjacent tagging wraps a payload as::

    {"@type": "<type name>", "value": <payload>}

When no explicit type name is given the mapper falls back to
:func:`infer_type_name`, which is best-effort and NOT a stable contract.
Producers talking to other runtimes should always pass an explicit name.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from monky_utilities.core.enums import TypeTagging
from monky_utilities.core.errors import (
    JsonDecodeError,
    JsonEncodeError,
    MalformedTypeWrapperError,
)

if TYPE_CHECKING:
    from monky_utilities.core.config import Settings
    from .registry import TypeRegistry

logger = logging.getLogger(__name__)

TYPE_KEY = "@type"
VALUE_KEY = "value"

# Compact separators, no trailing newline
JSON_DUMP_OPTIONS: dict[str, Any] = {
    "separators": (",", ":"),
    "ensure_ascii": False,
    "allow_nan": False,
}


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------

def remove_nulls(tree: Any) -> Any:
    """Remove all ``None`` entries from objects and arrays recursively.

    Post-order: children are cleaned first, then dropped if they ended up
    ``None``.  Empty objects and arrays are kept.  Scalars pass through.
    """
    if isinstance(tree, dict):
        out = {}
        for key, value in tree.items():
            cleaned = remove_nulls(value)
            if cleaned is not None:
                out[key] = cleaned
        return out
    if isinstance(tree, list):
        return [c for c in (remove_nulls(v) for v in tree) if c is not None]
    return tree


def infer_type_name(value: Any) -> str:
    """Best-effort type identifier for ``value`` (module + qualified name).

    Depends on where the class happens to live, so it changes whenever code
    is moved or renamed.  Useful for debugging; never gate decoding on it.
    """
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"


def json_default(obj: Any) -> Any:
    """Convert one non-native value a step closer to JSON (models by alias)."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return list(bytes(obj))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    try:
        return to_jsonable_python(obj)
    except PydanticSerializationError as exc:
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        ) from exc


def _key_to_str(key: Any) -> str:
    # Same rendering as the json module for scalar keys
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        try:
            key.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise JsonEncodeError(f"object key {key!r} is not valid UTF-8") from exc
        return key
    if key is True:
        return "true"
    if key is False:
        return "false"
    if key is None:
        return "null"
    if isinstance(key, int):
        return str(key)
    if isinstance(key, float):
        if not math.isfinite(key):
            raise JsonEncodeError(f"object key {key!r} is not a finite number")
        return repr(key)
    raise JsonEncodeError(
        f"object keys must be strings, got {type(key).__name__}"
    )


def _to_tree(value: Any) -> Any:
    if isinstance(value, Enum):
        value = value.value
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise JsonEncodeError(f"{value!r} is not representable in JSON")
        return float(value)
    if isinstance(value, Mapping):
        return {_key_to_str(k): _to_tree(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_tree(v) for v in value]
    try:
        converted = json_default(value)
    except (TypeError, ValueError) as exc:
        raise JsonEncodeError(str(exc)) from exc
    return _to_tree(converted)


_PLAIN_KEY_TYPES = (str, int, float, bool, type(None))


def has_plain_keys(value: Any) -> bool:
    """True when every dict reachable through dicts, lists and tuples has
    keys the json module renders exactly like the tree conversion does.

    Walks iteratively; a container seen twice (shared or cyclic) counts as
    not plain.
    """
    stack = [value]
    seen: set[int] = set()
    while stack:
        item = stack.pop()
        if isinstance(item, (dict, list, tuple)):
            if id(item) in seen:
                return False
            seen.add(id(item))
        if isinstance(item, dict):
            for key, member in item.items():
                if type(key) not in _PLAIN_KEY_TYPES:
                    return False
                stack.append(member)
        elif isinstance(item, (list, tuple)):
            stack.extend(item)
    return True


def tree_default(obj: Any) -> Any:
    """``default=`` hook rendering a non-native value as a full JSON tree."""
    return _to_tree(obj)


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def parse_json(text: str) -> Any:
    """Parse RFC 8259 JSON (``NaN`` / ``Infinity`` are rejected)."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass
        raise JsonDecodeError(f"json deserialization error: {exc}") from exc
    except RecursionError as exc:
        raise JsonDecodeError("json deserialization error: nesting too deep") from exc


def decode_tree(tree: Any, type_: Any = None) -> Any:
    """Validate ``tree`` as ``type_``; return the tree itself when untyped."""
    if type_ is None or type_ is Any:
        return tree
    try:
        return _adapter(type_).validate_python(tree)
    except ValidationError as exc:
        raise JsonDecodeError(f"type mismatch decoding {type_!r}: {exc}") from exc
    except RecursionError as exc:
        raise JsonDecodeError(f"nesting too deep decoding {type_!r}") from exc


# ---------------------------------------------------------------------------
# Mapper
# ---------------------------------------------------------------------------

class MapperConfig(BaseModel):
    """Immutable mapper configuration."""

    model_config = ConfigDict(frozen=True)

    type_tagging: TypeTagging = TypeTagging.NONE
    # Drop None object members / array elements, recursively
    omit_null_values: bool = True
    # Object keys dropped by filter_dynamic()
    ignore_type_names: frozenset[str] = Field(default_factory=frozenset)


class ObjectMapper:
    """Convert Python values to and from JSON honoring the mapper settings.

    Stateless apart from its configuration; safe to share between threads.

    Parameters
    ----------
    config:
        Tagging mode, null elision and ignored names.  Defaults to
        ``MapperConfig()`` (no tagging, omit nulls).
    registry:
        Optional ``@type`` → payload type table used by strict
        :meth:`deserialize_with_type`.
    """

    def __init__(
        self,
        config: MapperConfig | None = None,
        registry: TypeRegistry | None = None,
    ) -> None:
        self._config = config if config is not None else MapperConfig()
        self._registry = registry

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        registry: TypeRegistry | None = None,
    ) -> ObjectMapper:
        mapper = settings.mapper
        return cls(
            MapperConfig(
                type_tagging=mapper.type_tagging,
                omit_null_values=mapper.omit_null_values,
                ignore_type_names=frozenset(mapper.ignore_type_names),
            ),
            registry=registry,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> MapperConfig:
        return self._config

    @property
    def type_tagging(self) -> TypeTagging:
        return self._config.type_tagging

    @property
    def omit_null_values(self) -> bool:
        return self._config.omit_null_values

    @property
    def ignore_type_names(self) -> frozenset[str]:
        return self._config.ignore_type_names

    @property
    def registry(self) -> TypeRegistry | None:
        return self._registry

    def with_ignored_type(self, name: str) -> ObjectMapper:
        """Return a copy that also ignores ``name`` in dynamic payloads."""
        config = self._config.model_copy(
            update={"ignore_type_names": self._config.ignore_type_names | {name}}
        )
        return ObjectMapper(config, registry=self._registry)

    def is_passthrough(self) -> bool:
        """True when output is the plain JSON of the value (no tree needed)."""
        return (
            self._config.type_tagging == TypeTagging.NONE
            and not self._config.omit_null_values
        )

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_tree(self, value: Any) -> Any:
        """Convert ``value`` to a JSON tree, eliding nulls if configured.

        Raises:
            JsonEncodeError: The value has no JSON representation.
        """
        try:
            tree = _to_tree(value)
            if self._config.omit_null_values:
                tree = remove_nulls(tree)
        except RecursionError as exc:
            raise JsonEncodeError("value is nested too deeply for JSON") from exc
        return tree

    def wrap(self, tree: Any, type_name: str) -> dict[str, Any]:
        return {TYPE_KEY: type_name, VALUE_KEY: tree}

    def to_wire_tree(self, value: Any, type_name: str | None = None) -> Any:
        """Tree that is actually emitted: ``to_tree`` plus tagging if enabled."""
        tree = self.to_tree(value)
        if self._config.type_tagging == TypeTagging.ADJACENT:
            return self.wrap(tree, type_name or infer_type_name(value))
        return tree

    def serialize(self, value: Any, type_name: str | None = None) -> str:
        """Serialize ``value`` into JSON text honoring mapper settings.

        ``type_name`` is only used with adjacent tagging; when omitted the
        best-effort :func:`infer_type_name` is used instead.
        """
        return self.dumps(self.to_wire_tree(value, type_name))

    def dumps(self, tree: Any) -> str:
        try:
            return json.dumps(tree, **JSON_DUMP_OPTIONS)
        except (TypeError, ValueError) as exc:
            raise JsonEncodeError(f"json serialization error: {exc}") from exc
        except RecursionError as exc:
            raise JsonEncodeError("value is nested too deeply for JSON") from exc

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def deserialize(self, text: str, type_: Any = None) -> Any:
        """Deserialize JSON text, validating it as ``type_`` when given."""
        return decode_tree(parse_json(text), type_)

    def deserialize_with_type(
        self,
        text: str,
        type_: Any = None,
        *,
        strict: bool = False,
    ) -> Any:
        """Like :meth:`deserialize`, but strips an adjacent wrapper first.

        Lenient (default): an object holding a string ``@type`` and a
        ``value`` member decodes from ``value``; anything else decodes as a
        whole.  The tag is informational and never checked against
        ``type_``.

        Strict: the top level must be exactly ``{"@type": str, "value": ...}``.
        With a registry attached the tag selects the payload type.
        """
        tree = parse_json(text)
        if strict:
            return self._unwrap_strict(tree, type_)

        if (
            isinstance(tree, dict)
            and isinstance(tree.get(TYPE_KEY), str)
            and VALUE_KEY in tree
        ):
            return decode_tree(tree[VALUE_KEY], type_)
        return decode_tree(tree, type_)

    def _unwrap_strict(self, tree: Any, type_: Any) -> Any:
        if not isinstance(tree, dict) or set(tree) != {TYPE_KEY, VALUE_KEY}:
            logger.debug("Rejecting payload without exact type wrapper")
            raise MalformedTypeWrapperError(
                'expected exactly {"@type": ..., "value": ...} at top level'
            )
        type_name = tree[TYPE_KEY]
        if not isinstance(type_name, str):
            raise MalformedTypeWrapperError('"@type" must be a string')

        if self._registry is not None and type_ is None:
            return self._registry.decode(type_name, tree[VALUE_KEY])
        return decode_tree(tree[VALUE_KEY], type_)

    # ------------------------------------------------------------------
    # Dynamic payloads
    # ------------------------------------------------------------------

    def filter_dynamic(self, tree: Any) -> Any:
        """Apply ignored-name and null filters to an already-built tree.

        On an object, members whose key is an ignored name are dropped and
        the remaining member values are null-elided (a member that is itself
        ``None`` is kept).  Arrays and scalars are null-elided only when
        ``omit_null_values`` is set.
        """
        if isinstance(tree, dict):
            ignored = self._config.ignore_type_names
            return {
                key: remove_nulls(value)
                for key, value in tree.items()
                if key not in ignored
            }
        if self._config.omit_null_values:
            return remove_nulls(tree)
        return tree

    def __repr__(self) -> str:
        return (
            f"ObjectMapper(type_tagging={self._config.type_tagging.value}, "
            f"omit_nulls={self._config.omit_null_values}, "
            f"ignore_count={len(self._config.ignore_type_names)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectMapper):
            return NotImplemented
        return self._config == other._config and self._registry is other._registry

    def __hash__(self) -> int:
        return hash((self._config, id(self._registry)))
