"""Base model and wire codec shared by every request and response shape.

Each payload shape is a frozen, keyword-only dataclass deriving from
:class:`Model`. The codec reads the dataclass fields and their type
annotations to decide how a value travels over the wire:

* an annotation containing ``Unset`` marks an optional field; it defaults to
  ``UNSET`` and is left out of the encoded body while unset;
* an annotation containing ``None`` marks a field whose contract allows an
  explicit null, which is encoded as JSON ``null``;
* everything else is the value type, decoded recursively.

Wire keys are the camelCase form of the attribute name unless the field
declares its own key with :func:`field`.
"""

import dataclasses
import types
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Union, get_args, get_origin, get_type_hints

from shipit_client.errors import DecodingError


class Unset:
    """Type of the ``UNSET`` sentinel: the field is absent from the wire."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (Unset, ())


UNSET = Unset()

# An untyped JSON array or object, kept as-is.
JsonArray = dict[str, Any] | list[Any]


def field(*, key: str | None = None, default: Any = UNSET) -> Any:
    """Declare a model field with an explicit wire key."""
    metadata = {"key": key} if key else {}
    return dataclasses.field(default=default, metadata=metadata)


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


@dataclasses.dataclass(frozen=True)
class WireField:
    """How one dataclass field maps to its wire key."""

    name: str
    key: str
    type: Any
    optional: bool
    nullable: bool


def _union_members(tp: Any) -> tuple[Any, ...]:
    if get_origin(tp) in (Union, types.UnionType):
        return get_args(tp)
    return (tp,)


@lru_cache(maxsize=None)
def wire_fields(cls: type) -> tuple[WireField, ...]:
    hints = get_type_hints(cls)
    result = []
    for f in dataclasses.fields(cls):
        members = _union_members(hints[f.name])
        rest = tuple(m for m in members if m is not Unset and m is not type(None))
        value_type = rest[0] if len(rest) == 1 else Union[rest]
        result.append(
            WireField(
                name=f.name,
                key=f.metadata.get("key") or camel_case(f.name),
                type=value_type,
                optional=Unset in members,
                nullable=type(None) in members,
            )
        )
    return tuple(result)


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _describe(tp: Any) -> str:
    if get_origin(tp) in (Union, types.UnionType):
        return " or ".join(_describe(m) for m in get_args(tp))
    origin = get_origin(tp) or tp
    names = {str: "string", int: "integer", float: "number", bool: "boolean",
             list: "array", dict: "object"}
    if origin in names:
        return names[origin]
    return getattr(origin, "__name__", repr(origin))


def decode_value(tp: Any, value: Any, model: str, key: str) -> Any:
    """Decode one wire value against a field's value type."""
    if tp is Any:
        return value

    origin = get_origin(tp)
    if origin in (Union, types.UnionType):
        for member in get_args(tp):
            try:
                return decode_value(member, value, model, key)
            except DecodingError:
                continue
        raise DecodingError(model, key, f"expected {_describe(tp)}, got {_kind(value)}")

    if origin is list or tp is list:
        if not isinstance(value, list):
            raise DecodingError(model, key, f"expected array, got {_kind(value)}")
        args = get_args(tp)
        item_type = args[0] if args else Any
        return [
            decode_value(item_type, item, model, f"{key}[{index}]")
            for index, item in enumerate(value)
        ]

    if origin is dict or tp is dict:
        if not isinstance(value, Mapping):
            raise DecodingError(model, key, f"expected object, got {_kind(value)}")
        return dict(value)

    if isinstance(tp, type) and issubclass(tp, Model):
        return tp.from_dict(value)

    if tp is bool:
        if isinstance(value, bool):
            return value
    elif tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    elif tp is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif tp is str:
        if isinstance(value, str):
            return value
    else:
        raise TypeError(f"{model}.{key}: unsupported field type {tp!r}")

    raise DecodingError(model, key, f"expected {_describe(tp)}, got {_kind(value)}")


def decode(cls: type, data: Any) -> Any:
    """Build a ``cls`` instance from a decoded JSON object."""
    name = cls.__name__
    if not isinstance(data, Mapping):
        raise DecodingError(name, None, f"expected object, got {_kind(data)}")

    kwargs: dict[str, Any] = {}
    for fld in wire_fields(cls):
        if fld.key not in data:
            if fld.optional:
                continue
            raise DecodingError(name, fld.key, "required field is missing")

        value = data[fld.key]
        if value is None:
            if fld.nullable:
                kwargs[fld.name] = None
            elif not fld.optional:
                raise DecodingError(name, fld.key, "required field is null")
            continue

        kwargs[fld.name] = decode_value(fld.type, value, name, fld.key)

    try:
        return cls(**kwargs)
    except ValueError as exc:
        raise DecodingError(name, None, str(exc)) from exc


def encode_value(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if isinstance(value, Mapping):
        return {k: encode_value(v) for k, v in value.items()}
    return value


def encode(obj: "Model") -> dict[str, Any]:
    """Encode a model, leaving out every field that is still ``UNSET``."""
    result: dict[str, Any] = {}
    for fld in wire_fields(type(obj)):
        value = getattr(obj, fld.name)
        if value is UNSET:
            continue
        result[fld.key] = encode_value(value)
    return result


def decode_many(cls: type, payload: Any) -> list:
    """Decode a collection body: a bare array or an object with a ``data`` array."""
    if isinstance(payload, Mapping) and "data" in payload:
        payload = payload["data"]
    if not isinstance(payload, list):
        raise DecodingError(cls.__name__, None, f"expected array, got {_kind(payload)}")
    return [decode(cls, item) for item in payload]


class Model:
    """Base class for every payload shape."""

    def to_dict(self) -> dict[str, Any]:
        return encode(self)

    @classmethod
    def from_dict(cls, data: Any):
        return decode(cls, data)


class OpaqueModel(Model):
    """A response whose ``data`` payload has no fixed schema.

    An object body with a ``data`` key yields that value; any other body is
    kept whole.
    """

    @classmethod
    def from_dict(cls, data: Any):
        if isinstance(data, Mapping) and "data" in data:
            return cls(data=data["data"])
        return cls(data=data)

    def to_dict(self) -> dict[str, Any]:
        return {"data": encode_value(self.data)}
