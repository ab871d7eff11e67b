"""A small JSON Schema model: describe, generate and validate schemas."""

from __future__ import annotations

import collections.abc
import dataclasses
import inspect
import json
import re
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class DataType(str, Enum):
    """JSON Schema primitive types."""

    OBJECT = "object"
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    ARRAY = "array"
    NULL = "null"
    BOOLEAN = "boolean"


class SchemaValidationError(ValueError):
    """Raised when data does not satisfy a schema."""


@dataclass
class Definition:
    """A JSON Schema definition."""

    type: Optional[DataType] = None
    description: str = ""
    enum: Optional[list[str]] = None
    properties: Optional[dict[str, Definition]] = None
    required: Optional[list[str]] = None
    items: Optional[Definition] = None
    additional_properties: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the schema as JSON-ready data; properties are always present."""
        out: dict[str, Any] = {}
        if self.type:
            out["type"] = self.type.value if isinstance(self.type, Enum) else self.type
        if self.description:
            out["description"] = self.description
        if self.enum:
            out["enum"] = list(self.enum)
        out["properties"] = {
            name: prop.to_dict() for name, prop in (self.properties or {}).items()
        }
        if self.required:
            out["required"] = list(self.required)
        if self.items is not None:
            out["items"] = self.items.to_dict()
        if self.additional_properties is not None:
            extra = self.additional_properties
            out["additionalProperties"] = (
                extra.to_dict() if isinstance(extra, Definition) else extra
            )
        return out

    def to_json(self) -> str:
        """Serialize the schema to compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def unmarshal(self, content: str | bytes) -> Any:
        """Parse JSON content and check it against this schema."""
        return verify_schema_and_unmarshal(self, content)


_SCALARS = {
    str: DataType.STRING,
    bool: DataType.BOOLEAN,
    int: DataType.INTEGER,
    float: DataType.NUMBER,
}

_SEQUENCES = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
)

_TRUE_STRINGS = {"1", "t", "T", "TRUE", "true", "True"}

_NAMED_TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "None": type(None),
    "NoneType": type(None),
}

_NAMED_GENERICS: dict[str, Any] = {
    "list": list,
    "List": list,
    "tuple": tuple,
    "Tuple": tuple,
    "set": set,
    "Set": set,
    "frozenset": frozenset,
    "FrozenSet": frozenset,
    "Sequence": collections.abc.Sequence,
    "MutableSequence": collections.abc.MutableSequence,
    "AbstractSet": collections.abc.Set,
}

_ANNOTATION_PIECE = re.compile(r"\.\.\.|[A-Za-z_][\w.]*|[\[\],|]")


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))


def _is_type_like(value: Any) -> bool:
    return typing.get_origin(value) is not None or isinstance(value, type)


class _AnnotationParser:
    """Resolves a string annotation into a type, without running it."""

    def __init__(self, text: str, owner: type) -> None:
        self._text = text
        self._pieces = _ANNOTATION_PIECE.findall(text)
        self._pos = 0
        module = inspect.getmodule(owner)
        self._namespace: dict[str, Any] = dict(vars(module)) if module else {}
        self._namespace.setdefault(owner.__name__, owner)

    def parse(self) -> Any:
        result = self._union()
        if self._pos != len(self._pieces):
            raise TypeError(f"unsupported type: {self._text}")
        return result

    def _peek(self) -> Optional[str]:
        return self._pieces[self._pos] if self._pos < len(self._pieces) else None

    def _next(self) -> str:
        piece = self._peek()
        if piece is None:
            raise TypeError(f"unsupported type: {self._text}")
        self._pos += 1
        return piece

    def _union(self) -> Any:
        terms = [self._term()]
        while self._peek() == "|":
            self._next()
            terms.append(self._term())
        return terms[0] if len(terms) == 1 else Union[tuple(terms)]

    def _term(self) -> Any:
        piece = self._next()
        if piece == "...":
            return Ellipsis
        if piece in "[],|":
            raise TypeError(f"unsupported type: {self._text}")
        name = piece.rsplit(".", 1)[-1]
        if self._peek() == "[":
            self._next()
            args = [self._union()]
            while self._peek() == ",":
                self._next()
                args.append(self._union())
            if self._next() != "]":
                raise TypeError(f"unsupported type: {self._text}")
            return self._subscript(name, args)
        return self._lookup(name)

    def _subscript(self, name: str, args: list[Any]) -> Any:
        if name == "Optional" and len(args) == 1:
            return Optional[args[0]]
        if name == "Union":
            return Union[tuple(args)]
        generic = _NAMED_GENERICS.get(name)
        if generic is None:
            raise TypeError(f"unsupported type: {self._text}")
        return generic[tuple(args)] if len(args) > 1 else generic[args[0]]

    def _lookup(self, name: str) -> Any:
        if name in _NAMED_TYPES:
            return _NAMED_TYPES[name]
        if name in _NAMED_GENERICS:
            return _NAMED_GENERICS[name]
        found = self._namespace.get(name)
        if isinstance(found, type):
            return found
        raise TypeError(f"unsupported type: {name}")


def _field_type(owner: type, fld: dataclasses.Field) -> Any:
    annotation = fld.type
    if isinstance(annotation, str):
        return _AnnotationParser(annotation, owner).parse()
    return annotation


def generate_schema_for_type(tp: Any) -> Definition:
    """Derive a schema from a type (or from the type of an instance)."""
    if not _is_type_like(tp):
        tp = type(tp)
    return _reflect(tp)


def _reflect(tp: Any) -> Definition:
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = typing.get_args(tp)
        present = [arg for arg in args if arg is not type(None)]
        if len(present) == 1 and len(args) == 2:
            return _reflect(present[0])
        raise TypeError(f"unsupported type: {tp!r}")
    if origin in _SEQUENCES:
        args = typing.get_args(tp)
        if not args:
            raise TypeError(f"unsupported type: {tp!r}")
        if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
            if any(arg != args[0] for arg in args):
                raise TypeError(f"unsupported type: {tp!r}")
        return Definition(type=DataType.ARRAY, items=_reflect(args[0]))
    if origin is not None:
        raise TypeError(f"unsupported type: {tp!r}")
    if tp in _SCALARS:
        return Definition(type=_SCALARS[tp])
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return _reflect_object(tp)
    raise TypeError(f"unsupported type: {_type_name(tp)}")


def _parse_required(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value) in _TRUE_STRINGS


def _reflect_object(tp: type) -> Definition:
    properties: dict[str, Definition] = {}
    required: list[str] = []
    for fld in dataclasses.fields(tp):
        if fld.name.startswith("_"):
            continue
        tag = fld.metadata.get("json", "")
        is_required = True
        if not tag:
            name = fld.name
        elif tag.endswith(",omitempty"):
            name = tag[: -len(",omitempty")]
            is_required = False
        else:
            name = tag

        item = _reflect(_field_type(tp, fld))
        description = fld.metadata.get("description", "")
        if description:
            item.description = description
        properties[name] = item

        flag = fld.metadata.get("required", "")
        if flag != "":
            is_required = _parse_required(flag)
        if is_required:
            required.append(name)
    return Definition(
        type=DataType.OBJECT,
        additional_properties=False,
        properties=properties,
        required=required or None,
    )


def validate(schema: Definition, data: Any) -> bool:
    """Report whether decoded JSON data satisfies a schema."""
    kind = schema.type
    if kind == DataType.OBJECT:
        return _validate_object(schema, data)
    if kind == DataType.ARRAY:
        return _validate_array(schema, data)
    if kind == DataType.STRING:
        return isinstance(data, str)
    if kind == DataType.NUMBER:
        return isinstance(data, (int, float)) and not isinstance(data, bool)
    if kind == DataType.BOOLEAN:
        return isinstance(data, bool)
    if kind == DataType.INTEGER:
        if isinstance(data, bool):
            return False
        if isinstance(data, float):
            return data.is_integer()
        return isinstance(data, int)
    if kind == DataType.NULL:
        return data is None
    return False


def _validate_object(schema: Definition, data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    required = schema.required or []
    if any(name not in data for name in required):
        return False
    for key, value_schema in (schema.properties or {}).items():
        if key in data:
            if not validate(value_schema, data[key]):
                return False
        elif key in required:
            return False
    return True


def _validate_array(schema: Definition, data: Any) -> bool:
    if not isinstance(data, list):
        return False
    if schema.items is None:
        return True
    return all(validate(schema.items, item) for item in data)


def verify_schema_and_unmarshal(schema: Definition, content: str | bytes) -> Any:
    """Parse JSON content, check it against a schema and return it."""
    data = json.loads(content)
    if not validate(schema, data):
        raise SchemaValidationError("data validation failed against the provided schema")
    return data