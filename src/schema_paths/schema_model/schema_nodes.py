"""Schema shape entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class TerminalKind(str, Enum):
    """Leaf kinds that path traversal never descends into."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    PATTERN = "pattern"
    CALLABLE = "callable"
    PROMISE = "promise"
    NULL = "null"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class Terminal:
    """Primitive or opaque leaf shape."""

    kind: TerminalKind = TerminalKind.OPAQUE


@dataclass(frozen=True)
class Field:
    """Named property of an object shape."""

    name: str
    schema: Schema
    optional: bool = False


@dataclass(frozen=True)
class Object:
    """Shape with explicitly declared named properties."""

    fields: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def field(self, name: str) -> Field | None:
        """Return the declared field called ``name``, if any."""
        for candidate in self.fields:
            if candidate.name == name:
                return candidate
        return None

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(candidate.name for candidate in self.fields)


@dataclass(frozen=True)
class Dictionary:
    """Open string-keyed map; every key yields ``value``."""

    value: Schema


@dataclass(frozen=True)
class Array:
    """Homogeneous index-addressed sequence."""

    element: Schema


@dataclass(frozen=True)
class Tuple:
    """Fixed-length heterogeneous sequence."""

    elements: tuple[Schema, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True)
class Union:
    """Value is structurally one of ``variants``."""

    variants: tuple[Schema, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "variants", _unique_variants(tuple(self.variants)))


@dataclass(frozen=True)
class Optional:
    """Shape that may be absent."""

    inner: Schema


@dataclass(frozen=True)
class Reference:
    """Named handle resolved through the schema graph definitions."""

    name: str


Schema: TypeAlias = Terminal | Object | Dictionary | Array | Tuple | Union | Optional | Reference

STRING = Terminal(TerminalKind.STRING)
NUMBER = Terminal(TerminalKind.NUMBER)
BOOLEAN = Terminal(TerminalKind.BOOLEAN)
TIMESTAMP = Terminal(TerminalKind.TIMESTAMP)


def object_of(*fields: Field, **named: Schema) -> Object:
    """Build an object shape from ``Field`` entries and required keyword fields."""
    keyword_fields = tuple(Field(name, schema) for name, schema in named.items())
    return Object(fields=tuple(fields) + keyword_fields)


def merge_objects(*objects: Object) -> Object:
    """Return the object shape of an intersection of object shapes.

    Later objects override earlier fields of the same name.
    """
    merged: dict[str, Field] = {}
    for candidate in objects:
        for declared in candidate.fields:
            merged[declared.name] = declared
    return Object(fields=tuple(merged.values()))


def strip_optional(schema: Schema) -> Schema:
    """Remove every directly nested optional wrapper."""
    while isinstance(schema, Optional):
        schema = schema.inner
    return schema


def _unique_variants(variants: tuple[Schema, ...]) -> tuple[Schema, ...]:
    flattened: list[Schema] = []
    for variant in variants:
        nested = variant.variants if isinstance(variant, Union) else (variant,)
        for item in nested:
            if item not in flattened:
                flattened.append(item)
    return tuple(flattened)
