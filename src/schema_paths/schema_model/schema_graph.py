"""Schema graph construction and validation."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .schema_nodes import (
    Array,
    Dictionary,
    Object,
    Optional,
    Reference,
    Schema,
    Tuple,
    Union,
)

_LOGGER = logging.getLogger(__name__)


class SchemaDefinitionError(Exception):
    """Raised when a schema graph is structurally invalid."""


class DanglingReferenceError(SchemaDefinitionError):
    """Raised when a reference names a definition that does not exist."""


class UnguardedRecursionError(SchemaDefinitionError):
    """Raised when a definition reaches itself without structural descent."""


@dataclass(frozen=True, eq=False)
class SchemaGraph:
    """Root shape plus the named definitions its references point to."""

    root: Schema
    definitions: Mapping[str, Schema]

    def dereference(self, schema: Schema) -> Schema:
        """Follow references until a non-reference shape is reached."""
        while isinstance(schema, Reference):
            schema = self.definitions[schema.name]
        return schema


def build_schema_graph(
    root: Schema, definitions: Mapping[str, Schema] | None = None
) -> SchemaGraph:
    """Validate ``root`` and ``definitions`` and return an immutable graph.

    Raises:
      DanglingReferenceError: If a reference names an unknown definition.
      UnguardedRecursionError: If a definition only aliases itself.
      SchemaDefinitionError: If an object declares the same field twice.
    """
    named = dict(definitions or {})
    for owner, schema in (("<root>", root), *named.items()):
        for node in _walk_nodes(schema):
            _validate_node(node, owner, named)
    for name in named:
        _reject_unguarded_cycle(name, named)
    _LOGGER.debug("Built schema graph with %d definition(s).", len(named))
    return SchemaGraph(root=root, definitions=MappingProxyType(named))


def as_schema_graph(schema: Schema | SchemaGraph) -> SchemaGraph:
    """Return ``schema`` as a graph, validating bare shapes on the way."""
    if isinstance(schema, SchemaGraph):
        return schema
    return build_schema_graph(schema)


def _validate_node(node: Schema, owner: str, definitions: Mapping[str, Schema]) -> None:
    if isinstance(node, Reference) and node.name not in definitions:
        raise DanglingReferenceError(
            f"Reference '{node.name}' in {owner} does not name a known definition."
        )
    if isinstance(node, Object):
        seen: set[str] = set()
        for declared in node.fields:
            if declared.name in seen:
                raise SchemaDefinitionError(
                    f"Duplicate field '{declared.name}' declared in {owner}."
                )
            seen.add(declared.name)


def _walk_nodes(schema: Schema) -> Iterator[Schema]:
    pending: list[Schema] = [schema]
    while pending:
        node = pending.pop()
        yield node
        pending.extend(_children(node))


def _children(node: Schema) -> tuple[Schema, ...]:
    if isinstance(node, Object):
        return tuple(declared.schema for declared in node.fields)
    if isinstance(node, Dictionary):
        return (node.value,)
    if isinstance(node, Array):
        return (node.element,)
    if isinstance(node, Tuple):
        return node.elements
    if isinstance(node, Union):
        return node.variants
    if isinstance(node, Optional):
        return (node.inner,)
    return ()


def _reject_unguarded_cycle(start: str, definitions: Mapping[str, Schema]) -> None:
    visited: set[str] = set()
    pending: list[Schema] = [definitions[start]]
    while pending:
        node = pending.pop()
        if isinstance(node, Reference):
            if node.name == start:
                raise UnguardedRecursionError(
                    f"Definition '{start}' refers to itself without an object, "
                    "dictionary, array or tuple in between."
                )
            if node.name not in visited:
                visited.add(node.name)
                pending.append(definitions[node.name])
        elif isinstance(node, Union):
            pending.extend(node.variants)
        elif isinstance(node, Optional):
            pending.append(node.inner)
