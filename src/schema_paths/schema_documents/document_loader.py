"""Schema document loading service.

Documents are YAML or JSON mappings::

    schema: {ref: Node}
    definitions:
      Node:
        type: object
        fields:
          name: string
          child: {ref: Node}
        optional: [child]

Node forms: a terminal kind name (``string``, ``number``, ...), ``{ref: Name}``
or a mapping whose ``type`` is ``object``, ``array``, ``tuple``,
``dictionary``, ``union``, ``optional`` or a terminal kind.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_paths.schema_model import (
    Array,
    Dictionary,
    Field,
    Object,
    Optional,
    Reference,
    Schema,
    SchemaDefinitionError,
    SchemaGraph,
    Terminal,
    TerminalKind,
    Tuple,
    Union,
    build_schema_graph,
)

from .document_models import SchemaSource

_LOGGER = logging.getLogger(__name__)

_TERMINAL_KINDS = {kind.value: kind for kind in TerminalKind}


def read_schema_source(path: Path | str) -> SchemaSource:
    """Read a schema document file."""
    source_path = Path(path)
    if not source_path.exists():
        raise SchemaDefinitionError(f"Schema file not found: {source_path}")
    return SchemaSource(text=source_path.read_text(encoding="utf-8"), source_path=source_path)


def load_schema_graph(source: SchemaSource) -> SchemaGraph:
    """Parse schema document text into a validated schema graph."""
    try:
        document = yaml.safe_load(source.text)
    except yaml.YAMLError as exc:
        raise SchemaDefinitionError(f"Invalid schema document: {exc}") from exc
    graph = parse_schema_document(document)
    _LOGGER.debug("Loaded schema document from %s.", source.source_path or "<inline>")
    return graph


def parse_schema_document(document: Any) -> SchemaGraph:
    """Build a schema graph from an already parsed document mapping."""
    if not isinstance(document, Mapping):
        raise SchemaDefinitionError("Schema document root must be a mapping.")
    if "schema" not in document:
        raise SchemaDefinitionError("Schema document requires a 'schema' entry.")
    raw_definitions = document.get("definitions") or {}
    if not isinstance(raw_definitions, Mapping):
        raise SchemaDefinitionError("Schema document 'definitions' must be a mapping.")
    definitions = {
        str(name): parse_schema_node(node, f"definitions.{name}")
        for name, node in raw_definitions.items()
    }
    root = parse_schema_node(document["schema"], "schema")
    return build_schema_graph(root, definitions)


def parse_schema_node(node: Any, location: str = "schema") -> Schema:
    """Convert one document node into a schema shape."""
    if isinstance(node, str):
        return _terminal(node, location)
    if not isinstance(node, Mapping):
        raise SchemaDefinitionError(f"{location} must be a terminal kind name or a mapping.")
    if "ref" in node:
        name = node["ref"]
        if not isinstance(name, str) or not name:
            raise SchemaDefinitionError(f"{location}.ref must be a non-empty string.")
        return Reference(name)

    node_type = node.get("type")
    if not isinstance(node_type, str):
        raise SchemaDefinitionError(f"{location}.type must be a string.")
    if node_type in _TERMINAL_KINDS:
        return _terminal(node_type, location)
    if node_type == "object":
        return _parse_object(node, location)
    if node_type == "array":
        return Array(parse_schema_node(_require(node, "items", location), f"{location}.items"))
    if node_type == "tuple":
        items = _require_sequence(node, "items", location)
        return Tuple(
            tuple(
                parse_schema_node(item, f"{location}.items[{position}]")
                for position, item in enumerate(items)
            )
        )
    if node_type == "dictionary":
        values = _require(node, "values", location)
        return Dictionary(parse_schema_node(values, f"{location}.values"))
    if node_type == "union":
        variants = _require_sequence(node, "variants", location)
        if not variants:
            raise SchemaDefinitionError(f"{location}.variants must not be empty.")
        return Union(
            tuple(
                parse_schema_node(variant, f"{location}.variants[{position}]")
                for position, variant in enumerate(variants)
            )
        )
    if node_type == "optional":
        return Optional(parse_schema_node(_require(node, "inner", location), f"{location}.inner"))
    raise SchemaDefinitionError(f"{location}.type '{node_type}' is not supported.")


def _parse_object(node: Mapping[str, Any], location: str) -> Object:
    raw_fields = node.get("fields") or {}
    if not isinstance(raw_fields, Mapping):
        raise SchemaDefinitionError(f"{location}.fields must be a mapping.")
    optional_names = {str(name) for name in _optional_names(node, location)}
    field_names = {str(name) for name in raw_fields}
    unknown = sorted(optional_names - field_names)
    if unknown:
        raise SchemaDefinitionError(
            f"{location}.optional names undeclared field(s): {', '.join(unknown)}"
        )
    return Object(
        tuple(
            Field(
                name=str(name),
                schema=parse_schema_node(child, f"{location}.fields.{name}"),
                optional=str(name) in optional_names,
            )
            for name, child in raw_fields.items()
        )
    )


def _optional_names(node: Mapping[str, Any], location: str) -> Sequence[Any]:
    value = node.get("optional") or ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaDefinitionError(f"{location}.optional must be a list of field names.")
    return value


def _terminal(kind_name: str, location: str) -> Terminal:
    kind = _TERMINAL_KINDS.get(kind_name)
    if kind is None:
        raise SchemaDefinitionError(f"{location} names unknown terminal kind '{kind_name}'.")
    return Terminal(kind)


def _require(node: Mapping[str, Any], key: str, location: str) -> Any:
    if key not in node:
        raise SchemaDefinitionError(f"{location}.{key} is required.")
    return node[key]


def _require_sequence(node: Mapping[str, Any], key: str, location: str) -> Sequence[Any]:
    value = _require(node, key, location)
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaDefinitionError(f"{location}.{key} must be a list.")
    return value
