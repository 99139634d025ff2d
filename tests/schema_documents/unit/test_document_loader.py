"""Schema document loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_paths.schema_documents import (
    SchemaSource,
    load_schema_graph,
    parse_schema_document,
    parse_schema_node,
    read_schema_source,
)
from schema_paths.schema_model import (
    NUMBER,
    STRING,
    Array,
    DanglingReferenceError,
    Dictionary,
    Field,
    Object,
    Optional,
    Reference,
    SchemaDefinitionError,
    Terminal,
    TerminalKind,
    Tuple,
    Union,
    UnguardedRecursionError,
)


def test_load_schema_graph_parses_yaml_with_definitions() -> None:
    source = SchemaSource(
        text="""
schema: {ref: Node}
definitions:
  Node:
    type: object
    fields:
      name: string
      child: {ref: Node}
    optional: [child]
"""
    )

    graph = load_schema_graph(source)

    assert graph.root == Reference("Node")
    assert graph.definitions["Node"] == Object(
        (Field("name", STRING), Field("child", Reference("Node"), optional=True))
    )


@pytest.mark.parametrize(
    ("node", "expected"),
    [
        ("number", NUMBER),
        ({"type": "opaque"}, Terminal(TerminalKind.OPAQUE)),
        ({"type": "array", "items": "string"}, Array(STRING)),
        ({"type": "tuple", "items": ["string", "number"]}, Tuple((STRING, NUMBER))),
        ({"type": "dictionary", "values": "number"}, Dictionary(NUMBER)),
        ({"type": "union", "variants": ["string", "number"]}, Union((STRING, NUMBER))),
        ({"type": "optional", "inner": "string"}, Optional(STRING)),
        ({"type": "object"}, Object(())),
    ],
)
def test_parse_schema_node_supports_every_shape(node: object, expected: object) -> None:
    assert parse_schema_node(node) == expected


@pytest.mark.parametrize(
    ("node", "message"),
    [
        (42, "must be a terminal kind name or a mapping"),
        ("integer", "unknown terminal kind 'integer'"),
        ({"ref": ""}, "ref must be a non-empty string"),
        ({"fields": {}}, "type must be a string"),
        ({"type": "set"}, "'set' is not supported"),
        ({"type": "array"}, "items is required"),
        ({"type": "tuple", "items": "string"}, "items must be a list"),
        ({"type": "union", "variants": []}, "variants must not be empty"),
        ({"type": "object", "fields": ["a"]}, "fields must be a mapping"),
        ({"type": "object", "fields": {"a": "string"}, "optional": "a"}, "list of field names"),
        ({"type": "object", "fields": {"a": "string"}, "optional": ["b"]}, "undeclared field"),
    ],
)
def test_parse_schema_node_rejects_invalid_nodes(node: object, message: str) -> None:
    with pytest.raises(SchemaDefinitionError, match=message):
        parse_schema_node(node)


def test_parse_schema_node_reports_nested_location() -> None:
    node = {"type": "object", "fields": {"tags": {"type": "array", "items": "colour"}}}

    with pytest.raises(SchemaDefinitionError, match=r"schema\.fields\.tags\.items"):
        parse_schema_node(node)


@pytest.mark.parametrize(
    ("document", "error", "message"),
    [
        (["schema"], SchemaDefinitionError, "root must be a mapping"),
        ({"definitions": {}}, SchemaDefinitionError, "requires a 'schema' entry"),
        (
            {"schema": "string", "definitions": ["Node"]},
            SchemaDefinitionError,
            "must be a mapping",
        ),
        ({"schema": {"ref": "Missing"}}, DanglingReferenceError, "Missing"),
        (
            {"schema": {"ref": "Loop"}, "definitions": {"Loop": {"ref": "Loop"}}},
            UnguardedRecursionError,
            "Loop",
        ),
    ],
)
def test_parse_schema_document_rejects_invalid_documents(
    document: object, error: type[Exception], message: str
) -> None:
    with pytest.raises(error, match=message):
        parse_schema_document(document)


def test_load_schema_graph_wraps_yaml_errors() -> None:
    with pytest.raises(SchemaDefinitionError, match="Invalid schema document"):
        load_schema_graph(SchemaSource(text="schema: [unclosed"))


def test_read_schema_source_reads_file(tmp_path: Path) -> None:
    schema_path = tmp_path / "schema.yaml"
    schema_path.write_text("schema: string\n", encoding="utf-8")

    source = read_schema_source(schema_path)

    assert source.source_path == schema_path
    assert load_schema_graph(source).root == STRING


def test_read_schema_source_errors_when_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SchemaDefinitionError, match="Schema file not found"):
        read_schema_source(tmp_path / "absent.yaml")
