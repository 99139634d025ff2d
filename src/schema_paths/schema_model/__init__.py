"""Schema model exports."""

from .schema_graph import (
    DanglingReferenceError,
    SchemaDefinitionError,
    SchemaGraph,
    UnguardedRecursionError,
    as_schema_graph,
    build_schema_graph,
)
from .schema_nodes import (
    BOOLEAN,
    NUMBER,
    STRING,
    TIMESTAMP,
    Array,
    Dictionary,
    Field,
    Object,
    Optional,
    Reference,
    Schema,
    Terminal,
    TerminalKind,
    Tuple,
    Union,
    merge_objects,
    object_of,
    strip_optional,
)
from .schema_rendering import describe_schema

__all__ = [
    "Array",
    "BOOLEAN",
    "DanglingReferenceError",
    "Dictionary",
    "Field",
    "NUMBER",
    "Object",
    "Optional",
    "Reference",
    "STRING",
    "Schema",
    "SchemaDefinitionError",
    "SchemaGraph",
    "TIMESTAMP",
    "Terminal",
    "TerminalKind",
    "Tuple",
    "UnguardedRecursionError",
    "Union",
    "as_schema_graph",
    "build_schema_graph",
    "describe_schema",
    "merge_objects",
    "object_of",
    "strip_optional",
]
