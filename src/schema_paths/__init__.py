"""Schema-directed path enumeration and resolution."""

import logging

from .path_enumeration import enumerate_paths, iter_paths
from .path_grammar import (
    WILDCARD_INDEX,
    WILDCARD_KEY,
    IndexSegment,
    KeySegment,
    PathSyntaxError,
    format_path,
    is_well_formed,
    parse_path,
    substitute_wildcards,
)
from .path_resolution import (
    UNRESOLVABLE,
    ResolutionReport,
    RuleAttempt,
    Unresolvable,
    explain,
    is_valid_path,
    resolve,
)
from .schema_documents import SchemaSource, load_schema_graph, parse_schema_document
from .schema_model import (
    BOOLEAN,
    NUMBER,
    STRING,
    TIMESTAMP,
    Array,
    DanglingReferenceError,
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
    UnguardedRecursionError,
    Union,
    build_schema_graph,
    describe_schema,
    merge_objects,
    object_of,
)
from .traversal import DEFAULT_MAX_DEPTH, DepthBudget, ResolutionRule

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Array",
    "BOOLEAN",
    "DEFAULT_MAX_DEPTH",
    "DanglingReferenceError",
    "DepthBudget",
    "Dictionary",
    "Field",
    "IndexSegment",
    "KeySegment",
    "NUMBER",
    "Object",
    "Optional",
    "PathSyntaxError",
    "Reference",
    "ResolutionReport",
    "ResolutionRule",
    "RuleAttempt",
    "STRING",
    "Schema",
    "SchemaDefinitionError",
    "SchemaGraph",
    "SchemaSource",
    "TIMESTAMP",
    "Terminal",
    "TerminalKind",
    "Tuple",
    "UNRESOLVABLE",
    "UnguardedRecursionError",
    "Union",
    "Unresolvable",
    "WILDCARD_INDEX",
    "WILDCARD_KEY",
    "build_schema_graph",
    "describe_schema",
    "enumerate_paths",
    "explain",
    "format_path",
    "is_valid_path",
    "is_well_formed",
    "iter_paths",
    "load_schema_graph",
    "merge_objects",
    "object_of",
    "parse_path",
    "parse_schema_document",
    "resolve",
    "substitute_wildcards",
]
