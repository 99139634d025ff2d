"""Schema document exports."""

from .document_loader import (
    load_schema_graph,
    parse_schema_document,
    parse_schema_node,
    read_schema_source,
)
from .document_models import SchemaSource

__all__ = [
    "SchemaSource",
    "load_schema_graph",
    "parse_schema_document",
    "parse_schema_node",
    "read_schema_source",
]
