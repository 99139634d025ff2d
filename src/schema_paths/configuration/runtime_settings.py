"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_paths.schema_documents import SchemaSource
from schema_paths.schema_model import SchemaGraph


@dataclass(frozen=True)
class TraversalSettings:
    """Limits applied while enumerating and resolving paths."""

    max_depth: int
    dictionary_descents: int


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaSource
    schema_graph: SchemaGraph
    traversal: TraversalSettings
