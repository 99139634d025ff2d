"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_paths.schema_documents import SchemaSource, load_schema_graph, read_schema_source
from schema_paths.schema_model import SchemaDefinitionError
from schema_paths.traversal import DEFAULT_DICTIONARY_DESCENTS, DEFAULT_MAX_DEPTH

from .runtime_settings import Configuration, TraversalSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    try:
        schema_graph = load_schema_graph(schema)
    except SchemaDefinitionError as exc:
        raise ConfigurationError(str(exc)) from exc
    traversal = _parse_traversal_section(parsed.get("traversal"))

    return Configuration(
        path=path,
        schema=schema,
        schema_graph=schema_graph,
        traversal=traversal,
    )


def _parse_schema_section(value: Any, base_path: Path) -> SchemaSource:
    section = _require_mapping(value, "schema")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema section must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("schema.inline must be a string.")
        if not inline.strip():
            raise ConfigurationError("Schema text cannot be empty.")
        return SchemaSource(text=inline, source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("schema.path must be a string.")
        try:
            source = read_schema_source(_resolve_path(base_path, path_value))
        except SchemaDefinitionError as exc:
            raise ConfigurationError(str(exc)) from exc
        if not source.text.strip():
            raise ConfigurationError("Schema text cannot be empty.")
        return source
    raise ConfigurationError("Schema section requires either inline or path.")


def _parse_traversal_section(value: Any) -> TraversalSettings:
    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        raise ConfigurationError("traversal must be a mapping.")
    max_depth = _require_non_negative_int(
        value.get("max_depth", DEFAULT_MAX_DEPTH), "traversal.max_depth"
    )
    dictionary_descents = _require_non_negative_int(
        value.get("dictionary_descents", DEFAULT_DICTIONARY_DESCENTS),
        "traversal.dictionary_descents",
    )
    return TraversalSettings(max_depth=max_depth, dictionary_descents=dictionary_descents)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
