"""Shared path inventory constants."""

from __future__ import annotations

PATHS_SHEET_NAME = "Paths"
SCHEMA_SHEET_NAME = "Schema"

PATH_COLUMNS: tuple[str, ...] = ("Pattern", "Example path", "Shape")
UNRESOLVABLE_LABEL = "unresolvable"
