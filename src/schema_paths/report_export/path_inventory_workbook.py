"""Path inventory workbook export service."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from schema_paths.configuration.runtime_settings import Configuration, TraversalSettings
from schema_paths.path_enumeration import enumerate_paths
from schema_paths.path_grammar import substitute_wildcards
from schema_paths.path_resolution import Unresolvable, resolve
from schema_paths.schema_model import SchemaGraph, describe_schema

from .constants import PATH_COLUMNS, PATHS_SHEET_NAME, SCHEMA_SHEET_NAME, UNRESOLVABLE_LABEL


@dataclass(frozen=True)
class PathInventoryEntry:
    """One enumerated pattern with a concrete example and its shape."""

    pattern: str
    example_path: str
    shape: str


def build_path_inventory(
    graph: SchemaGraph, traversal: TraversalSettings
) -> tuple[PathInventoryEntry, ...]:
    """Enumerate patterns in sorted order and resolve one example path for each."""
    entries = []
    for pattern in sorted(
        enumerate_paths(
            graph, traversal.max_depth, dictionary_descents=traversal.dictionary_descents
        )
    ):
        example_path = substitute_wildcards(pattern)
        shape = resolve(graph, example_path, dictionary_descents=traversal.dictionary_descents)
        entries.append(
            PathInventoryEntry(
                pattern=pattern,
                example_path=example_path,
                shape=UNRESOLVABLE_LABEL
                if isinstance(shape, Unresolvable)
                else describe_schema(shape),
            )
        )
    return tuple(entries)


def write_path_inventory_workbook(
    configuration: Configuration,
    entries: Sequence[PathInventoryEntry],
    output_path: Path | str,
) -> None:
    """Create the Excel inventory containing path and schema sheets."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = PATHS_SHEET_NAME

    for column_index, name in enumerate(PATH_COLUMNS, start=1):
        header = sheet.cell(row=1, column=column_index, value=name)
        header.style = "Headline 3"
    for row_index, entry in enumerate(entries, start=2):
        for column_index, value in enumerate(
            (entry.pattern, entry.example_path, entry.shape), start=1
        ):
            sheet.cell(row=row_index, column=column_index, value=value)
    _fit_column_widths(sheet, entries)
    sheet.freeze_panes = "A2"

    _write_schema_sheet(workbook, configuration)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)


def _fit_column_widths(sheet: Worksheet, entries: Sequence[PathInventoryEntry]) -> None:
    columns = (
        [entry.pattern for entry in entries],
        [entry.example_path for entry in entries],
        [entry.shape for entry in entries],
    )
    for column_index, (name, values) in enumerate(zip(PATH_COLUMNS, columns), start=1):
        longest = max((len(value) for value in values), default=0)
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(max(longest, len(name)) + 4, 80)
        )


def _write_schema_sheet(workbook: Workbook, configuration: Configuration) -> None:
    sheet = workbook.create_sheet(SCHEMA_SHEET_NAME)
    schema_hash = hashlib.sha256(configuration.schema.text.encode("utf-8")).hexdigest()
    source = configuration.schema.source_path
    entries = [
        ("schema_source", str(source) if source is not None else "<inline>"),
        ("schema_hash", schema_hash),
        ("max_depth", configuration.traversal.max_depth),
        ("dictionary_descents", configuration.traversal.dictionary_descents),
        ("schema_text", configuration.schema.text),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
