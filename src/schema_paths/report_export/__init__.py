"""Path inventory export exports."""

from .constants import PATH_COLUMNS, PATHS_SHEET_NAME, SCHEMA_SHEET_NAME, UNRESOLVABLE_LABEL
from .path_inventory_workbook import (
    PathInventoryEntry,
    build_path_inventory,
    write_path_inventory_workbook,
)

__all__ = [
    "PATHS_SHEET_NAME",
    "SCHEMA_SHEET_NAME",
    "PATH_COLUMNS",
    "UNRESOLVABLE_LABEL",
    "PathInventoryEntry",
    "build_path_inventory",
    "write_path_inventory_workbook",
]
