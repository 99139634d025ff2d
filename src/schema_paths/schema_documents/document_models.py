"""Schema document entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSource:
    """Raw schema document text and where it came from."""

    text: str
    source_path: Path | None = None
