"""Path segment entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

WILDCARD_KEY = "*"
WILDCARD_INDEX = "[*]"


@dataclass(frozen=True)
class KeySegment:
    """Named navigation step; ``*`` stands for any dictionary key."""

    name: str

    @property
    def is_wildcard(self) -> bool:
        return self.name == WILDCARD_KEY


@dataclass(frozen=True)
class IndexSegment:
    """Bracketed navigation step; ``position`` is None for the wildcard index."""

    position: int | None = None

    @property
    def is_wildcard(self) -> bool:
        return self.position is None


Segment: TypeAlias = KeySegment | IndexSegment
