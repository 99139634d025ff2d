"""Path resolution outcome entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from schema_paths.schema_model import Schema, Union
from schema_paths.traversal import ResolutionRule


class Unresolvable:
    """Sentinel for paths that have no shape under a schema."""

    _instance: Unresolvable | None = None

    def __new__(cls) -> Unresolvable:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNRESOLVABLE"


UNRESOLVABLE = Unresolvable()


@dataclass(frozen=True)
class RuleAttempt:
    """One interpretation tried for a remaining path fragment."""

    rule: ResolutionRule
    key: str
    node: str
    resolved: bool


@dataclass(frozen=True)
class ResolutionReport:
    """Resolved shape plus the interpretations tried on the way."""

    path: str
    shape: Schema | Unresolvable
    attempts: tuple[RuleAttempt, ...]

    @property
    def resolved(self) -> bool:
        """Return True when the path has a shape."""
        return self.shape is not UNRESOLVABLE


def merge_outcomes(outcomes: Iterable[Schema | Unresolvable]) -> Schema | Unresolvable:
    """Join per-variant outcomes, dropping unresolvable ones."""
    shapes = tuple(outcome for outcome in outcomes if not isinstance(outcome, Unresolvable))
    if not shapes:
        return UNRESOLVABLE
    merged = Union(shapes)
    if len(merged.variants) == 1:
        return merged.variants[0]
    return merged
