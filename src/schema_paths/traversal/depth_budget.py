"""Depth budget threaded through schema descent."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 5


@dataclass(frozen=True)
class DepthBudget:
    """Remaining allowance for object and dictionary descent.

    Index descent into arrays and tuples keeps the budget unchanged.
    """

    remaining: int

    @classmethod
    def start(cls, max_depth: int = DEFAULT_MAX_DEPTH) -> DepthBudget:
        """Create a fresh budget, rejecting negative or non-integer maxima."""
        if isinstance(max_depth, bool) or not isinstance(max_depth, int):
            raise ValueError("max_depth must be an integer.")
        if max_depth < 0:
            raise ValueError("max_depth must not be negative.")
        return cls(remaining=max_depth)

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def descend(self) -> DepthBudget:
        """Return the budget for one object-field or dictionary-value level deeper."""
        return DepthBudget(remaining=max(self.remaining - 1, 0))
