"""Traversal policy exports."""

from .depth_budget import DEFAULT_MAX_DEPTH, DepthBudget
from .precedence_policy import (
    DEFAULT_DICTIONARY_DESCENTS,
    PRECEDENCE_ORDER,
    ResolutionRule,
    is_addressable_name,
    is_bare_key,
    prefix_candidates,
    split_head,
)

__all__ = [
    "DEFAULT_DICTIONARY_DESCENTS",
    "DEFAULT_MAX_DEPTH",
    "DepthBudget",
    "PRECEDENCE_ORDER",
    "ResolutionRule",
    "is_addressable_name",
    "is_bare_key",
    "prefix_candidates",
    "split_head",
]
