"""Path resolution exports."""

from .path_resolver import explain, is_valid_path, resolve
from .resolution_outcomes import (
    UNRESOLVABLE,
    ResolutionReport,
    RuleAttempt,
    Unresolvable,
    merge_outcomes,
)

__all__ = [
    "ResolutionReport",
    "RuleAttempt",
    "UNRESOLVABLE",
    "Unresolvable",
    "explain",
    "is_valid_path",
    "merge_outcomes",
    "resolve",
]
