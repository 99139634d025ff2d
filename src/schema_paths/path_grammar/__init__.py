"""Path grammar exports."""

from .path_segments import WILDCARD_INDEX, WILDCARD_KEY, IndexSegment, KeySegment, Segment
from .path_tokenizer import (
    SEPARATOR,
    PathSyntaxError,
    format_path,
    is_well_formed,
    join_pattern,
    parse_path,
    substitute_wildcards,
)

__all__ = [
    "IndexSegment",
    "KeySegment",
    "PathSyntaxError",
    "SEPARATOR",
    "Segment",
    "WILDCARD_INDEX",
    "WILDCARD_KEY",
    "format_path",
    "is_well_formed",
    "join_pattern",
    "parse_path",
    "substitute_wildcards",
]
