"""Path string tokenizer and renderer."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .path_segments import WILDCARD_INDEX, WILDCARD_KEY, IndexSegment, KeySegment, Segment

SEPARATOR = "."

_PART_PATTERN = re.compile(r"(?P<name>[^.\[\]]*)(?P<brackets>(?:\[(?:\d+|\*)\])*)")
_BRACKET_PATTERN = re.compile(r"\[(\d+|\*)\]")


class PathSyntaxError(ValueError):
    """Raised when a path string does not match the path grammar."""


def parse_path(text: str) -> tuple[Segment, ...]:
    """Split ``text`` into key and index segments.

    A key that itself contains a dot is indistinguishable from two keys at this
    level; schema-directed resolution decides between the two readings.

    Raises:
      PathSyntaxError: For empty paths, empty segments, malformed brackets or
        text following a bracket chain.
    """
    if not isinstance(text, str) or not text:
        raise PathSyntaxError("Path must be a non-empty string.")

    segments: list[Segment] = []
    for part in text.split(SEPARATOR):
        match = _PART_PATTERN.fullmatch(part)
        if match is None:
            raise PathSyntaxError(f"Malformed segment '{part}' in path '{text}'.")
        name, brackets = match.group("name"), match.group("brackets")
        if not name and not brackets:
            raise PathSyntaxError(f"Empty segment in path '{text}'.")
        if name:
            segments.append(KeySegment(name))
        for index_text in _BRACKET_PATTERN.findall(brackets):
            position = None if index_text == "*" else int(index_text)
            segments.append(IndexSegment(position))
    return tuple(segments)


def is_well_formed(text: str) -> bool:
    """Return True when ``text`` matches the path grammar."""
    try:
        parse_path(text)
    except PathSyntaxError:
        return False
    return True


def format_path(segments: Iterable[Segment]) -> str:
    """Render segments back into path text."""
    rendered = ""
    for segment in segments:
        if isinstance(segment, IndexSegment):
            rendered += WILDCARD_INDEX if segment.is_wildcard else f"[{segment.position}]"
        elif rendered:
            rendered += f"{SEPARATOR}{segment.name}"
        else:
            rendered = segment.name
    return rendered


def join_pattern(prefix: str, suffix: str) -> str:
    """Join two path fragments, omitting the separator before a bracket."""
    if not prefix:
        return suffix
    if not suffix:
        return prefix
    if suffix.startswith("["):
        return f"{prefix}{suffix}"
    return f"{prefix}{SEPARATOR}{suffix}"


def substitute_wildcards(pattern: str, *, index: int = 0, key: str = "key") -> str:
    """Replace wildcard indices and keys in ``pattern`` with literal values."""
    if index < 0:
        raise ValueError("Substituted index must be non-negative.")
    if not key or SEPARATOR in key or "[" in key or "]" in key:
        raise ValueError(f"Substituted key '{key}' is not a single path segment.")
    substituted: list[Segment] = []
    for segment in parse_path(pattern):
        if isinstance(segment, IndexSegment) and segment.is_wildcard:
            substituted.append(IndexSegment(index))
        elif isinstance(segment, KeySegment) and segment.name == WILDCARD_KEY:
            substituted.append(KeySegment(key))
        else:
            substituted.append(segment)
    return format_path(substituted)
