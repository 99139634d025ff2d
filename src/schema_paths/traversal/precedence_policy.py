"""Interpretation rules shared by path enumeration and resolution.

A path segment can often be read more than one way: a declared key that
contains a dot versus a dotted nested path, a dictionary key versus a declared
property, an optional property chain versus a required one. Resolution tries
the readings in ``PRECEDENCE_ORDER``; enumeration only emits names that the
resolver can read back.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from schema_paths.path_grammar import SEPARATOR, WILDCARD_KEY

DEFAULT_DICTIONARY_DESCENTS = 1


class ResolutionRule(str, Enum):
    """Readings of a path segment, in priority order."""

    EXPLICIT_KEY = "explicit_key"
    INDEX_SIGNATURE_KEY = "index_signature_key"
    NESTED_EXPLICIT_KEY = "nested_explicit_key"
    INDEXING = "indexing"
    DICTIONARY_DESCENT = "dictionary_descent"
    OPTIONAL_CHAIN = "optional_chain"


PRECEDENCE_ORDER: tuple[ResolutionRule, ...] = tuple(ResolutionRule)


def is_addressable_name(name: str) -> bool:
    """Return True when a declared key can be written as path text.

    Every dot-separated part must be non-empty and must not be the wildcard
    key, otherwise the text either fails to parse or reads back as a pattern.
    """
    if not name or "[" in name or "]" in name:
        return False
    parts = name.split(SEPARATOR)
    return all(parts) and WILDCARD_KEY not in parts


def is_bare_key(key: str) -> bool:
    """Return True for a single key with no separator or bracket."""
    return bool(key) and SEPARATOR not in key and "[" not in key


def prefix_candidates(names: Iterable[str], key: str, delimiter: str) -> tuple[str, ...]:
    """Declared names that prefix ``key`` followed by ``delimiter``, longest first.

    Longest first makes a declared dotted key win over the nested reading of the
    same text.
    """
    matches = {name for name in names if name and key.startswith(f"{name}{delimiter}")}
    return tuple(sorted(matches, key=len, reverse=True))


def split_head(key: str) -> tuple[str, str]:
    """Split ``key`` at its first separator or bracket.

    The remainder keeps its leading delimiter so callers can tell the two apart.
    """
    for position, character in enumerate(key):
        if character in (SEPARATOR, "["):
            return key[:position], key[position:]
    return key, ""
