"""Precedence policy tests."""

from __future__ import annotations

import pytest
from schema_paths.traversal import (
    PRECEDENCE_ORDER,
    ResolutionRule,
    is_addressable_name,
    is_bare_key,
    prefix_candidates,
    split_head,
)


def test_precedence_order_puts_explicit_keys_first() -> None:
    assert PRECEDENCE_ORDER == (
        ResolutionRule.EXPLICIT_KEY,
        ResolutionRule.INDEX_SIGNATURE_KEY,
        ResolutionRule.NESTED_EXPLICIT_KEY,
        ResolutionRule.INDEXING,
        ResolutionRule.DICTIONARY_DESCENT,
        ResolutionRule.OPTIONAL_CHAIN,
    )


def test_prefix_candidates_prefers_longest_declared_name() -> None:
    names = ("a", "a.b", "ab", "b")

    assert prefix_candidates(names, "a.b.c", ".") == ("a.b", "a")
    assert prefix_candidates(names, "ab[0]", "[") == ("ab",)
    assert prefix_candidates(names, "a", ".") == ()


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("name", True),
        ("a.b", True),
        ("0", True),
        ("x*", True),
        ("", False),
        ("*", False),
        ("a[0]", False),
        ("a.", False),
        (".d", False),
        ("b..c", False),
        ("x.*", False),
        ("*.x", False),
    ],
)
def test_is_addressable_name(name: str, expected: bool) -> None:
    assert is_addressable_name(name) is expected


def test_is_bare_key() -> None:
    assert is_bare_key("foo")
    assert not is_bare_key("foo.bar")
    assert not is_bare_key("foo[0]")
    assert not is_bare_key("")


def test_split_head_keeps_delimiter_on_remainder() -> None:
    assert split_head("foo.bar") == ("foo", ".bar")
    assert split_head("foo[0].bar") == ("foo", "[0].bar")
    assert split_head("foo") == ("foo", "")
