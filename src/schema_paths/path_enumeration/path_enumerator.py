"""Path pattern enumeration service."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from schema_paths.path_grammar import WILDCARD_INDEX, WILDCARD_KEY, join_pattern
from schema_paths.schema_model import (
    Array,
    Dictionary,
    Object,
    Optional,
    Reference,
    Schema,
    SchemaGraph,
    Terminal,
    Tuple,
    Union,
    as_schema_graph,
)
from schema_paths.traversal import (
    DEFAULT_DICTIONARY_DESCENTS,
    DEFAULT_MAX_DEPTH,
    DepthBudget,
    is_addressable_name,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _EnumerationContext:
    """Read-only traversal position for one schema node."""

    budget: DepthBudget
    dictionary_descents: int
    # Reference name -> budget remaining when that reference was last entered.
    active_references: Mapping[str, int]


def enumerate_paths(
    schema: Schema | SchemaGraph,
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    dictionary_descents: int = DEFAULT_DICTIONARY_DESCENTS,
) -> frozenset[str]:
    """Return every valid path pattern for ``schema``.

    Bracket positions of arrays appear as ``[*]`` and dictionary keys as ``*``;
    tuple slots keep their literal position. Branches deeper than ``max_depth``
    object or dictionary levels are silently left out.
    """
    return frozenset(
        iter_paths(schema, max_depth, dictionary_descents=dictionary_descents)
    )


def iter_paths(
    schema: Schema | SchemaGraph,
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    dictionary_descents: int = DEFAULT_DICTIONARY_DESCENTS,
) -> Iterator[str]:
    """Lazily yield each path pattern for ``schema`` exactly once.

    Raises:
      ValueError: If ``max_depth`` or ``dictionary_descents`` is negative.
      SchemaDefinitionError: If a bare ``schema`` holds dangling references.
    """
    if isinstance(dictionary_descents, bool) or not isinstance(dictionary_descents, int):
        raise ValueError("dictionary_descents must be an integer.")
    if dictionary_descents < 0:
        raise ValueError("dictionary_descents must not be negative.")
    graph = as_schema_graph(schema)
    context = _EnumerationContext(
        budget=DepthBudget.start(max_depth),
        dictionary_descents=dictionary_descents,
        active_references={},
    )
    seen: set[str] = set()
    for pattern in _walk(graph, graph.root, context):
        if pattern in seen:
            continue
        seen.add(pattern)
        yield pattern


def _walk(graph: SchemaGraph, node: Schema, context: _EnumerationContext) -> Iterator[str]:
    if isinstance(node, Terminal):
        return
    if isinstance(node, Reference):
        yield from _walk_reference(graph, node, context)
    elif isinstance(node, Optional):
        yield from _walk(graph, node.inner, context)
    elif isinstance(node, Union):
        for variant in node.variants:
            yield from _walk(graph, variant, context)
    elif isinstance(node, Object):
        yield from _walk_object(graph, node, context)
    elif isinstance(node, Array):
        yield from _prefixed(WILDCARD_INDEX, graph, node.element, context)
    elif isinstance(node, Tuple):
        # Literal slot positions: a wildcard would let substitution name a slot past the end.
        for position, element in enumerate(node.elements):
            yield from _prefixed(f"[{position}]", graph, element, context)
    elif isinstance(node, Dictionary):
        yield from _walk_dictionary(graph, node, context)


def _walk_reference(
    graph: SchemaGraph, node: Reference, context: _EnumerationContext
) -> Iterator[str]:
    entered_with = context.active_references.get(node.name)
    if entered_with is not None and (
        context.budget.exhausted or entered_with == context.budget.remaining
    ):
        _LOGGER.debug(
            "Stopped enumerating reference '%s' at remaining depth %d.",
            node.name,
            context.budget.remaining,
        )
        return
    entered = _EnumerationContext(
        budget=context.budget,
        dictionary_descents=context.dictionary_descents,
        active_references={**context.active_references, node.name: context.budget.remaining},
    )
    yield from _walk(graph, graph.definitions[node.name], entered)


def _walk_object(graph: SchemaGraph, node: Object, context: _EnumerationContext) -> Iterator[str]:
    if context.budget.exhausted:
        _LOGGER.debug("Depth budget exhausted; truncating %d field(s).", len(node.fields))
        return
    child_context = _descend(context, consume_dictionary=False)
    for declared in node.fields:
        if not is_addressable_name(declared.name):
            _LOGGER.debug("Skipping field '%s' that path text cannot address.", declared.name)
            continue
        yield from _prefixed(declared.name, graph, declared.schema, child_context)


def _walk_dictionary(
    graph: SchemaGraph, node: Dictionary, context: _EnumerationContext
) -> Iterator[str]:
    yield WILDCARD_KEY
    if context.budget.exhausted or context.dictionary_descents <= 0:
        return
    child_context = _descend(context, consume_dictionary=True)
    for suffix in _walk(graph, node.value, child_context):
        yield join_pattern(WILDCARD_KEY, suffix)


def _prefixed(
    prefix: str, graph: SchemaGraph, node: Schema, context: _EnumerationContext
) -> Iterator[str]:
    yield prefix
    for suffix in _walk(graph, node, context):
        yield join_pattern(prefix, suffix)


def _descend(context: _EnumerationContext, *, consume_dictionary: bool) -> _EnumerationContext:
    return _EnumerationContext(
        budget=context.budget.descend(),
        dictionary_descents=context.dictionary_descents - (1 if consume_dictionary else 0),
        active_references=context.active_references,
    )
