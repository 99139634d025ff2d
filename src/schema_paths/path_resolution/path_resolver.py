"""Schema-directed path resolution service."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Generator, Mapping, Sequence

from schema_paths.path_grammar import SEPARATOR, is_well_formed
from schema_paths.schema_model import (
    Array,
    Dictionary,
    Field,
    Object,
    Optional,
    Schema,
    SchemaGraph,
    Tuple,
    Union,
    as_schema_graph,
    describe_schema,
)
from schema_paths.traversal import (
    DEFAULT_DICTIONARY_DESCENTS,
    PRECEDENCE_ORDER,
    ResolutionRule,
    is_bare_key,
    prefix_candidates,
    split_head,
)

from .resolution_outcomes import (
    UNRESOLVABLE,
    ResolutionReport,
    RuleAttempt,
    Unresolvable,
    merge_outcomes,
)

_LOGGER = logging.getLogger(__name__)

_LEADING_INDEX = re.compile(r"\[(\d+|\*)\]")

Outcome = Schema | Unresolvable
_Request = tuple[Schema, str, int]
_StateKey = tuple[int, str, int]
_Evaluation = Generator[_Request, Outcome, Outcome]
# A rule returns None when it does not apply to the node and key at all.
_RuleEvaluation = Generator[_Request, Outcome, Outcome | None]
_RuleHandler = Callable[[Schema, str, int], _RuleEvaluation]


def resolve(
    schema: Schema | SchemaGraph,
    path: str | int,
    *,
    dictionary_descents: int = DEFAULT_DICTIONARY_DESCENTS,
) -> Schema | Unresolvable:
    """Return the shape reachable at ``path`` or ``UNRESOLVABLE``.

    Malformed paths are unresolvable rather than errors. Integer paths address
    numeric property keys.
    """
    return _resolve_path(schema, path, dictionary_descents, attempts=None)


def explain(
    schema: Schema | SchemaGraph,
    path: str | int,
    *,
    dictionary_descents: int = DEFAULT_DICTIONARY_DESCENTS,
) -> ResolutionReport:
    """Resolve ``path`` and report every interpretation that was tried.

    A remainder already evaluated at the same node is reported once.
    """
    attempts: list[RuleAttempt] = []
    shape = _resolve_path(schema, path, dictionary_descents, attempts=attempts)
    return ResolutionReport(path=_path_text(path), shape=shape, attempts=tuple(attempts))


def is_valid_path(
    schema: Schema | SchemaGraph,
    path: str | int,
    *,
    dictionary_descents: int = DEFAULT_DICTIONARY_DESCENTS,
) -> bool:
    """Return True when ``path`` resolves to a shape."""
    outcome = resolve(schema, path, dictionary_descents=dictionary_descents)
    return not isinstance(outcome, Unresolvable)


def _resolve_path(
    schema: Schema | SchemaGraph,
    path: str | int,
    dictionary_descents: int,
    *,
    attempts: list[RuleAttempt] | None,
) -> Outcome:
    graph = as_schema_graph(schema)
    key = _path_text(path)
    if not is_well_formed(key):
        _LOGGER.debug("Path '%s' is malformed.", key)
        return UNRESOLVABLE
    outcome = _PathResolver(graph, attempts).resolve(graph.root, key, dictionary_descents)
    if isinstance(outcome, Unresolvable):
        _LOGGER.debug("Path '%s' does not resolve.", key)
    return outcome


def _path_text(path: str | int) -> str:
    if isinstance(path, bool) or not isinstance(path, str | int):
        raise TypeError(f"Path must be a string or integer, not {type(path).__name__}.")
    return str(path)


class _PathResolver:
    """Applies the precedence rules to one path against one graph.

    Rule handlers are generators: each ``yield`` asks for the outcome of
    resolving a remainder at another node, which ``resolve`` computes on an
    explicit stack and sends back. Outcomes are cached per
    ``(node, remainder, descents)`` so overlapping readings are evaluated once.
    """

    def __init__(self, graph: SchemaGraph, attempts: list[RuleAttempt] | None) -> None:
        self._graph = graph
        self._attempts = attempts
        self._outcomes: dict[_StateKey, Outcome] = {}
        handlers: Mapping[ResolutionRule, _RuleHandler] = {
            ResolutionRule.EXPLICIT_KEY: self._explicit_key,
            ResolutionRule.INDEX_SIGNATURE_KEY: self._index_signature_key,
            ResolutionRule.NESTED_EXPLICIT_KEY: self._nested_explicit_key,
            ResolutionRule.INDEXING: self._indexing,
            ResolutionRule.DICTIONARY_DESCENT: self._dictionary_descent,
            ResolutionRule.OPTIONAL_CHAIN: self._optional_chain,
        }
        self._rules = tuple((rule, handlers[rule]) for rule in PRECEDENCE_ORDER)

    def resolve(self, node: Schema, key: str, descents: int) -> Outcome:
        stack = [(_state_key(node, key, descents), self._evaluate(node, key, descents))]
        sent: Outcome | None = None
        while True:
            state, evaluation = stack[-1]
            try:
                request = next(evaluation) if sent is None else evaluation.send(sent)
            except StopIteration as finished:
                stack.pop()
                outcome: Outcome = finished.value
                self._outcomes[state] = outcome
                if not stack:
                    return outcome
                sent = outcome
                continue
            requested = _state_key(*request)
            if requested in self._outcomes:
                sent = self._outcomes[requested]
                continue
            stack.append((requested, self._evaluate(*request)))
            sent = None

    def _evaluate(self, node: Schema, key: str, descents: int) -> _Evaluation:
        node = self._graph.dereference(node)
        if isinstance(node, Optional):
            return (yield (node.inner, key, descents))
        if isinstance(node, Union):
            outcomes: list[Outcome] = []
            for variant in node.variants:
                outcomes.append((yield (variant, key, descents)))
            return merge_outcomes(outcomes)
        for rule, handler in self._rules:
            outcome = yield from handler(node, key, descents)
            if outcome is None:
                continue
            self._record(rule, node, key, outcome)
            if not isinstance(outcome, Unresolvable):
                return outcome
        return UNRESOLVABLE

    def _explicit_key(self, node: Schema, key: str, descents: int) -> _RuleEvaluation:
        declared = _members(node).get(key)
        if declared is None:
            return None
        return (yield from self._continue(declared.schema, "", descents))

    def _index_signature_key(self, node: Schema, key: str, descents: int) -> _RuleEvaluation:
        if not isinstance(node, Dictionary) or not is_bare_key(key):
            return None
        return (yield from self._continue(node.value, "", descents))

    def _nested_explicit_key(self, node: Schema, key: str, descents: int) -> _RuleEvaluation:
        required = {
            name: member for name, member in _members(node).items() if not _is_optional(member)
        }
        candidates = prefix_candidates(required, key, SEPARATOR)
        if not candidates:
            return None
        return (
            yield from self._first_resolved(
                [(required[name].schema, key[len(name) :]) for name in candidates],
                descents,
            )
        )

    def _indexing(self, node: Schema, key: str, descents: int) -> _RuleEvaluation:
        if key.startswith("["):
            if not isinstance(node, Array | Tuple):
                return None
            return (yield from self._index_into(node, key, descents))
        members = _members(node)
        candidates = prefix_candidates(members, key, "[")
        if not candidates:
            return None
        return (
            yield from self._first_resolved(
                [(members[name].schema, key[len(name) :]) for name in candidates],
                descents,
            )
        )

    def _dictionary_descent(self, node: Schema, key: str, descents: int) -> _RuleEvaluation:
        if not isinstance(node, Dictionary) or is_bare_key(key):
            return None
        head, rest = split_head(key)
        if not head:
            return None
        if descents <= 0:
            return UNRESOLVABLE
        return (yield from self._continue(node.value, rest, descents - 1))

    def _optional_chain(self, node: Schema, key: str, descents: int) -> _RuleEvaluation:
        optional = {
            name: member for name, member in _members(node).items() if _is_optional(member)
        }
        candidates = prefix_candidates(optional, key, SEPARATOR)
        if not candidates:
            return None
        return (
            yield from self._first_resolved(
                [
                    (_unwrap_optional(optional[name].schema), key[len(name) :])
                    for name in candidates
                ],
                descents,
            )
        )

    def _index_into(self, node: Array | Tuple, key: str, descents: int) -> _Evaluation:
        match = _LEADING_INDEX.match(key)
        if match is None:
            return UNRESOLVABLE
        rest = key[match.end() :]
        outcomes: list[Outcome] = []
        for element in _indexed_elements(node, match.group(1)):
            outcomes.append((yield from self._continue(element, rest, descents)))
        return merge_outcomes(outcomes)

    def _continue(self, node: Schema, rest: str, descents: int) -> _Evaluation:
        if not rest:
            return self._shape(node)
        if rest.startswith(SEPARATOR):
            rest = rest[len(SEPARATOR) :]
        elif not rest.startswith("["):
            return UNRESOLVABLE
        return (yield (node, rest, descents))

    def _first_resolved(
        self, candidates: Sequence[tuple[Schema, str]], descents: int
    ) -> _Evaluation:
        for candidate_node, remainder in candidates:
            outcome = yield from self._continue(candidate_node, remainder, descents)
            if not isinstance(outcome, Unresolvable):
                return outcome
        return UNRESOLVABLE

    def _shape(self, node: Schema) -> Schema:
        node = self._graph.dereference(node)
        while isinstance(node, Optional):
            node = self._graph.dereference(node.inner)
        return node

    def _record(self, rule: ResolutionRule, node: Schema, key: str, outcome: Outcome) -> None:
        if self._attempts is None:
            return
        self._attempts.append(
            RuleAttempt(
                rule=rule,
                key=key,
                node=describe_schema(node),
                resolved=not isinstance(outcome, Unresolvable),
            )
        )


def _state_key(node: Schema, key: str, descents: int) -> _StateKey:
    # Nodes are owned by the graph for the resolver's lifetime, so identity is stable.
    return (id(node), key, descents)


def _members(node: Schema) -> dict[str, Field]:
    if isinstance(node, Object):
        return {declared.name: declared for declared in node.fields}
    if isinstance(node, Tuple):
        return {
            str(position): Field(str(position), element)
            for position, element in enumerate(node.elements)
        }
    return {}


def _is_optional(member: Field) -> bool:
    return member.optional or isinstance(member.schema, Optional)


def _unwrap_optional(schema: Schema) -> Schema:
    return schema.inner if isinstance(schema, Optional) else schema


def _indexed_elements(node: Array | Tuple, index_text: str) -> tuple[Schema, ...]:
    if isinstance(node, Array):
        return (node.element,)
    if index_text == "*":
        return node.elements
    position = int(index_text)
    if position >= len(node.elements):
        return ()
    return (node.elements[position],)
