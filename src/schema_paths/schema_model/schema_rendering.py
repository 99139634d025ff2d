"""Human-readable shape rendering."""

from __future__ import annotations

import json
import re

from .schema_nodes import (
    Array,
    Dictionary,
    Object,
    Optional,
    Reference,
    Schema,
    Terminal,
    Tuple,
    Union,
)

_PLAIN_NAME = re.compile(r"^[A-Za-z_$][\w$]*$|^\d+$")


def describe_schema(schema: Schema) -> str:
    """Render ``schema`` in a compact, TypeScript-like notation.

    References render as their definition name, so cyclic graphs stay finite.
    """
    if isinstance(schema, Terminal):
        return schema.kind.value
    if isinstance(schema, Reference):
        return schema.name
    if isinstance(schema, Object):
        members = ", ".join(
            f"{_render_name(declared.name)}{'?' if declared.optional else ''}: "
            f"{describe_schema(declared.schema)}"
            for declared in schema.fields
        )
        return "{" + members + "}"
    if isinstance(schema, Dictionary):
        return f"Record<string, {describe_schema(schema.value)}>"
    if isinstance(schema, Array):
        return f"Array<{describe_schema(schema.element)}>"
    if isinstance(schema, Tuple):
        return "[" + ", ".join(describe_schema(element) for element in schema.elements) + "]"
    if isinstance(schema, Union):
        return " | ".join(describe_schema(variant) for variant in schema.variants) or "never"
    if isinstance(schema, Optional):
        return f"{describe_schema(schema.inner)} | undefined"
    raise TypeError(f"Unsupported schema node: {schema!r}")


def _render_name(name: str) -> str:
    if _PLAIN_NAME.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)
