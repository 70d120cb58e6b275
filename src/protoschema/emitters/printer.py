"""Indented JSON-style printer for the Avro schema structure.

Keys are written in insertion order and strings are quoted as-is, without
escaping, so the output mirrors the schema tree exactly.
"""

from typing import Any, Mapping, Sequence

INDENT = "  "


def render(value: Any) -> str:
    """Render a tree of mappings, sequences and scalars as indented text.

    Args:
        value: Mapping, sequence, string, bool, number or None

    Returns:
        The rendered text
    """
    parts: list[str] = []
    _render(value, parts, 0)
    return "".join(parts)


def _render(value: Any, parts: list[str], depth: int) -> None:
    pad = INDENT * depth

    if isinstance(value, str):
        parts.append(f'"{value}"')
    elif isinstance(value, bool):
        parts.append("true" if value else "false")
    elif value is None:
        parts.append("null")
    elif isinstance(value, (int, float)):
        parts.append(str(value))
    elif isinstance(value, Mapping):
        if not value:
            parts.append("{}")
            return
        parts.append("{\n")
        items = list(value.items())
        for i, (key, item) in enumerate(items):
            parts.append(f'{pad}{INDENT}"{key}": ')
            _render(item, parts, depth + 1)
            parts.append(",\n" if i < len(items) - 1 else "\n")
        parts.append(f"{pad}}}")
    elif isinstance(value, Sequence):
        if not value:
            parts.append("[]")
            return
        parts.append("[\n")
        for i, item in enumerate(value):
            parts.append(f"{pad}{INDENT}")
            _render(item, parts, depth + 1)
            parts.append(",\n" if i < len(value) - 1 else "\n")
        parts.append(f"{pad}]")
    else:
        raise TypeError(f"Cannot render value of type {type(value).__name__}")
