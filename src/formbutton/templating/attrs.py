"""Attribute flattening and rendering.

Nested mappings become prefixed attribute names, one attribute per leaf,
in traversal order::

    opts_to_attrs({"data": {"method": "delete", "to": "/users/1"}, "class": "danger"})
    # [("data-method", "delete"), ("data-to", "/users/1"), ("class", "danger")]

Keys are emitted verbatim, so ``csrf_token`` renders as ``data-csrf_token``.
"""

import html
from collections.abc import Iterable, Mapping
from typing import Any

from kida.template import Markup


def opts_to_attrs(options: Mapping[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    """Flatten *options* into ``(name, value)`` pairs."""
    pairs: list[tuple[str, Any]] = []
    for key, value in options.items():
        name = f"{prefix}-{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            pairs.extend(opts_to_attrs(value, name))
        else:
            pairs.append((name, value))
    return pairs


def _attr_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value if v)
    return str(value)


def render_attrs(pairs: Iterable[tuple[str, Any]]) -> Markup:
    """Render attribute pairs as a leading-space attribute string.

    ``True`` renders a bare boolean attribute; ``False`` and ``None`` are
    omitted. Names and values are HTML-escaped.

    Example:
        <button{{ pairs | button_attrs }}>
        → <button data-method="delete" disabled>
    """
    parts: list[str] = []
    for name, value in pairs:
        if value is None or value is False:
            continue
        escaped_name = html.escape(name, quote=True)
        if value is True:
            parts.append(f" {escaped_name}")
            continue
        parts.append(f' {escaped_name}="{html.escape(_attr_value(value), quote=True)}"')
    return Markup("".join(parts))
