"""Built-in formbutton template filters and globals.

Registered automatically by ``create_environment``; register them on an
existing kida Environment with ``register(env)``.
"""

from collections.abc import Mapping
from functools import partial
from typing import Any

from kida.template import Markup

from formbutton.button import button
from formbutton.config import DEFAULT_CONFIG, ButtonConfig
from formbutton.templating.attrs import opts_to_attrs, render_attrs
from formbutton.templating.method_shim import method_shim_snippet


def button_attrs(value: Mapping[str, Any] | None) -> Markup:
    """Flatten and render an attribute mapping.

    Nested groups become prefixed attributes:

        <button{{ {"data": {"method": "delete"}, "class": "x"} | button_attrs }}>
        → <button data-method="delete" class="x">

    """
    if not value:
        return Markup("")
    return render_attrs(opts_to_attrs(value))


BUILTIN_GLOBALS: dict[str, Any] = {
    "button": button,
    "method_shim": method_shim_snippet,
}


def bound_globals(config: ButtonConfig = DEFAULT_CONFIG) -> dict[str, Any]:
    """Return ``BUILTIN_GLOBALS`` with each helper bound to *config*."""
    return {
        "button": partial(button, config=config),
        "method_shim": partial(method_shim_snippet, config),
    }



BUILTIN_FILTERS: dict[str, Any] = {
    "button_attrs": button_attrs,
}
