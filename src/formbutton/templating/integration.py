"""Kida environment setup.

Creates a kida Environment from a ``ButtonConfig`` with the formbutton
filters and globals registered, or adds them to an existing one. The
``button`` and ``method_shim`` globals are bound to that config.
"""

from collections.abc import Callable
from typing import Any

from kida import Environment

from formbutton.config import DEFAULT_CONFIG, ButtonConfig
from formbutton.templating.filters import BUILTIN_FILTERS, bound_globals


def register(
    env: Environment,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
    config: ButtonConfig = DEFAULT_CONFIG,
) -> Environment:
    """Register formbutton's filters and globals on *env*.

    User-supplied *filters* and *globals_* are registered afterwards and
    may override the built-ins.
    """
    env.update_filters(BUILTIN_FILTERS)
    if filters:
        env.update_filters(filters)

    for name, value in bound_globals(config).items():
        env.add_global(name, value)
    if globals_:
        for name, value in globals_.items():
            env.add_global(name, value)

    return env


def create_environment(
    config: ButtonConfig = DEFAULT_CONFIG,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
    loader: Any = None,
) -> Environment:
    """Create a kida Environment with formbutton registered.

    *loader* is passed through to kida (e.g. ``FileSystemLoader("templates")``).
    """
    if loader is None:
        env = Environment(autoescape=config.autoescape)
    else:
        env = Environment(loader=loader, autoescape=config.autoescape)
    return register(env, filters, globals_, config)
