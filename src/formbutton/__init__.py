"""formbutton — buttons that submit through a form, not a link.

State-changing actions (delete, update) rendered as ``<button>`` elements
whose ``data-*`` attributes describe a form submission with method
override and CSRF token, so crawlers and prefetchers cannot trigger them.

Basic usage::

    from formbutton import button, csrf_scope

    with csrf_scope(token):
        html = button("Delete", to="/users/1", method="delete", class_="is-danger")

In kida templates::

    from formbutton import create_environment

    env = create_environment()
    env.from_string('{{ button("Delete", to=url, method="delete") }}{{ method_shim() }}')
"""

__version__ = "0.1.0"
__all__ = [
    "Button",
    "ButtonConfig",
    "ConfigurationError",
    "ContextTokenProvider",
    "Events",
    "FormButtonError",
    "InvalidDestinationError",
    "InvalidMethodError",
    "Method",
    "MissingLabelError",
    "RouteRef",
    "RouteTable",
    "StaticTokenProvider",
    "button",
    "create_environment",
    "csrf_scope",
    "get_csrf_token",
    "method_shim_snippet",
    "synthesize",
    "validate_destination",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "Button": "formbutton.button",
    "button": "formbutton.button",
    "ButtonConfig": "formbutton.config",
    "ConfigurationError": "formbutton.errors",
    "FormButtonError": "formbutton.errors",
    "InvalidDestinationError": "formbutton.errors",
    "InvalidMethodError": "formbutton.errors",
    "MissingLabelError": "formbutton.errors",
    "ContextTokenProvider": "formbutton.csrf",
    "StaticTokenProvider": "formbutton.csrf",
    "csrf_scope": "formbutton.csrf",
    "get_csrf_token": "formbutton.csrf",
    "Events": "formbutton.events",
    "Method": "formbutton.methods",
    "RouteRef": "formbutton.routing.route",
    "RouteTable": "formbutton.routing.table",
    "synthesize": "formbutton.synthesis",
    "validate_destination": "formbutton.destination",
    "create_environment": "formbutton.templating.integration",
    "method_shim_snippet": "formbutton.templating.method_shim",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formbutton`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
