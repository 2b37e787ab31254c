"""Safe-action attribute synthesis.

Given a validated destination, a method, and the caller's options, build
the ordered attribute mapping that turns a ``<button>`` into a pseudo-form
submission::

    synthesize("/users/1", Method.DELETE, {"class": "danger", "data": {"confirm": "Sure?"}})
    # {
    #     "data": {"method": "delete", "to": "/users/1",
    #              "csrf_token": "...", "confirm": "Sure?"},
    #     "class": "danger",
    # }

Precedence, from strongest to weakest:

1. The synthesizer's own ``data`` entries (``method``, ``to``, CSRF key).
2. Caller ``data`` entries, in caller order.
3. Caller top-level options, in caller order, after ``data``.
4. Event attributes, merged last by ``merge_events``.

GET never carries CSRF data: any CSRF option is stripped, whatever its value.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from formbutton.csrf import CSRFTokenProvider, default_provider
from formbutton.methods import Method

type Options = Mapping[str, Any] | Iterable[tuple[str, Any]]


def to_ordered(options: Options | None) -> dict[str, Any]:
    """Copy a mapping or an iterable of ``(key, value)`` pairs into a dict."""
    if options is None:
        return {}
    return dict(options)


def _split_data(options: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Separate the caller's ``data`` group from the remaining top-level options."""
    rest = dict(options)
    data = to_ordered(rest.pop("data", None))
    return data, rest


def skip_csrf(options: Options | None, csrf_key: str = "csrf_token") -> dict[str, Any]:
    """Return a copy of *options* without any CSRF key, top-level or under ``data``."""
    opts = to_ordered(options)
    opts.pop(csrf_key, None)
    if "data" in opts:
        data = to_ordered(opts["data"])
        data.pop(csrf_key, None)
        opts["data"] = data
    return opts


def csrf_data(
    destination: str,
    options: Options | None,
    *,
    csrf: CSRFTokenProvider | None = None,
    csrf_key: str = "csrf_token",
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Pop the CSRF option and compute the CSRF data entries.

    Returns ``(csrf_entries, remaining_options)``:

    - ``False`` disables CSRF: no entries.
    - ``None``, ``True``, or absent: ask the provider for a token.
    - Any other value is used as the token.
    """
    opts = to_ordered(options)
    value = opts.pop(csrf_key, None)
    if value is False:
        return {}, opts
    if value is None or value is True:
        provider = csrf if csrf is not None else default_provider
        value = provider.token_for(destination)
    return {csrf_key: value}, opts


def _merge(owned: dict[str, Any], options: dict[str, Any], reserved: Iterable[str]) -> dict[str, Any]:
    caller_data, rest = _split_data(options)
    data = dict(owned)
    for key, value in caller_data.items():
        if key in data or key in reserved:
            continue
        data[key] = value
    return {"data": data, **rest}


def synthesize(
    destination: str,
    method: Method,
    options: Options | None = None,
    *,
    csrf: CSRFTokenProvider | None = None,
    csrf_key: str = "csrf_token",
) -> dict[str, Any]:
    """Build the ordered attribute mapping for a form button.

    *destination* must already be validated and *method* normalized.
    """
    # The CSRF key is reserved under data even when the caller disabled it
    reserved = ("method", "to", csrf_key)
    if method is Method.GET:
        opts = skip_csrf(options, csrf_key)
        return _merge({"method": method.value, "to": destination}, opts, reserved)

    csrf_entries, opts = csrf_data(destination, options, csrf=csrf, csrf_key=csrf_key)
    owned = {"method": method.value, "to": destination, **csrf_entries}
    return _merge(owned, opts, reserved)


def merge_events(attributes: Mapping[str, Any], event_attrs: Mapping[str, Any]) -> dict[str, Any]:
    """Append *event_attrs* after *attributes*.

    Event attributes replace caller duplicates but never the synthesized
    ``data`` group.
    """
    merged = dict(attributes)
    for key, value in event_attrs.items():
        if key == "data":
            continue
        merged.pop(key, None)
        merged[key] = value
    return merged
