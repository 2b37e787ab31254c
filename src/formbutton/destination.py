"""Destination validation for form buttons.

A destination must be a non-empty string, a parsed URL, a route
reference, or a ``(scheme, rest)`` tuple. Strings are accepted when they
are paths, use a well-known scheme, or carry no scheme at all; anything
else (``javascript:``, ``data:``) is rejected so a button cannot be
pointed at script by accident. Unusual schemes must be spelled out
explicitly with a tuple::

    validate_destination(("javascript", "void(0)"), "<Button />")
"""

from typing import Any
from urllib.parse import ParseResult, SplitResult

from formbutton.errors import InvalidDestinationError
from formbutton.routing.route import RouteRef
from formbutton.routing.table import Resolver

VALID_URI_SCHEMES: tuple[str, ...] = (
    "http:",
    "https:",
    "ftp:",
    "ftps:",
    "mailto:",
    "news:",
    "irc:",
    "gopher:",
    "nntp:",
    "feed:",
    "telnet:",
    "mms:",
    "rtsp:",
    "svn:",
    "tel:",
    "fax:",
    "xmpp:",
)


def is_same_origin_path(url: str) -> bool:
    """Check whether *url* is a relative path on the same origin.

    - Must be a non-empty string
    - Must start with ``/``
    - Must **not** start with ``//`` (protocol-relative URL)
    - Must **not** contain ``://`` (absolute URL with scheme)

    Examples::

        >>> is_same_origin_path("/users/1")
        True
        >>> is_same_origin_path("//evil.com")
        False
        >>> is_same_origin_path("https://evil.com")
        False
    """
    if not url or not isinstance(url, str):
        return False
    if not url.startswith("/"):
        return False
    if url.startswith("//"):
        return False
    return "://" not in url


def _invalid(context_label: str, value: Any, reason: str = "a non-empty string") -> InvalidDestinationError:
    return InvalidDestinationError(f"Expected {context_label} destination to be {reason}, got {value!r}")


def _validate_string(to: str, context_label: str) -> str:
    if not to.strip():
        raise _invalid(context_label, to)
    if to.lower().startswith(VALID_URI_SCHEMES):
        return to
    if not to.startswith("/") and ":" in to:
        msg = (
            f"Unsupported scheme given to {context_label}: {to!r}. "
            "To link to an unknown or unsafe scheme such as javascript, "
            'pass a tuple: ("javascript", "rest")'
        )
        raise InvalidDestinationError(msg)
    return to


def validate_destination(
    destination: Any,
    context_label: str,
    *,
    resolver: Resolver | None = None,
    strict: bool = False,
) -> str:
    """Validate *destination* and normalize it to a string token.

    Args:
        destination: A path/URL string, ``SplitResult``/``ParseResult``,
            ``RouteRef``, or ``(scheme, rest)`` tuple.
        context_label: Names the calling construct in error messages.
        resolver: Resolves ``RouteRef`` destinations (usually a ``RouteTable``).
        strict: Only accept same-origin relative paths.

    Raises:
        InvalidDestinationError: If the destination is empty, unresolvable,
            or not allowed.
    """
    if isinstance(destination, RouteRef):
        if resolver is None:
            msg = f"{context_label} got route reference {destination.name!r} but no resolver to resolve it"
            raise InvalidDestinationError(msg)
        to = resolver.url_for(destination.name, **destination.params)
        if not isinstance(to, str):
            raise _invalid(context_label, to)
        to = _validate_string(to, context_label)
    elif isinstance(destination, (SplitResult, ParseResult)):
        to = _validate_string(destination.geturl(), context_label)
    elif isinstance(destination, tuple):
        if len(destination) != 2 or not all(isinstance(p, str) and p for p in destination):
            raise _invalid(context_label, destination, "a (scheme, rest) tuple of non-empty strings")
        scheme, rest = destination
        to = f"{scheme}:{rest}"
    elif isinstance(destination, str):
        to = _validate_string(destination, context_label)
    else:
        raise _invalid(context_label, destination)

    if strict and not is_same_origin_path(to):
        raise _invalid(context_label, to, "a same-origin relative path")
    return to
