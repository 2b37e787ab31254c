"""CSRF token provider — request-scoped, ContextVar-backed.

The synthesizer asks a provider for a token whenever a button submits
with an unsafe method (POST, PUT, PATCH, DELETE). The default provider
reads the token for the current request from a ContextVar populated by
``csrf_scope()``; the server side (session + validation) stays with the
application's CSRF middleware.

Usage::

    from formbutton.csrf import csrf_scope

    with csrf_scope(session["_csrf_token"]):
        html = button("Delete", to="/users/1", method="delete")

Destinations on foreign hosts never receive the session token itself:
``ContextTokenProvider`` hands them a token bound to the target host.
"""

import hashlib
import hmac
import logging
import secrets
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol
from urllib.parse import urlsplit

from formbutton.config import DEFAULT_CONFIG, ButtonConfig

_log = logging.getLogger("formbutton.csrf")

# -- CSRF token ContextVar (one per request) --

_csrf_token_var: ContextVar[str | None] = ContextVar("formbutton_csrf_token", default=None)


class CSRFTokenProvider(Protocol):
    """Returns the CSRF token to embed for a given destination."""

    def token_for(self, destination: str) -> str: ...


def get_csrf_token() -> str:
    """Return the current CSRF token.

    Raises ``LookupError`` if called outside a ``csrf_scope()``.
    """
    token = _csrf_token_var.get()
    if token is None:
        msg = (
            "No CSRF token available. Wrap rendering in csrf_scope() "
            "or pass an explicit csrf provider."
        )
        raise LookupError(msg)
    return token


def generate_token(length: int = 32) -> str:
    """Generate a random hex token of *length* bytes."""
    return secrets.token_hex(length)


@contextmanager
def csrf_scope(
    token: str | None = None, *, config: ButtonConfig = DEFAULT_CONFIG
) -> Iterator[str]:
    """Make *token* the current CSRF token for the duration of the block.

    A fresh token of ``config.token_length`` bytes is generated when
    *token* is ``None``. The previous value is restored on exit, so
    scopes nest.
    """
    if token is None:
        token = generate_token(config.token_length)
    cv_token = _csrf_token_var.set(token)
    try:
        yield token
    finally:
        _csrf_token_var.reset(cv_token)


def _host_of(destination: str) -> str | None:
    """Return the lower-cased host of an absolute destination, else None."""
    if destination.startswith("/") and not destination.startswith("//"):
        return None
    host = urlsplit(destination).hostname
    return host.lower() if host else None


class ContextTokenProvider:
    """Token provider backed by the current ``csrf_scope()``.

    Relative destinations and destinations on *trusted_hosts* receive the
    scoped token. Other hosts receive ``HMAC-SHA256(token, host)`` so the
    session token is never sent to a foreign origin.
    """

    __slots__ = ("_trusted_hosts",)

    def __init__(self, trusted_hosts: frozenset[str] = frozenset()) -> None:
        self._trusted_hosts = frozenset(h.lower() for h in trusted_hosts)

    def token_for(self, destination: str) -> str:
        token = get_csrf_token()
        host = _host_of(destination)
        if host is None or host in self._trusted_hosts:
            return token
        _log.debug("Issuing host-bound CSRF token for %s", host)
        return hmac.new(token.encode(), host.encode(), hashlib.sha256).hexdigest()


class StaticTokenProvider:
    """Token provider that always returns the same token."""

    __slots__ = ("_token",)

    def __init__(self, token: str) -> None:
        self._token = token

    def token_for(self, destination: str) -> str:
        return self._token


default_provider = ContextTokenProvider()
