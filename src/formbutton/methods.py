"""HTTP methods a form button can submit with.

Native HTML forms only speak GET and POST; every other verb is carried as
a method override alongside a POST. ``get`` is the only safe member and
never carries CSRF data.
"""

from enum import StrEnum

from formbutton.errors import InvalidMethodError


class Method(StrEnum):
    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"

    @property
    def is_safe(self) -> bool:
        return self in SAFE_METHODS


SAFE_METHODS: frozenset[Method] = frozenset({Method.GET})


def normalize_method(value: str | Method) -> Method:
    """Canonicalize *value* to a ``Method``.

    Comparison is case-insensitive and ignores surrounding whitespace::

        >>> normalize_method("DELETE")
        <Method.DELETE: 'delete'>

    Raises ``InvalidMethodError`` for anything outside the enumerated set.
    """
    if isinstance(value, Method):
        return value
    if not isinstance(value, str):
        msg = f"Expected the method to be a string, got {value!r}"
        raise InvalidMethodError(msg)
    try:
        return Method(value.strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in Method)
        msg = f"Unsupported method {value!r}. Allowed methods: {allowed}"
        raise InvalidMethodError(msg) from None
