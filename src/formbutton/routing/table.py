"""Named route table used to resolve ``RouteRef`` destinations.

Routes are registered by name with a path template and turned back into
concrete paths by ``url_for``::

    routes = RouteTable()
    routes.add("user_detail", "/users/{id:int}")
    routes.url_for("user_detail", id=1)          # "/users/1"
    routes.url_for("user_detail", id=1, tab="x")  # "/users/1?tab=x"
"""

from typing import Any, Protocol
from urllib.parse import quote, urlencode

from formbutton.errors import InvalidDestinationError
from formbutton.routing.route import PathSegment, Route, RouteRef


class Resolver(Protocol):
    """Anything that can turn a route name and params into a path."""

    def url_for(self, name: str, /, **params: Any) -> str: ...


def parse_path(path: str) -> list[PathSegment]:
    """Split a route template into static and parameter segments.

    ``"/users/{id:int}/posts"`` yields ``users``, an ``int`` parameter named
    ``id``, and ``posts``. Parameters default to type ``str``; a ``path``
    parameter keeps its slashes when ``url_for`` fills it in.
    """
    segments: list[PathSegment] = []
    for part in filter(None, path.strip("/").split("/")):
        if not (part.startswith("{") and part.endswith("}")):
            segments.append(PathSegment(value=part))
            continue
        param_name, _, param_type = part[1:-1].partition(":")
        segments.append(
            PathSegment(
                value=part,
                is_param=True,
                param_name=param_name,
                param_type=param_type or "str",
            )
        )
    return segments


def _format_param(segment: PathSegment, value: Any) -> str:
    if segment.param_type == "int":
        if isinstance(value, bool) or not isinstance(value, int):
            try:
                value = int(value)
            except (TypeError, ValueError):
                msg = f"Route parameter {segment.param_name!r} expects an int, got {value!r}"
                raise InvalidDestinationError(msg) from None
        return str(value)
    # "path" params keep their slashes
    safe = "/" if segment.param_type == "path" else ""
    return quote(str(value), safe=safe)


class RouteTable:
    """Registry of named routes.

    Mutable while routes are being added; ``url_for`` is a pure lookup.
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}

    def add(self, name: str, path: str) -> Route:
        """Register *path* under *name*. Re-registering a name replaces it."""
        if not path.startswith("/"):
            msg = f"Route path must start with '/', got {path!r}"
            raise InvalidDestinationError(msg)
        route = Route(name=name, path=path, segments=tuple(parse_path(path)))
        self._routes[name] = route
        return route

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def url_for(self, name: str, /, **params: Any) -> str:
        """Build the path for route *name*.

        Path parameters are substituted; remaining parameters become the
        query string, omitting falsy values.
        """
        route = self._routes.get(name)
        if route is None:
            msg = f"No route named {name!r}"
            raise InvalidDestinationError(msg)

        remaining = dict(params)
        parts: list[str] = []
        for segment in route.segments:
            if not segment.is_param:
                parts.append(segment.value)
                continue
            if segment.param_name not in remaining:
                msg = f"Missing parameter {segment.param_name!r} for route {name!r}"
                raise InvalidDestinationError(msg)
            parts.append(_format_param(segment, remaining.pop(segment.param_name)))

        path = "/" + "/".join(parts)
        query = {k: str(v) for k, v in remaining.items() if v}
        if not query:
            return path
        return f"{path}?{urlencode(query, quote_via=quote)}"

    def resolve(self, ref: RouteRef) -> str:
        """Resolve a ``RouteRef`` against this table."""
        return self.url_for(ref.name, **ref.params)
