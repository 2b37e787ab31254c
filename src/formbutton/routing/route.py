"""Route descriptors — frozen dataclasses."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class Route:
    """A named route: path template plus its parsed segments."""

    name: str
    path: str
    segments: tuple[PathSegment, ...]


@dataclass(frozen=True, slots=True)
class RouteRef:
    """A structured reference to a named route.

    Used as a button destination instead of a literal path::

        Button(RouteRef("user_detail", {"id": 1}), method="delete", label="Delete")

    Resolved to a string by a ``RouteTable`` (or anything with ``url_for``).
    """

    name: str
    params: dict[str, Any] = field(default_factory=dict, hash=False)
