"""Routing — named routes and structured route references.

A ``RouteRef`` can be used anywhere a destination string is accepted::

    from formbutton.routing import RouteRef, RouteTable

    routes = RouteTable()
    routes.add("user_detail", "/users/{id:int}")

    Button(RouteRef("user_detail", {"id": 1}), resolver=routes, label="Delete")
"""

from formbutton.routing.route import PathSegment, Route, RouteRef
from formbutton.routing.table import Resolver, RouteTable, parse_path

__all__ = ["PathSegment", "Resolver", "Route", "RouteRef", "RouteTable", "parse_path"]
