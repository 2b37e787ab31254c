"""Tests for RouteTable — named routes and url_for."""

import pytest

from formbutton.errors import InvalidDestinationError
from formbutton.routing import PathSegment, RouteRef, RouteTable, parse_path


class TestParsePath:
    def test_static(self) -> None:
        assert parse_path("/users") == [PathSegment("users")]

    def test_root(self) -> None:
        assert parse_path("/") == []

    def test_param(self) -> None:
        segments = parse_path("/users/{id}")
        assert segments[1].is_param
        assert segments[1].param_name == "id"
        assert segments[1].param_type == "str"

    def test_typed_param(self) -> None:
        segments = parse_path("/users/{id:int}")
        assert segments[1].param_name == "id"
        assert segments[1].param_type == "int"

    def test_path_param(self) -> None:
        segments = parse_path("/files/{path:path}")
        assert segments[1].param_name == "path"
        assert segments[1].param_type == "path"

    def test_repeated_slashes_ignored(self) -> None:
        assert parse_path("//users//posts/") == [PathSegment("users"), PathSegment("posts")]


class TestUrlFor:
    def _routes(self) -> RouteTable:
        routes = RouteTable()
        routes.add("index", "/")
        routes.add("user_detail", "/users/{id:int}")
        routes.add("user_post", "/users/{id}/posts/{slug}")
        routes.add("file", "/files/{path:path}")
        return routes

    def test_root(self) -> None:
        assert self._routes().url_for("index") == "/"

    def test_int_param(self) -> None:
        assert self._routes().url_for("user_detail", id=1) == "/users/1"

    def test_int_param_from_string(self) -> None:
        assert self._routes().url_for("user_detail", id="12") == "/users/12"

    def test_int_param_rejects_garbage(self) -> None:
        with pytest.raises(InvalidDestinationError, match="expects an int"):
            self._routes().url_for("user_detail", id="abc")

    def test_str_params_are_quoted(self) -> None:
        url = self._routes().url_for("user_post", id="a b", slug="x/y")
        assert url == "/users/a%20b/posts/x%2Fy"

    def test_path_param_keeps_slashes(self) -> None:
        assert self._routes().url_for("file", path="docs/a.txt") == "/files/docs/a.txt"

    def test_extra_params_become_query(self) -> None:
        url = self._routes().url_for("user_detail", id=1, tab="posts", page=2)
        assert url == "/users/1?tab=posts&page=2"

    def test_falsy_extra_params_omitted(self) -> None:
        assert self._routes().url_for("user_detail", id=1, q="", page=None) == "/users/1"

    def test_missing_param(self) -> None:
        with pytest.raises(InvalidDestinationError, match="Missing parameter 'id'"):
            self._routes().url_for("user_detail")

    def test_unknown_route(self) -> None:
        with pytest.raises(InvalidDestinationError, match="No route named"):
            self._routes().url_for("nope")

    def test_resolve_route_ref(self) -> None:
        assert self._routes().resolve(RouteRef("user_detail", {"id": 3})) == "/users/3"


class TestRouteTable:
    def test_add_returns_route(self) -> None:
        route = RouteTable().add("x", "/x/{id}")
        assert route.name == "x"
        assert route.path == "/x/{id}"
        assert len(route.segments) == 2

    def test_contains_and_len(self) -> None:
        routes = RouteTable()
        routes.add("x", "/x")
        assert "x" in routes
        assert "y" not in routes
        assert len(routes) == 1

    def test_path_must_be_absolute(self) -> None:
        with pytest.raises(InvalidDestinationError, match="must start with '/'"):
            RouteTable().add("x", "x")


class TestRouteRef:
    def test_hashable(self) -> None:
        ref = RouteRef("user_detail", {"id": 1})
        assert hash(ref) == hash(RouteRef("user_detail", {"id": 2}))
        assert {ref: "x"}[ref] == "x"

    def test_equality_includes_params(self) -> None:
        assert RouteRef("a", {"id": 1}) == RouteRef("a", {"id": 1})
        assert RouteRef("a", {"id": 1}) != RouteRef("a", {"id": 2})
