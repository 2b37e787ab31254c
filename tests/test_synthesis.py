"""Tests for the attribute synthesizer — method, destination, CSRF, and merge order."""

import pytest

from formbutton.csrf import StaticTokenProvider, csrf_scope
from formbutton.methods import Method
from formbutton.synthesis import csrf_data, merge_events, skip_csrf, synthesize

TOKEN = StaticTokenProvider("tok")


class _CountingProvider:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def token_for(self, destination: str) -> str:
        self.calls.append(destination)
        return "counted"


# ---------------------------------------------------------------------------
# GET
# ---------------------------------------------------------------------------


class TestGet:
    def test_method_and_destination(self) -> None:
        attrs = synthesize("/users", Method.GET, csrf=TOKEN)
        assert attrs == {"data": {"method": "get", "to": "/users"}}

    @pytest.mark.parametrize("value", ["explicit", True, None, False])
    def test_never_carries_csrf(self, value: object) -> None:
        attrs = synthesize("/users", Method.GET, {"csrf_token": value}, csrf=TOKEN)
        assert "csrf_token" not in attrs
        assert "csrf_token" not in attrs["data"]

    def test_csrf_in_caller_data_stripped(self) -> None:
        attrs = synthesize("/users", Method.GET, {"data": {"csrf_token": "x", "a": 1}})
        assert attrs["data"] == {"method": "get", "to": "/users", "a": 1}

    def test_provider_not_called(self) -> None:
        provider = _CountingProvider()
        synthesize("/users", Method.GET, csrf=provider)
        assert provider.calls == []

    def test_caller_options_follow_data(self) -> None:
        attrs = synthesize("/users", Method.GET, {"class": "x", "title": "t"})
        assert list(attrs) == ["data", "class", "title"]


# ---------------------------------------------------------------------------
# Unsafe methods
# ---------------------------------------------------------------------------


class TestUnsafeMethods:
    @pytest.mark.parametrize("method", [Method.POST, Method.PUT, Method.PATCH, Method.DELETE])
    def test_csrf_present(self, method: Method) -> None:
        attrs = synthesize("/users/1", method, csrf=TOKEN)
        assert attrs["data"] == {"method": method.value, "to": "/users/1", "csrf_token": "tok"}

    def test_data_key_order(self) -> None:
        attrs = synthesize("/users/1", Method.DELETE, {"data": {"confirm": "Sure?"}}, csrf=TOKEN)
        assert list(attrs["data"]) == ["method", "to", "csrf_token", "confirm"]

    def test_provider_receives_destination(self) -> None:
        provider = _CountingProvider()
        synthesize("/users/1", Method.POST, csrf=provider)
        assert provider.calls == ["/users/1"]

    def test_explicit_token_skips_provider(self) -> None:
        provider = _CountingProvider()
        attrs = synthesize("/u", Method.POST, {"csrf_token": "mine"}, csrf=provider)
        assert attrs["data"]["csrf_token"] == "mine"
        assert provider.calls == []

    def test_csrf_disabled(self) -> None:
        provider = _CountingProvider()
        attrs = synthesize("/u", Method.POST, {"csrf_token": False}, csrf=provider)
        assert attrs["data"] == {"method": "post", "to": "/u"}
        assert provider.calls == []

    def test_disable_beats_token_in_caller_data(self) -> None:
        attrs = synthesize("/u", Method.POST, {"csrf_token": False, "data": {"csrf_token": "x"}})
        assert "csrf_token" not in attrs["data"]

    def test_true_asks_provider(self) -> None:
        attrs = synthesize("/u", Method.POST, {"csrf_token": True}, csrf=TOKEN)
        assert attrs["data"]["csrf_token"] == "tok"

    def test_csrf_key_not_left_at_top_level(self) -> None:
        attrs = synthesize("/u", Method.POST, {"csrf_token": "mine"}, csrf=TOKEN)
        assert "csrf_token" not in attrs

    def test_default_provider_uses_scope(self) -> None:
        with csrf_scope("scoped"):
            attrs = synthesize("/u", Method.DELETE)
        assert attrs["data"]["csrf_token"] == "scoped"

    def test_custom_csrf_key(self) -> None:
        attrs = synthesize("/u", Method.POST, {"csrf": False}, csrf=TOKEN, csrf_key="csrf")
        assert attrs["data"] == {"method": "post", "to": "/u"}


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


class TestPrecedence:
    def test_synthesized_method_wins(self) -> None:
        attrs = synthesize("/u", Method.DELETE, {"data": {"method": "put"}}, csrf=TOKEN)
        assert attrs["data"]["method"] == "delete"

    def test_synthesized_to_wins(self) -> None:
        attrs = synthesize("/u", Method.GET, {"data": {"to": "/elsewhere"}})
        assert attrs["data"]["to"] == "/u"

    def test_synthesized_csrf_wins(self) -> None:
        attrs = synthesize("/u", Method.POST, {"data": {"csrf_token": "theirs"}}, csrf=TOKEN)
        assert attrs["data"]["csrf_token"] == "tok"

    def test_other_caller_data_survives(self) -> None:
        opts = {"data": {"method": "put", "confirm": "Really?"}}
        attrs = synthesize("/u", Method.DELETE, opts, csrf=TOKEN)
        assert attrs["data"]["confirm"] == "Really?"

    def test_caller_data_as_pairs(self) -> None:
        opts = {"data": [("confirm", "Really?"), ("turbo", "false")]}
        attrs = synthesize("/u", Method.GET, opts)
        assert attrs["data"] == {"method": "get", "to": "/u", "confirm": "Really?", "turbo": "false"}

    def test_options_as_pairs(self) -> None:
        attrs = synthesize("/u", Method.GET, [("title", "t"), ("class", "c")])
        assert list(attrs) == ["data", "title", "class"]

    def test_caller_options_not_mutated(self) -> None:
        opts = {"csrf_token": "mine", "data": {"csrf_token": "x", "a": 1}}
        synthesize("/u", Method.GET, opts)
        synthesize("/u", Method.POST, opts, csrf=TOKEN)
        assert opts == {"csrf_token": "mine", "data": {"csrf_token": "x", "a": 1}}

    def test_idempotent(self) -> None:
        opts = {"class": "c", "data": {"confirm": "?"}}
        first = synthesize("/u", Method.PATCH, opts, csrf=TOKEN)
        second = synthesize("/u", Method.PATCH, opts, csrf=TOKEN)
        assert first == second
        assert list(first["data"]) == list(second["data"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestSkipCSRF:
    def test_removes_top_level_and_data(self) -> None:
        assert skip_csrf({"csrf_token": "a", "data": {"csrf_token": "b"}, "x": 1}) == {
            "data": {},
            "x": 1,
        }

    def test_none(self) -> None:
        assert skip_csrf(None) == {}


class TestCSRFData:
    def test_returns_remaining_options(self) -> None:
        entries, rest = csrf_data("/u", {"csrf_token": "a", "class": "c"})
        assert entries == {"csrf_token": "a"}
        assert rest == {"class": "c"}


class TestMergeEvents:
    def test_appended_after_options(self) -> None:
        merged = merge_events({"data": {}, "class": "c"}, {"x-on:click": "go()"})
        assert list(merged) == ["data", "class", "x-on:click"]

    def test_never_overwrites_data(self) -> None:
        merged = merge_events({"data": {"method": "post"}}, {"data": "nope"})
        assert merged["data"] == {"method": "post"}

    def test_replaces_caller_duplicate(self) -> None:
        merged = merge_events({"data": {}, "x-on:click": "old()"}, {"x-on:click": "new()"})
        assert merged["x-on:click"] == "new()"

    def test_replacement_moves_to_end(self) -> None:
        merged = merge_events(
            {"data": {}, "x-on:click": "old()", "title": "t"}, {"x-on:click": "new()"}
        )
        assert list(merged) == ["data", "title", "x-on:click"]
