"""Tests for formbutton.methods — method normalization."""

import pytest

from formbutton.errors import InvalidMethodError
from formbutton.methods import SAFE_METHODS, Method, normalize_method


class TestNormalizeMethod:
    @pytest.mark.parametrize("raw", ["delete", "DELETE", "Delete", "  delete "])
    def test_case_insensitive(self, raw: str) -> None:
        assert normalize_method(raw) is Method.DELETE

    def test_enum_passes_through(self) -> None:
        assert normalize_method(Method.PATCH) is Method.PATCH

    def test_value_is_lowercase_string(self) -> None:
        assert normalize_method("PUT") == "put"

    def test_unknown_method(self) -> None:
        with pytest.raises(InvalidMethodError, match="Unsupported method 'head'"):
            normalize_method("head")

    def test_error_lists_allowed_methods(self) -> None:
        with pytest.raises(InvalidMethodError, match="get, post, put, patch, delete"):
            normalize_method("trace")

    def test_empty_string(self) -> None:
        with pytest.raises(InvalidMethodError):
            normalize_method("")

    def test_non_string(self) -> None:
        with pytest.raises(InvalidMethodError, match="to be a string"):
            normalize_method(42)  # type: ignore[arg-type]


class TestSafeMethods:
    def test_only_get_is_safe(self) -> None:
        assert SAFE_METHODS == frozenset({Method.GET})
        assert Method.GET.is_safe
        assert not any(m.is_safe for m in Method if m is not Method.GET)
