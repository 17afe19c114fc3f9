"""Tests for URL building: Router.url() and signpost.routing.urls."""

import pytest

from signpost.errors import (
    InvalidPlaceholderValue,
    MissingRequiredParam,
    UnknownRouteName,
)
from signpost.routing.router import Router
from signpost.routing.template import parse_template
from signpost.routing.urls import build_url


def _router() -> Router:
    r = Router()
    r.add("entry", "/entries/{year}/{month}/{day}", {"controller": "Blog"})
    r.add("year", r"/entry/{year:\d+}", {"controller": "Blog"})
    r.add("download", "/dl/{file}{.format}", {"controller": "Download"})
    return r


class TestNamedRoutes:
    def test_substitutes_placeholders(self) -> None:
        assert _router().url("entry", year="1916", month="08", day="14") == "/entries/1916/08/14"

    def test_non_string_values(self) -> None:
        assert _router().url("year", year=1916) == "/entry/1916"

    def test_leftovers_become_query(self) -> None:
        assert _router().url("year", year="1916", page=2) == "/entry/1916?page=2"

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredParam) as exc_info:
            _router().url("entry", year="1916", month="08")
        assert "'day'" in str(exc_info.value)

    def test_invalid_value(self) -> None:
        with pytest.raises(InvalidPlaceholderValue) as exc_info:
            _router().url("year", year="zort")
        assert "'zort'" in str(exc_info.value)

    def test_value_must_match_in_full(self) -> None:
        with pytest.raises(InvalidPlaceholderValue):
            _router().url("year", year="1916x")

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownRouteName):
            _router().url("nope")

    def test_anonymous_route_is_not_addressable(self) -> None:
        r = Router().add(None, "/anon", {})
        with pytest.raises(UnknownRouteName):
            r.url("anon")

    def test_param_called_name(self) -> None:
        r = Router().add("user", "/users/{name}", {})
        assert r.url("user", name="bob") == "/users/bob"


class TestFormatSuffix:
    def test_with_format(self) -> None:
        assert _router().url("download", file="foo", format="gz") == "/dl/foo.gz"

    def test_without_format(self) -> None:
        assert _router().url("download", file="foo") == "/dl/foo"

    def test_empty_format(self) -> None:
        assert _router().url("download", file="foo", format="") == "/dl/foo"
        assert _router().url("download", file="foo", format=None) == "/dl/foo"

    def test_invalid_format(self) -> None:
        with pytest.raises(InvalidPlaceholderValue):
            _router().url("download", file="foo", format="tar.gz")

    def test_plain_format_placeholder_has_no_dot(self) -> None:
        r = Router().add("files", "/files/{format}", {})
        assert r.url("files", format="gz") == "/files/gz"


class TestLiteralTemplates:
    def test_one_off_template(self) -> None:
        assert _router().url("/entries/{year}", year="1916", q="abc") == "/entries/1916?q=abc"

    def test_one_off_template_is_not_registered(self) -> None:
        r = _router()
        r.url("/extra/{x}", x="1")
        assert len(r) == 3

    def test_literal_path(self) -> None:
        assert Router().url("/about") == "/about"
        assert Router().url("/about", page=2) == "/about?page=2"


class TestQueryString:
    def test_insertion_order(self) -> None:
        assert Router().url("/search", b="2", a="1") == "/search?b=2&a=1"

    def test_quoting(self) -> None:
        assert Router().url("/search", q="a b&c") == "/search?q=a%20b%26c"

    def test_sequence_values_repeat(self) -> None:
        assert Router().url("/search", tag=["a", "b"]) == "/search?tag=a&tag=b"

    def test_url_for_mapping(self) -> None:
        assert Router().url_for("/search", {"page-size": 10}) == "/search?page-size=10"


class TestBuildUrl:
    def test_leftover_params_become_query(self) -> None:
        template = parse_template("/entries/{year}")
        assert build_url(template, {"year": "1916", "q": "abc"}) == "/entries/1916?q=abc"

    def test_path_values_are_escaped(self) -> None:
        template = parse_template("/u/{name}")
        assert build_url(template, {"name": "a b"}) == "/u/a%20b"

    def test_wide_constraint_keeps_slashes(self) -> None:
        template = parse_template("/static/{path:.+}")
        assert build_url(template, {"path": "css/site.css"}) == "/static/css/site.css"

    def test_label_in_errors(self) -> None:
        template = parse_template("/u/{name}")
        with pytest.raises(MissingRequiredParam) as exc_info:
            build_url(template, {}, label="user")
        assert "'user'" in str(exc_info.value)

    def test_params_not_mutated(self) -> None:
        params = {"name": "bob", "q": "x"}
        build_url(parse_template("/u/{name}"), params)
        assert params == {"name": "bob", "q": "x"}
