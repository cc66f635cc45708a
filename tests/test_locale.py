"""Tests for per-request locale resolution."""

from fastapi import Request, Response

from utils.locale import (
    LOCALE_COOKIE,
    LOCALE_COOKIE_MAX_AGE,
    CookieDirective,
    apply_cookie,
    parse_accept_language,
    resolve_locale,
)


def make_request(query: str = "", headers=None) -> Request:
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/",
        "query_string": query.encode("latin-1"),
        "headers": raw_headers,
    })


class TestResolveLocale:
    def test_default_is_english(self):
        assert resolve_locale(make_request()) == ("en", None)

    def test_query_param_overrides_cookie_and_sets_cookie(self):
        request = make_request("lang=id", {"Cookie": f"{LOCALE_COOKIE}=en"})
        locale, directive = resolve_locale(request)
        assert locale == "id"
        assert directive == CookieDirective(name=LOCALE_COOKIE, value="id")
        assert directive.max_age == LOCALE_COOKIE_MAX_AGE
        assert directive.samesite == "lax"

    def test_query_param_is_case_insensitive(self):
        locale, directive = resolve_locale(make_request("lang=ID"))
        assert locale == "id"
        assert directive.value == "id"

    def test_invalid_query_param_falls_back_to_cookie(self):
        request = make_request("lang=xx", {"Cookie": f"{LOCALE_COOKIE}=id"})
        assert resolve_locale(request) == ("id", None)

    def test_invalid_query_param_falls_back_to_header(self):
        request = make_request("lang=xx", {"Accept-Language": "id-ID,id;q=0.9,en;q=0.8"})
        assert resolve_locale(request) == ("id", None)

    def test_invalid_cookie_is_ignored(self):
        request = make_request("", {"Cookie": f"{LOCALE_COOKIE}=fr", "Accept-Language": "id"})
        assert resolve_locale(request) == ("id", None)

    def test_unsupported_header_falls_back_to_default(self):
        request = make_request("", {"Accept-Language": "fr-FR,de;q=0.5"})
        assert resolve_locale(request) == ("en", None)

    def test_header_quality_order(self):
        request = make_request("", {"Accept-Language": "en;q=0.3,id;q=0.8"})
        assert resolve_locale(request) == ("id", None)


class TestParseAcceptLanguage:
    def test_empty(self):
        assert parse_accept_language(None) == []
        assert parse_accept_language("") == []

    def test_orders_by_quality_then_position(self):
        header = "fr;q=0.5, en-GB, id;q=0.9, de;q=0.9, *;q=0.1"
        assert parse_accept_language(header) == ["en", "id", "de", "fr"]

    def test_zero_quality_and_bad_values_are_dropped(self):
        assert parse_accept_language("en;q=0, id;q=abc, fr") == ["fr"]


class TestApplyCookie:
    def test_sets_one_year_lax_cookie(self):
        response = apply_cookie(Response(), CookieDirective(name=LOCALE_COOKIE, value="id"))
        header = response.headers["set-cookie"]
        assert header.startswith(f"{LOCALE_COOKIE}=id")
        assert f"Max-Age={LOCALE_COOKIE_MAX_AGE}" in header
        assert "samesite=lax" in header.lower()

    def test_no_directive_no_cookie(self):
        response = apply_cookie(Response(), None)
        assert "set-cookie" not in response.headers
