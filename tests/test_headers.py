import pytest

from thoth.headers import HttpHeaders
from thoth.status import HttpStatusCode, HttpStatusError


def test_constructor_lowercases_names_and_keeps_values():
    headers = HttpHeaders([("Content-Type", "Text/HTML"), ("X-A", "1")])
    assert list(headers) == [("content-type", "Text/HTML"), ("x-a", "1")]


def test_constructor_accepts_mapping():
    headers = HttpHeaders({"Host": "example.com"})
    assert headers.get("host") == "example.com"
    assert len(headers) == 1


def test_parse_basic_lines():
    headers = HttpHeaders.parse("Host: example.com\r\nAccept: */*\r\n\r\n")
    assert len(headers) == 2
    assert headers.get("host") == "example.com"
    assert headers.get("ACCEPT") == "*/*"


def test_parse_trims_spaces_and_tabs():
    headers = HttpHeaders.parse("X-Test: \t value \t")
    assert headers.get("x-test") == "value"


def test_parse_blank_value_is_empty():
    headers = HttpHeaders.parse("X-Empty:   ")
    assert headers.get("x-empty") == ""


def test_parse_empty_text_gives_no_headers():
    assert len(HttpHeaders.parse("")) == 0


def test_parse_too_long():
    with pytest.raises(HttpStatusError) as info:
        HttpHeaders.parse("Host: example.com", max_length=4)
    assert info.value.status is HttpStatusCode.CONTENT_TOO_LARGE


def test_parse_at_exact_limit_succeeds():
    text = "Host: example.com"
    headers = HttpHeaders.parse(text, max_length=len(text))
    assert headers.get("host") == "example.com"


@pytest.mark.parametrize(
    "text",
    [
        "no colon here",
        "Host: example.com\r\n\r\nAccept: */*",
        "Bad Key: value",
        "Bad(key): value",
    ],
)
def test_parse_bad_request(text):
    with pytest.raises(HttpStatusError) as info:
        HttpHeaders.parse(text)
    assert info.value.status is HttpStatusCode.BAD_REQUEST


def test_parse_merges_repeated_headers():
    headers = HttpHeaders.parse("Accept: a\r\nAccept: b")
    assert len(headers) == 1
    assert headers.get("accept") == "a, b"


def test_cookie_values_join_with_semicolon():
    headers = HttpHeaders()
    headers.add("Cookie", "a=1")
    headers.add("cookie", "b=2")
    assert headers.get("cookie") == "a=1; b=2"


def test_set_cookie_is_never_merged():
    headers = HttpHeaders.parse("Set-Cookie: a=1\r\nSet-Cookie: b=2")
    assert len(headers) == 2
    assert headers.set_cookies() == ["a=1", "b=2"]


def test_single_value_header_replaces():
    headers = HttpHeaders()
    headers.add("Content-Length", "10")
    headers.add("content-length", "20")
    assert list(headers) == [("content-length", "20")]


def test_set_replaces_all_matches_case_insensitively():
    headers = HttpHeaders([("WWW-Authenticate", "a"), ("www-authenticate", "b")])
    headers.set("Www-Authenticate", "c")
    assert list(headers) == [("www-authenticate", "c")]


def test_exists_and_contains():
    headers = HttpHeaders([("Host", "example.com")])
    assert "HOST" in headers
    assert "accept" not in headers
    assert headers.exists("host", "example.com")
    assert not headers.exists("host", "EXAMPLE.COM")
    assert ("Host", "example.com") in headers


def test_remove_exact_pair():
    headers = HttpHeaders([("X-A", "1"), ("X-A", "2")])
    assert headers.remove("x-a", "2") is True
    assert list(headers) == [("x-a", "1")]
    assert headers.remove("x-a", "3") is False
    assert headers.remove("missing", "1") is False


def test_set_if_null():
    headers = HttpHeaders()
    assert headers.set_if_null("Host", "example.com") is True
    assert headers.set_if_null("host", "other.example.com") is False
    assert headers.get("host") == "example.com"


def test_get_missing_does_not_create():
    headers = HttpHeaders()
    assert headers.get("host") is None
    assert len(headers) == 0


def test_getitem_creates_empty_entry():
    headers = HttpHeaders()
    assert headers["X-New"] == ""
    assert list(headers) == [("x-new", "")]


def test_setitem_updates_first_match_or_appends():
    headers = HttpHeaders([("X-A", "1"), ("X-A", "2")])
    headers["x-a"] = "9"
    headers["X-B"] = "3"
    assert list(headers) == [("x-a", "9"), ("x-a", "2"), ("x-b", "3")]


def test_reversed_order():
    headers = HttpHeaders([("a", "1"), ("b", "2")])
    assert list(reversed(headers)) == [("b", "2"), ("a", "1")]


def test_clear():
    headers = HttpHeaders([("a", "1")])
    headers.clear()
    assert len(headers) == 0
    assert headers == HttpHeaders()


def test_equality_depends_on_order():
    first = HttpHeaders([("A", "1"), ("b", "2")])
    assert first == HttpHeaders([("a", "1"), ("B", "2")])
    assert not first == HttpHeaders([("b", "2"), ("a", "1")])


def test_str_format():
    headers = HttpHeaders([("Host", "example.com")])
    assert str(headers) == "host: example.com\r\n"


def test_str_parse_round_trip():
    headers = HttpHeaders([("Host", "example.com"), ("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])
    assert HttpHeaders.parse(str(headers)) == headers
    assert HttpHeaders.parse(str(headers) + "\r\n") == headers