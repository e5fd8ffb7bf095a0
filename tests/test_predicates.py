"""Built-in predicate catalogue tests."""
import re

import pytest

from tagvalidator.validation import predicates as p
from tagvalidator.validation.registry import SIMPLE_RULES


@pytest.mark.parametrize("rule, text, expected", [
    ("email", "foo@bar.com", True),
    ("email", "invalid.com", False),
    ("url", "http://foobar.com", True),
    ("url", "foobar.com", True),
    ("url", "http://local host", False),
    ("alpha", "abc", True),
    ("alpha", "abc1", False),
    ("alphanum", "abc123", True),
    ("alphanum", "abc-1", False),
    ("numeric", "123", True),
    ("numeric", "12a", False),
    ("hexadecimal", "deadBEEF", True),
    ("hexadecimal", "xyz", False),
    ("hexcolor", "#fff", True),
    ("hexcolor", "#ffff", False),
    ("rgbcolor", "rgb(0,31,255)", True),
    ("rgbcolor", "rgb(1,349,275)", False),
    ("lowercase", "abc", True),
    ("lowercase", "aBc", False),
    ("uppercase", "ABC", True),
    ("uppercase", "aBC", False),
    ("int", "-42", True),
    ("int", "01", False),
    ("float", "3.14", True),
    ("float", "abc", False),
    ("null", "", True),
    ("null", "a", False),
    ("uuid", "a987fbc9-4bed-3078-cf07-9141ba07c9f3", True),
    ("uuid", "not-a-uuid", False),
    ("uuidv4", "57b73598-8764-4ad0-a76a-679bb6640eb1", True),
    ("uuidv4", "a987fbc9-4bed-3078-cf07-9141ba07c9f3", False),
    ("creditcard", "4111111111111111", True),
    ("creditcard", "4111111111111112", False),
    ("isbn10", "3836221195", True),
    ("isbn10", "3836221196", False),
    ("isbn13", "9784873113685", True),
    ("isbn13", "9784873113686", False),
    ("json", '{"a": 1}', True),
    ("json", "{", False),
    ("ascii", "foobar", True),
    ("ascii", "ｆｏｏ", False),
    ("printableascii", "foo bar", True),
    ("printableascii", "foo\x01", False),
    ("multibyte", "ｆｏｏ", True),
    ("multibyte", "abc", False),
    ("fullwidth", "ｆｏｏ", True),
    ("fullwidth", "abc", False),
    ("halfwidth", "abc", True),
    ("halfwidth", "ｆｏｏ", False),
    ("variablewidth", "ｆｏｏbar", True),
    ("variablewidth", "abc", False),
    ("base64", "Zm9vYmFy", True),
    ("base64", "Zm9vYmF", False),
    ("ip", "127.0.0.1", True),
    ("ip", "::1", True),
    ("ip", "300.1.1.1", False),
    ("ipv4", "10.0.0.1", True),
    ("ipv4", "::1", False),
    ("ipv6", "::1", True),
    ("ipv6", "10.0.0.1", False),
    ("port", "8080", True),
    ("port", "0", False),
    ("port", "70000", False),
    ("port", "\u00b2", False),
    ("dns", "example.com", True),
    ("dns", "-bad.com", False),
    ("host", "localhost", True),
    ("host", "exa mple", False),
    ("dialstring", "localhost:8080", True),
    ("dialstring", "localhost", False),
    ("dialstring", "localhost:\u00b2", False),
    ("requrl", "http://example.com/path", True),
    ("requrl", "example", False),
    ("requri", "/path", True),
    ("requri", "path", False),
    ("mac", "3D:F2:C9:A6:B3:4F", True),
    ("mac", "3D:F2", False),
    ("latitude", "-90", True),
    ("latitude", "91", False),
    ("longitude", "180", True),
    ("longitude", "181", False),
    ("ssn", "123-45-6789", True),
    ("ssn", "123456789", False),
    ("semver", "1.2.3", True),
    ("semver", "1.2", False),
    ("rfc3339", "2016-12-31T11:00:00Z", True),
    ("rfc3339", "2016-12-31 11:00:00", False),
    ("rfc3339WithoutZone", "2016-12-31T11:00:00", True),
    ("rfc3339WithoutZone", "2016-12-31T11:00:00Z", False),
    ("ISO3166Alpha2", "US", True),
    ("ISO3166Alpha2", "XX", False),
    ("ISO3166Alpha3", "USA", True),
    ("ISO3166Alpha3", "XXX", False),
    ("ISO4217", "USD", True),
    ("ISO4217", "ABC", False),
])
def test_simple_rule(rule, text, expected):
    assert SIMPLE_RULES[rule](text) is expected


def test_data_uri():
    assert p.is_data_uri("data:text/plain;base64,Zm9vYmFy")
    assert not p.is_data_uri("data:text/plain,foobar")


@pytest.mark.parametrize("text, low, high, expected", [
    ("abc", 1, 3, True),
    ("abcd", 1, 3, False),
    ("ééé", 1, 3, False),
])
def test_byte_length(text, low, high, expected):
    assert p.byte_length(text, low, high) is expected


def test_rune_length_counts_code_points():
    assert p.rune_length("ééé", 1, 3)
    assert not p.rune_length("", 1, 3)


@pytest.mark.parametrize("text, expected", [("5", True), ("-1", True), ("10.5", False), ("abc", False)])
def test_in_range(text, expected):
    assert p.in_range(text, -1, 10) is expected


def test_matches_searches_anywhere():
    assert p.matches("order-42", re.compile(r"\d+"))
    assert not p.matches("order", re.compile(r"\d+"))


def test_is_in():
    assert p.is_in("b", "a", "b")
    assert not p.is_in("c", "a", "b")
