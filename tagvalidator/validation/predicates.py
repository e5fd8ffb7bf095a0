"""Built-in predicate catalogue.

Every predicate takes the textual form of a field value and returns a bool.
Parameterized predicates take their literal parameters as extra positional
arguments, already converted by the registry.

The engine never calls an empty string here: absent/empty values are
handled by the required/optional markers before any rule runs.
"""
from __future__ import annotations

import json
import re
from datetime import datetime
from email.utils import parseaddr
from ipaddress import IPv4Address, IPv6Address, ip_address
from urllib.parse import urlparse

from .tables import ISO3166_ALPHA2, ISO3166_ALPHA3, ISO4217

# ============================================================================
# Patterns
# ============================================================================

_EMAIL = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_ALPHA = re.compile(r"^[a-zA-Z]+$")
_ALPHANUM = re.compile(r"^[a-zA-Z0-9]+$")
_NUMERIC = re.compile(r"^[0-9]+$")
_INT = re.compile(r"^(?:[-+]?(?:0|[1-9][0-9]*))$")
_FLOAT = re.compile(r"^(?:[-+]?(?:[0-9]+))?(?:\.[0-9]*)?(?:[eE][+\-]?(?:[0-9]+))?$")
_HEXADECIMAL = re.compile(r"^[0-9a-fA-F]+$")
_HEXCOLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_BYTE = r"\s*(0|[1-9]\d?|1\d\d?|2[0-4]\d|25[0-5])\s*"
_RGBCOLOR = re.compile(rf"^rgb\({_BYTE},{_BYTE},{_BYTE}\)$")
_UUID3 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-3[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}$")
_UUID4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")
_UUID5 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")
_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")
_CREDIT_CARD = re.compile(
    r"^(?:4[0-9]{12}(?:[0-9]{3})?|5[1-5][0-9]{14}|(222[1-9]|22[3-9][0-9]|2[3-6][0-9]{2}|27[01][0-9]|2720)[0-9]{12}"
    r"|6(?:011|5[0-9][0-9])[0-9]{12}|3[47][0-9]{13}|3(?:0[0-5]|[68][0-9])[0-9]{11}|(?:2131|1800|35\d{3})\d{11}"
    r"|6[27][0-9]{14})$"
)
_ISBN10 = re.compile(r"^(?:[0-9]{9}X|[0-9]{10})$")
_ISBN13 = re.compile(r"^(?:[0-9]{13})$")
_ASCII = re.compile(r"^[\x00-\x7F]+$")
_PRINTABLE_ASCII = re.compile(r"^[\x20-\x7E]+$")
_MULTIBYTE = re.compile(r"[^\x00-\x7F]")
_FULL_WIDTH = re.compile(r"[^\u0020-\u007E\uFF61-\uFF9F\uFFA0-\uFFDC\uFFE8-\uFFEE0-9a-zA-Z]")
_HALF_WIDTH = re.compile(r"[\u0020-\u007E\uFF61-\uFF9F\uFFA0-\uFFDC\uFFE8-\uFFEE0-9a-zA-Z]")
_BASE64 = re.compile(r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})$")
_DATA_URI = re.compile(r"^data:.+/(.+);base64$")
_DNS_NAME = re.compile(r"^([a-zA-Z0-9_][a-zA-Z0-9_-]{0,62})(\.[a-zA-Z0-9_][a-zA-Z0-9_-]{0,62})*[._]?$")
_MAC = re.compile(
    r"^(?:[0-9A-Fa-f]{2}(?P<sep>[:-]))(?:[0-9A-Fa-f]{2}(?P=sep)){4}[0-9A-Fa-f]{2}"
    r"(?:(?P=sep)[0-9A-Fa-f]{2}(?P=sep)[0-9A-Fa-f]{2})?$"
    r"|^(?:[0-9A-Fa-f]{4}\.){2,3}[0-9A-Fa-f]{4}$"
)
_LATITUDE = re.compile(r"^[-+]?([1-8]?\d(\.\d+)?|90(\.0+)?)$")
_LONGITUDE = re.compile(r"^[-+]?(180(\.0+)?|((1[0-7]\d)|([1-9]?\d))(\.\d+)?)$")
_SSN = re.compile(r"^\d{3}[- ]?\d{2}[- ]?\d{4}$")
_SEMVER = re.compile(
    r"^v?(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)"
    r"(-(0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(\.(0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*)?"
    r"(\+[0-9a-zA-Z-]+(\.[0-9a-zA-Z-]+)*)?$"
)
_RFC3339 = re.compile(r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$")
_RFC3339_NO_ZONE = re.compile(r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?$")

MAX_URL_LENGTH = 2083


# ============================================================================
# Character classes
# ============================================================================

def is_email(s: str) -> bool:
    _, addr = parseaddr(s)
    return addr == s and bool(_EMAIL.match(s))


def is_alpha(s: str) -> bool: return bool(_ALPHA.match(s))

def is_utf_letter(s: str) -> bool: return all(c.isalpha() for c in s)

def is_alphanumeric(s: str) -> bool: return bool(_ALPHANUM.match(s))

def is_utf_letter_numeric(s: str) -> bool: return all(c.isalpha() or c.isnumeric() for c in s)

def is_numeric(s: str) -> bool: return bool(_NUMERIC.match(s))


def is_utf_numeric(s: str) -> bool:
    body = s[1:] if s[:1] in "+-" else s
    return bool(body) and all(c.isnumeric() for c in body)


def is_utf_digit(s: str) -> bool:
    body = s[1:] if s[:1] in "+-" else s
    return bool(body) and all(c.isdigit() for c in body)


def is_hexadecimal(s: str) -> bool: return bool(_HEXADECIMAL.match(s))

def is_hexcolor(s: str) -> bool: return bool(_HEXCOLOR.match(s))

def is_rgbcolor(s: str) -> bool: return bool(_RGBCOLOR.match(s))

def is_lower_case(s: str) -> bool: return s == s.lower()

def is_upper_case(s: str) -> bool: return s == s.upper()

def is_int(s: str) -> bool: return bool(_INT.match(s))

def is_float(s: str) -> bool: return s not in ("", ".", "+", "-") and bool(_FLOAT.match(s))

def is_null(s: str) -> bool: return len(s) == 0

def is_ascii(s: str) -> bool: return bool(_ASCII.match(s))

def is_printable_ascii(s: str) -> bool: return bool(_PRINTABLE_ASCII.match(s))

def is_multibyte(s: str) -> bool: return bool(_MULTIBYTE.search(s))

def is_full_width(s: str) -> bool: return bool(_FULL_WIDTH.search(s))

def is_half_width(s: str) -> bool: return bool(_HALF_WIDTH.search(s))

def is_variable_width(s: str) -> bool: return is_full_width(s) and is_half_width(s)


# ============================================================================
# Identifiers and checksums
# ============================================================================

def is_uuid(s: str) -> bool: return bool(_UUID.match(s))

def is_uuid_v3(s: str) -> bool: return bool(_UUID3.match(s))

def is_uuid_v4(s: str) -> bool: return bool(_UUID4.match(s))

def is_uuid_v5(s: str) -> bool: return bool(_UUID5.match(s))


def _luhn(digits: str) -> bool:
    total = 0
    for i, char in enumerate(reversed(digits)):
        n = int(char)
        if i % 2 == 1:
            n *= 2
            if n > 9: n -= 9
        total += n
    return total % 10 == 0


def is_credit_card(s: str) -> bool:
    sanitized = re.sub(r"[^0-9]+", "", s)
    return bool(_CREDIT_CARD.match(sanitized)) and _luhn(sanitized)


def _strip_isbn(s: str) -> str: return re.sub(r"[\s-]+", "", s)


def is_isbn10(s: str) -> bool:
    if not _ISBN10.match(sanitized := _strip_isbn(s)): return False
    total = sum((i + 1) * int(c) for i, c in enumerate(sanitized[:9]))
    total += 10 * (10 if sanitized[9] == "X" else int(sanitized[9]))
    return total % 11 == 0


def is_isbn13(s: str) -> bool:
    if not _ISBN13.match(sanitized := _strip_isbn(s)): return False
    total = sum(int(c) * (3 if i % 2 else 1) for i, c in enumerate(sanitized[:12]))
    return (10 - total % 10) % 10 == int(sanitized[12])


def is_ssn(s: str) -> bool: return len(s) == 11 and bool(_SSN.match(s))

def is_semver(s: str) -> bool: return bool(_SEMVER.match(s))


# ============================================================================
# Encodings
# ============================================================================

def is_json(s: str) -> bool:
    try:
        json.loads(s)
    except ValueError:
        return False
    return True


def is_base64(s: str) -> bool: return bool(_BASE64.match(s))


def is_data_uri(s: str) -> bool:
    head, sep, data = s.partition(",")
    return bool(sep) and bool(_DATA_URI.match(head)) and is_base64(data)


# ============================================================================
# Network
# ============================================================================

def is_ip(s: str) -> bool:
    try:
        ip_address(s)
    except ValueError:
        return False
    return True


def is_ipv4(s: str) -> bool:
    try:
        IPv4Address(s)
    except ValueError:
        return False
    return True


def is_ipv6(s: str) -> bool:
    try:
        IPv6Address(s)
    except ValueError:
        return False
    return True


def is_port(s: str) -> bool: return s.isascii() and s.isdigit() and 0 < int(s) < 65536


def is_dns_name(s: str) -> bool:
    if not s or len(s.replace(".", "")) > 255: return False
    return not is_ip(s) and bool(_DNS_NAME.match(s))


def is_host(s: str) -> bool: return is_ip(s) or is_dns_name(s)

def is_mac(s: str) -> bool: return bool(_MAC.match(s))


def is_dial_string(s: str) -> bool:
    host, sep, port = s.rpartition(":")
    if not sep: return False
    if host.startswith("[") and host.endswith("]"): host = host[1:-1]
    return is_host(host) and is_port(port)


def is_url(s: str) -> bool:
    if not s or len(s) >= MAX_URL_LENGTH or len(s) <= 3 or s.startswith("."): return False
    if any(c.isspace() for c in s): return False
    candidate = s if "://" in s else f"http://{s}"
    try:
        parsed = urlparse(candidate)
        host = parsed.hostname
    except ValueError:
        return False
    if not parsed.scheme or not host: return False
    if host.startswith(".") or host.endswith("."): return False
    return is_ip(host) or (is_dns_name(host) and "." in host) or host == "localhost"


def is_request_url(s: str) -> bool:
    try:
        parsed = urlparse(s)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path.startswith("/"))


def is_request_uri(s: str) -> bool:
    try:
        parsed = urlparse(s)
    except ValueError:
        return False
    return bool(parsed.scheme) or s.startswith("/")


# ============================================================================
# Geography, time, reference codes
# ============================================================================

def is_latitude(s: str) -> bool: return bool(_LATITUDE.match(s))

def is_longitude(s: str) -> bool: return bool(_LONGITUDE.match(s))


def _parses_as_datetime(s: str) -> bool:
    normalized = s.replace("t", "T").replace("z", "+00:00").replace("Z", "+00:00")
    try:
        datetime.fromisoformat(normalized)
    except ValueError:
        return False
    return True


def is_rfc3339(s: str) -> bool: return bool(_RFC3339.match(s)) and _parses_as_datetime(s)

def is_rfc3339_without_zone(s: str) -> bool: return bool(_RFC3339_NO_ZONE.match(s)) and _parses_as_datetime(s)

def is_iso3166_alpha2(s: str) -> bool: return s in ISO3166_ALPHA2

def is_iso3166_alpha3(s: str) -> bool: return s in ISO3166_ALPHA3

def is_iso4217(s: str) -> bool: return s in ISO4217


# ============================================================================
# Parameterized predicates
# ============================================================================

def byte_length(s: str, min_len: int, max_len: int) -> bool:
    """Length in UTF-8 bytes within [min_len, max_len]."""
    return min_len <= len(s.encode("utf-8")) <= max_len


def rune_length(s: str, min_len: int, max_len: int) -> bool:
    """Length in code points within [min_len, max_len]."""
    return min_len <= len(s) <= max_len


def in_range(s: str, low: float, high: float) -> bool:
    """Numeric value within [low, high]; non-numeric text fails."""
    try:
        value = float(s)
    except ValueError:
        return False
    return min(low, high) <= value <= max(low, high)


def matches(s: str, pattern: re.Pattern) -> bool:
    return pattern.search(s) is not None


def is_in(s: str, *options: str) -> bool:
    return s in options
