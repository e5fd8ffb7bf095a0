"""Validator Registry

Resolves a parsed RuleInvocation to executable logic. Three tables:

- simple: name -> fn(text) -> bool. Fixed at import, read-only.
- parameterized: name -> ParamRule (predicate + pattern over the rule's raw
  text). Fixed at import, read-only.
- custom: name -> fn(ctx, value, root). One table per registry instance,
  replaced wholesale under a lock on every registration (copy-on-write), so
  readers grab the current mapping without locking and never see a
  half-applied write.

Resolution yields a ResolvedRule, a tagged variant over the three kinds that
the walker invokes through a single ``apply`` call site.
"""
from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from types import MappingProxyType
from typing import Any, Callable, Mapping

from tagvalidator.core.errors import (
    AppError,
    Err,
    ErrorCode,
    Ok,
    Result,
    malformed_parameters,
    unknown_rule,
)
from tagvalidator.core.logging import registry_logger

from . import predicates as p
from .parser import split_top_level
from .rules import OPTIONAL_MARKER, REQUIRED_MARKER, SKIP_MARKER, RuleInvocation

log = registry_logger()

SimplePredicate = Callable[[str], bool]
ParamPredicate = Callable[..., bool]
CustomValidatorFn = Callable[[Any, Any, Any], Any]

_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of applying one rule to one value."""
    is_valid: bool
    error_message: str | None = None
    error_code: ErrorCode | None = None
    constraint: str | None = None
    custom_message: bool = False

    @classmethod
    def valid(cls) -> ValidationResult: return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str, code: ErrorCode = ErrorCode.E2005_CONSTRAINT_VIOLATION, *,
                constraint: str | None = None, custom_message: bool = False) -> ValidationResult:
        return cls(is_valid=False, error_message=message, error_code=code, constraint=constraint,
            custom_message=custom_message)


class RuleKind(Enum):
    """The closed set of predicate shapes."""
    SIMPLE = auto()
    PARAMETERIZED = auto()
    CUSTOM = auto()


def as_text(value: Any) -> str:
    """Textual form handed to simple and parameterized predicates."""
    if isinstance(value, str): return value
    if isinstance(value, bool): return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)): return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, Enum): return as_text(value.value)
    if isinstance(value, float) and value.is_integer(): return str(int(value))
    if isinstance(value, Decimal): return format(value, "f")
    return str(value)


def format_message(template: str, value: Any, rule: str) -> str:
    """Fill ``%s`` placeholders with the value, then the rule name."""
    args = iter((as_text(value), rule))
    return re.sub(r"%s", lambda _: next(args, "%s"), template)


@dataclass(frozen=True, slots=True)
class ParamRule:
    """Parameterized predicate plus the pattern its declaration must match."""
    predicate: ParamPredicate
    pattern: re.Pattern
    syntax: str
    convert: Callable[[tuple[str, ...]], tuple] = tuple

    def extract(self, raw: str) -> tuple[str, ...] | None:
        return match.groups() if (match := self.pattern.match(raw)) else None


@dataclass(frozen=True, slots=True)
class ResolvedRule:
    """A rule bound to its implementation, ready to run."""
    kind: RuleKind
    invocation: RuleInvocation
    fn: Callable
    args: tuple = ()

    @property
    def is_custom(self) -> bool: return self.kind is RuleKind.CUSTOM

    @property
    def name(self) -> str: return self.invocation.display_name

    def apply(self, ctx: Any, value: Any, root: Any) -> ValidationResult:
        """Run the rule. Custom rules see the raw value and root; the rest see text."""
        inv = self.invocation
        if self.is_custom:
            try:
                passed = bool(self.fn(ctx, value, root))
            except Exception as e:
                return ValidationResult.invalid(str(e) or type(e).__name__, ErrorCode.E2006_CUSTOM_VALIDATOR_ERROR,
                    constraint=self.name)
        else:
            try:
                passed = bool(self.fn(as_text(value), *self.args))
            except (ValueError, TypeError, ArithmeticError) as e:
                # Text the predicate cannot interpret fails, negated or not.
                log.debug("predicate_error", rule=self.name, error=str(e))
                return self._failed(value, "does not validate")

        if passed != inv.negated: return ValidationResult.valid()
        return self._failed(value, "does validate" if inv.negated else "does not validate")

    def _failed(self, value: Any, verb: str) -> ValidationResult:
        inv = self.invocation
        if inv.custom_message is not None:
            return ValidationResult.invalid(format_message(inv.custom_message, value, inv.name),
                constraint=self.name, custom_message=True)
        return ValidationResult.invalid(f"{as_text(value)} {verb} as {inv.name}", constraint=self.name)


# ============================================================================
# Built-in tables
# ============================================================================

def _ints(groups: tuple[str, ...]) -> tuple: return tuple(int(g) for g in groups)

def _floats(groups: tuple[str, ...]) -> tuple: return tuple(float(g) for g in groups)

def _regex(groups: tuple[str, ...]) -> tuple: return (re.compile(groups[0]),)


def _options(groups: tuple[str, ...]) -> tuple:
    if (options := split_top_level(groups[0], ",")) is None: raise ValueError("unbalanced parentheses")
    return tuple(options)


_NUMBER = r"(-?\d+(?:\.\d+)?)"

SIMPLE_RULES: Mapping[str, SimplePredicate] = MappingProxyType({
    "email": p.is_email,
    "url": p.is_url,
    "dialstring": p.is_dial_string,
    "requrl": p.is_request_url,
    "requri": p.is_request_uri,
    "alpha": p.is_alpha,
    "utfletter": p.is_utf_letter,
    "alphanum": p.is_alphanumeric,
    "utfletternum": p.is_utf_letter_numeric,
    "numeric": p.is_numeric,
    "utfnumeric": p.is_utf_numeric,
    "utfdigit": p.is_utf_digit,
    "hexadecimal": p.is_hexadecimal,
    "hexcolor": p.is_hexcolor,
    "rgbcolor": p.is_rgbcolor,
    "lowercase": p.is_lower_case,
    "uppercase": p.is_upper_case,
    "int": p.is_int,
    "float": p.is_float,
    "null": p.is_null,
    "uuid": p.is_uuid,
    "uuidv3": p.is_uuid_v3,
    "uuidv4": p.is_uuid_v4,
    "uuidv5": p.is_uuid_v5,
    "creditcard": p.is_credit_card,
    "isbn10": p.is_isbn10,
    "isbn13": p.is_isbn13,
    "json": p.is_json,
    "multibyte": p.is_multibyte,
    "ascii": p.is_ascii,
    "printableascii": p.is_printable_ascii,
    "fullwidth": p.is_full_width,
    "halfwidth": p.is_half_width,
    "variablewidth": p.is_variable_width,
    "base64": p.is_base64,
    "datauri": p.is_data_uri,
    "ip": p.is_ip,
    "port": p.is_port,
    "ipv4": p.is_ipv4,
    "ipv6": p.is_ipv6,
    "dns": p.is_dns_name,
    "host": p.is_host,
    "mac": p.is_mac,
    "latitude": p.is_latitude,
    "longitude": p.is_longitude,
    "ssn": p.is_ssn,
    "semver": p.is_semver,
    "rfc3339": p.is_rfc3339,
    "rfc3339WithoutZone": p.is_rfc3339_without_zone,
    "ISO3166Alpha2": p.is_iso3166_alpha2,
    "ISO3166Alpha3": p.is_iso3166_alpha3,
    "ISO4217": p.is_iso4217,
})

PARAM_RULES: Mapping[str, ParamRule] = MappingProxyType({
    "length": ParamRule(p.byte_length, re.compile(r"^length\((\d+)\|(\d+)\)$"), "length(<min>|<max>)", _ints),
    "runelength": ParamRule(p.rune_length, re.compile(r"^runelength\((\d+)\|(\d+)\)$"),
        "runelength(<min>|<max>)", _ints),
    "stringlength": ParamRule(p.rune_length, re.compile(r"^stringlength\((\d+)\|(\d+)\)$"),
        "stringlength(<min>|<max>)", _ints),
    "range": ParamRule(p.in_range, re.compile(rf"^range\({_NUMBER}\|{_NUMBER}\)$"), "range(<min>|<max>)", _floats),
    "in": ParamRule(p.is_in, re.compile(r"^in\((.*)\)$", re.DOTALL), "in(<v1>,<v2>,...)", _options),
    "matches": ParamRule(p.matches, re.compile(r"^matches\((.+)\)$", re.DOTALL), "matches(<regex>)", _regex),
})


class ValidatorRegistry:
    """Name -> validation logic lookup for one Validator instance."""

    def __init__(
        self,
        simple: Mapping[str, SimplePredicate] = SIMPLE_RULES,
        parameterized: Mapping[str, ParamRule] = PARAM_RULES,
    ):
        self.simple = simple
        self.parameterized = parameterized
        self._custom: Mapping[str, CustomValidatorFn] = MappingProxyType({})
        self._lock = threading.Lock()

    def register_custom(self, name: str, fn: CustomValidatorFn) -> None:
        """Store fn under name, replacing any earlier entry."""
        if not isinstance(name, str) or not _NAME_RE.match(name):
            raise ValueError(f"Invalid validator name {name!r}: must be an identifier")
        if name in (REQUIRED_MARKER, OPTIONAL_MARKER, SKIP_MARKER):
            raise ValueError(f"Validator name {name!r} is reserved")
        if not callable(fn):
            raise TypeError(f"Custom validator {name!r} must be callable, got {type(fn).__name__}")

        with self._lock:
            replaced = name in self._custom
            self._custom = MappingProxyType({**self._custom, name: fn})
        log.info("custom_validator_registered", name=name, replaced=replaced)

    def custom_snapshot(self) -> Mapping[str, CustomValidatorFn]:
        """The custom table as of now; later registrations publish a new mapping."""
        return self._custom

    def resolve_simple(self, name: str) -> SimplePredicate | None: return self.simple.get(name)

    def resolve_parameterized(self, name: str) -> ParamRule | None: return self.parameterized.get(name)

    def resolve_custom(self, name: str) -> CustomValidatorFn | None: return self._custom.get(name)

    def resolve(
        self,
        invocation: RuleInvocation,
        custom: Mapping[str, CustomValidatorFn] | None = None,
    ) -> Result[ResolvedRule, AppError]:
        """Bind an invocation to its implementation.

        Custom validators shadow built-ins of the same name. Unknown names
        yield E8001_UNKNOWN_RULE; parameters that do not fit the rule's
        pattern yield E8002_MALFORMED_PARAMETERS.
        """
        name = invocation.name
        table = self._custom if custom is None else custom

        if (fn := table.get(name)) is not None:
            return Ok(ResolvedRule(RuleKind.CUSTOM, invocation, fn))

        if (fn := self.simple.get(name)) is not None:
            if invocation.raw_params is not None:
                return malformed_parameters(name, invocation.raw, f"{name} without parameters", origin="registry")
            return Ok(ResolvedRule(RuleKind.SIMPLE, invocation, fn))

        if (rule := self.parameterized.get(name)) is not None:
            if (groups := rule.extract(invocation.raw)) is None:
                return malformed_parameters(name, invocation.raw, rule.syntax, origin="registry")
            try:
                args = rule.convert(groups)
            except (ValueError, re.error) as e:
                error = malformed_parameters(name, invocation.raw, rule.syntax, origin="registry").unwrap_err()
                return Err(error.chain(e))
            return Ok(ResolvedRule(RuleKind.PARAMETERIZED, invocation, rule.predicate, args))

        return unknown_rule(invocation.display_name, origin="registry")

