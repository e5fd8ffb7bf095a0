"""Tag Parser

Turns one field's raw rule declaration into a RuleSet.

Declaration syntax:
    name1,name2(param1|param2)~custom message,!name3,required

- Tokens are separated by top-level commas; commas inside parentheses
  belong to the parameter list (``in(a,b,c)``).
- ``~`` starts a custom failure message that runs to the end of the token.
  Parentheses inside a message are plain text (``numeric~digits only :(``).
- ``!`` negates a rule.
- ``-`` skips the field, ``required``/``optional`` control absent values.
- A backslash escapes the next character so it is ignored for nesting,
  e.g. ``matches(^\\($)``.

Parsing never raises for a bad declaration; it returns Err(AppError) with
code E8005_TAG_SYNTAX.
"""
from __future__ import annotations

import re

from tagvalidator.core.errors import AppError, Err, Ok, Result, sequence_results, tag_syntax
from tagvalidator.core.logging import parser_logger

from .rules import (
    MESSAGE_SEPARATOR,
    NEGATION_PREFIX,
    OPTIONAL_MARKER,
    REQUIRED_MARKER,
    SKIP_MARKER,
    Marker,
    RuleInvocation,
    RuleSet,
)

log = parser_logger()

_RULE_RE = re.compile(r"^(?P<neg>!?)(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:\((?P<params>.*)\))?$", re.DOTALL)
_MARKERS = frozenset({SKIP_MARKER, REQUIRED_MARKER, OPTIONAL_MARKER})


def split_top_level(text: str, separator: str, literal_after: str | None = None) -> list[str] | None:
    """Split on separator outside parentheses. None if parentheses are unbalanced.

    With literal_after, a depth-0 occurrence of that character starts literal
    text (a custom message) whose parentheses are not counted, up to the next
    separator.
    """
    parts, depth, start, i, literal = [], 0, 0, 0, False
    while i < len(text):
        char = text[i]
        if literal:
            if char == separator:
                parts.append(text[start:i])
                start, literal = i + 1, False
            i += 1
            continue
        if char == "\\":
            i += 2
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0: return None
        elif depth == 0 and char == separator:
            parts.append(text[start:i])
            start = i + 1
        elif depth == 0 and char == literal_after:
            literal = True
        i += 1
    if depth != 0: return None
    parts.append(text[start:])
    return parts


def _split_message(token: str) -> tuple[str, str | None]:
    """Split ``rule~message`` at the first top-level tilde."""
    depth, i = 0, 0
    while i < len(token):
        char = token[i]
        if char == "\\":
            i += 2
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == MESSAGE_SEPARATOR and depth == 0:
            return token[:i], token[i + 1:]
        i += 1
    return token, None


def parse_token(tag: str, token: str, order: int) -> Result[RuleInvocation | Marker, AppError]:
    """Parse one comma-separated token of a declaration."""
    body, message = _split_message(token.strip())
    body = body.strip()
    if not body:
        return tag_syntax(tag, "empty rule", position=order, origin="parser")
    if body in _MARKERS:
        return Ok(Marker(name=body, order=order, custom_message=message))

    if not (match := _RULE_RE.match(body)):
        return tag_syntax(tag, f"cannot parse rule {body!r}", position=order, origin="parser")

    raw_params = match.group("params")
    params: tuple[str, ...] = ()
    if raw_params is not None:
        if (split := split_top_level(raw_params, ",")) is None:
            return tag_syntax(tag, f"unbalanced parentheses in {body!r}", position=order, origin="parser")
        params = tuple(p.strip() for p in split)

    return Ok(RuleInvocation(
        name=match.group("name"),
        order=order,
        params=params,
        custom_message=message,
        negated=match.group("neg") == NEGATION_PREFIX,
        raw_params=raw_params,
    ))


def parse_tag(tag: str | None) -> Result[RuleSet, AppError]:
    """Parse a field's rule declaration into a RuleSet.

    Args:
        tag: Raw declaration, e.g. ``"required,length(1|64)~too long,email"``

    Returns:
        Ok(RuleSet) or Err(AppError) with code E8005_TAG_SYNTAX
    """
    if tag is None or not tag.strip():
        return Ok(RuleSet.empty())

    if (tokens := split_top_level(tag, ",", literal_after=MESSAGE_SEPARATOR)) is None:
        log.warning("tag_unbalanced", tag=tag)
        return tag_syntax(tag, "unbalanced parentheses", origin="parser")

    match sequence_results([parse_token(tag, token, order) for order, token in enumerate(tokens)]):
        case Err(error):
            log.warning("tag_invalid", tag=tag, reason=error.message)
            return Err(error)
        case Ok(parsed):
            return Ok(RuleSet(
                invocations=tuple(p for p in parsed if isinstance(p, RuleInvocation)),
                markers=tuple(p for p in parsed if isinstance(p, Marker)),
            ))
