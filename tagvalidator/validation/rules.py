"""Parsed rule declarations.

A RuleSet is built fresh from a field's declaration on every validation
call and holds the field's RuleInvocations in declaration order.
"""
from __future__ import annotations

from dataclasses import dataclass, field

SKIP_MARKER = "-"
REQUIRED_MARKER = "required"
OPTIONAL_MARKER = "optional"
MESSAGE_SEPARATOR = "~"
NEGATION_PREFIX = "!"


@dataclass(frozen=True, slots=True)
class RuleInvocation:
    """One parsed rule occurrence on a field."""
    name: str
    order: int
    params: tuple[str, ...] = ()
    custom_message: str | None = None
    negated: bool = False
    raw_params: str | None = None

    @property
    def raw(self) -> str:
        """Rule text without negation or message, e.g. ``length(1|5)``."""
        return self.name if self.raw_params is None else f"{self.name}({self.raw_params})"

    @property
    def display_name(self) -> str:
        return f"{NEGATION_PREFIX}{self.name}" if self.negated else self.name

    def to_tag(self) -> str:
        text = f"{NEGATION_PREFIX if self.negated else ''}{self.raw}"
        return text if self.custom_message is None else f"{text}{MESSAGE_SEPARATOR}{self.custom_message}"


@dataclass(frozen=True, slots=True)
class Marker:
    """A reserved token with structural effect (skip/required/optional)."""
    name: str
    order: int
    custom_message: str | None = None

    def to_tag(self) -> str:
        return self.name if self.custom_message is None else f"{self.name}{MESSAGE_SEPARATOR}{self.custom_message}"


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Ordered rules for one field plus its structural markers."""
    invocations: tuple[RuleInvocation, ...] = ()
    markers: tuple[Marker, ...] = ()

    @classmethod
    def empty(cls) -> RuleSet: return cls()

    def _marker(self, name: str) -> Marker | None:
        return next((m for m in self.markers if m.name == name), None)

    @property
    def skip(self) -> bool: return self._marker(SKIP_MARKER) is not None

    @property
    def required(self) -> bool: return self._marker(REQUIRED_MARKER) is not None

    @property
    def optional(self) -> bool: return self._marker(OPTIONAL_MARKER) is not None

    @property
    def required_message(self) -> str | None:
        return marker.custom_message if (marker := self._marker(REQUIRED_MARKER)) else None

    @property
    def is_empty(self) -> bool: return not self.invocations and not self.markers

    def is_required(self, required_by_default: bool = False) -> bool:
        """Whether an absent value fails this field."""
        return self.required or (required_by_default and not self.optional)

    def to_tag(self) -> str:
        """Canonical declaration text, tokens in their original order."""
        tokens = sorted([*self.invocations, *self.markers], key=lambda t: t.order)
        return ",".join(t.to_tag() for t in tokens)

    def __iter__(self):
        return iter(self.invocations)

    def __len__(self) -> int:
        return len(self.invocations)
