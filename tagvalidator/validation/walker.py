"""Struct Walker

Depth-first traversal of a described record, applying each field's rules
in declaration order and handing every failure to an ErrorAccumulator.

Per field:
- ``-`` skips the field.
- Empty values (None, "", 0, False, empty containers) only ever meet the
  required check. Nothing else runs on them and they are not descended into.
- The first failing rule ends the field.
- Records take custom rules only; once those pass the record is walked.
- Sequences and mappings hand custom rules the whole container and apply
  built-in rules to each element (``items[0]``, ``tags[key]``).

Every walk method returns False once the accumulator asks to stop
(ABORT mode after a configuration error) and callers unwind immediately.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterator, Mapping

from tagvalidator.core.errors import AppError, Err, ErrorCode, Ok, rule_not_applicable, unsupported_type
from tagvalidator.core.logging import engine_logger

from .errors import ErrorAccumulator, ErrorKind, FieldError
from .parser import parse_tag
from .registry import CustomValidatorFn, ResolvedRule, ValidationResult, ValidatorRegistry, as_text, format_message
from .rules import REQUIRED_MARKER, RuleSet
from .schema import DEFAULT_TAG_NAME, describe, is_record

log = engine_logger()

REQUIRED_MESSAGE = "non zero value required"

_SEQUENCES = (list, tuple, set, frozenset)


def is_empty(value: Any) -> bool:
    """Zero value check: None, empty text or container, zero number, False."""
    if value is None: return True
    if isinstance(value, (str, bytes, bytearray)): return len(value) == 0
    if isinstance(value, (bool, int, float, complex, Decimal)): return value == 0
    if isinstance(value, (*_SEQUENCES, Mapping)): return len(value) == 0
    return False


def join_path(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _is_container(value: Any) -> bool: return isinstance(value, (*_SEQUENCES, Mapping))


def _items(value: Any) -> Iterator[tuple[str, Any]]:
    """(path suffix, element) pairs in a stable order."""
    if isinstance(value, Mapping):
        for key, item in sorted(value.items(), key=lambda kv: str(kv[0])):
            yield f"[{key}]", item
    elif isinstance(value, (set, frozenset)):
        for i, item in enumerate(sorted(value, key=as_text)):
            yield f"[{i}]", item
    else:
        for i, item in enumerate(value):
            yield f"[{i}]", item


class StructWalker:
    """One traversal of one root value. Not reusable across calls."""

    def __init__(
        self,
        registry: ValidatorRegistry,
        accumulator: ErrorAccumulator,
        *,
        ctx: Any = None,
        custom: Mapping[str, CustomValidatorFn] | None = None,
        tag_name: str = DEFAULT_TAG_NAME,
        required_by_default: bool = False,
    ):
        self.registry = registry
        self.accumulator = accumulator
        self.ctx = ctx
        self.custom = registry.custom_snapshot() if custom is None else custom
        self.tag_name = tag_name
        self.required_by_default = required_by_default
        self.root: Any = None
        self._active: set[int] = set()

    def walk(self, root: Any) -> None:
        self.root = root
        if root is None: return
        if not is_record(root, self.tag_name):
            error = unsupported_type(type(root).__name__, origin="walker").unwrap_err()
            self._configuration("", "", error, root)
            return
        self._walk_record(root, "")

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def _walk_record(self, record: Any, prefix: str) -> bool:
        if id(record) in self._active:
            log.debug("cycle_skipped", path=prefix or "<root>", type=type(record).__name__)
            return True
        self._active.add(id(record))
        try:
            for spec in describe(type(record), self.tag_name) or ():
                if not self._field(spec.name, join_path(prefix, spec.name), spec.get(record), spec.tag):
                    return False
            return True
        finally:
            self._active.discard(id(record))

    def _field(self, name: str, path: str, value: Any, tag: str | None) -> bool:
        match parse_tag(tag):
            case Err(error):
                return self._configuration(path, name, error, value)
            case Ok(rules):
                pass

        if rules.skip: return True
        if is_empty(value):
            if rules.is_required(self.required_by_default): return self._required(path, name, value, rules)
            return True

        if callable(value) and not is_record(value, self.tag_name):
            if not rules.invocations: return True
            error = unsupported_type(type(value).__name__, rule=rules.invocations[0].display_name,
                origin="walker").unwrap_err()
            return self._configuration(path, name, error, value)

        if is_record(value, self.tag_name):
            return self._record_field(name, path, value, rules)
        if _is_container(value):
            return self._container_field(name, path, value, rules)
        return self._scalar(name, path, value, rules)

    def _record_field(self, name: str, path: str, value: Any, rules: RuleSet) -> bool:
        for invocation in rules:
            match self.registry.resolve(invocation, self.custom):
                case Err(error):
                    return self._configuration(path, name, error, value)
                case Ok(rule) if not rule.is_custom:
                    error = rule_not_applicable(rule.name, type(value).__name__, origin="walker").unwrap_err()
                    return self._configuration(path, name, error, value)
                case Ok(rule):
                    if not (result := rule.apply(self.ctx, value, self.root)).is_valid:
                        return self._failure(path, name, value, result)
        return self._walk_record(value, path)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _container_field(self, name: str, path: str, value: Any, rules: RuleSet) -> bool:
        element_rules: list[ResolvedRule] = []
        for invocation in rules:
            match self.registry.resolve(invocation, self.custom):
                case Err(error):
                    return self._configuration(path, name, error, value)
                case Ok(rule) if rule.is_custom:
                    if not (result := rule.apply(self.ctx, value, self.root)).is_valid:
                        return self._failure(path, name, value, result)
                case Ok(rule):
                    element_rules.append(rule)
        return self._elements(name, path, value, tuple(element_rules))

    def _elements(self, name: str, path: str, container: Any, rules: tuple[ResolvedRule, ...]) -> bool:
        if id(container) in self._active:
            log.debug("cycle_skipped", path=path, type=type(container).__name__)
            return True
        self._active.add(id(container))
        try:
            for suffix, item in _items(container):
                if not self._element(name, f"{path}{suffix}", item, rules): return False
            return True
        finally:
            self._active.discard(id(container))

    def _element(self, name: str, path: str, item: Any, rules: tuple[ResolvedRule, ...]) -> bool:
        if is_empty(item): return True
        if is_record(item, self.tag_name):
            if rules:
                error = rule_not_applicable(rules[0].name, type(item).__name__, origin="walker").unwrap_err()
                return self._configuration(path, name, error, item)
            return self._walk_record(item, path)
        if _is_container(item):
            return self._elements(name, path, item, rules)
        if callable(item):
            if not rules: return True
            error = unsupported_type(type(item).__name__, rule=rules[0].name, origin="walker").unwrap_err()
            return self._configuration(path, name, error, item)
        return self._apply_all(name, path, item, rules)

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def _scalar(self, name: str, path: str, value: Any, rules: RuleSet) -> bool:
        for invocation in rules:
            match self.registry.resolve(invocation, self.custom):
                case Err(error):
                    return self._configuration(path, name, error, value)
                case Ok(rule):
                    if not (result := rule.apply(self.ctx, value, self.root)).is_valid:
                        return self._failure(path, name, value, result)
        return True

    def _apply_all(self, name: str, path: str, value: Any, rules: tuple[ResolvedRule, ...]) -> bool:
        for rule in rules:
            if not (result := rule.apply(self.ctx, value, self.root)).is_valid:
                return self._failure(path, name, value, result)
        return True

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _required(self, path: str, name: str, value: Any, rules: RuleSet) -> bool:
        message = rules.required_message
        return self.accumulator.add(FieldError(
            path=path,
            field=name,
            rule=REQUIRED_MARKER,
            message=REQUIRED_MESSAGE if message is None else format_message(message, value, REQUIRED_MARKER),
            code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
            custom_message=message is not None,
            value=value,
        ))

    def _failure(self, path: str, name: str, value: Any, result: ValidationResult) -> bool:
        return self.accumulator.add(FieldError(
            path=path,
            field=name,
            rule=result.constraint or "",
            message=result.error_message or "",
            kind=ErrorKind.FAILURE,
            code=result.error_code or ErrorCode.E2005_CONSTRAINT_VIOLATION,
            custom_message=result.custom_message,
            value=value,
        ))

    def _configuration(self, path: str, name: str, error: AppError, value: Any) -> bool:
        log.warning("rule_configuration_error", path=path or "<root>", code=error.code.name, reason=error.message)
        return self.accumulator.add(FieldError.from_app_error(path, name, error, value=value))
