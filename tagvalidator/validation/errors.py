"""Validation Error System

Field-qualified errors collected during one walk, and the aggregate
outcome handed back to callers.

Error Format (ValidationErrors.to_dict):
{
    "error": {
        "type": "validation_error",
        "message": "Validation failed",
        "error_count": 2,
        "errors": [
            {
                "field": "user.email",
                "rule": "email",
                "kind": "failure",
                "message": "bob does not validate as email"
            },
            {
                "field": "user.age",
                "rule": "between(1|2)",
                "kind": "configuration",
                "message": "The following validator is invalid or can't be applied to the field: 'between'"
            }
        ]
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from tagvalidator.core.config import ConfigErrorMode
from tagvalidator.core.errors import AppError, ErrorCode


class ErrorKind(str, Enum):
    """Whether an entry is bad data or a bad rule declaration."""
    FAILURE = "failure"
    CONFIGURATION = "configuration"
    UNSUPPORTED_TYPE = "unsupported_type"

    @property
    def is_configuration(self) -> bool: return self is not ErrorKind.FAILURE

    @classmethod
    def for_code(cls, code: ErrorCode) -> ErrorKind:
        if code is ErrorCode.E8003_UNSUPPORTED_TYPE: return cls.UNSUPPORTED_TYPE
        return cls.CONFIGURATION if code.is_configuration else cls.FAILURE


@dataclass(frozen=True, slots=True)
class FieldError:
    """One failing field.

    - path: dotted path to the field (e.g., "order.items[0].sku")
    - field: leaf field name
    - rule: rule that failed, or the broken rule text for configuration errors
    - message: generic or custom-overridden message
    - kind: failure, configuration or unsupported_type
    """
    path: str
    field: str
    rule: str
    message: str
    kind: ErrorKind = ErrorKind.FAILURE
    code: ErrorCode = ErrorCode.E2005_CONSTRAINT_VIOLATION
    custom_message: bool = False
    value: Any = field(default=None, compare=False)

    @property
    def is_configuration(self) -> bool: return self.kind.is_configuration

    def __str__(self) -> str: return f"{self.path}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for reports."""
        return {"field": self.path, "rule": self.rule, "kind": self.kind.value, "code": self.code.name,
            "message": self.message}

    @classmethod
    def from_app_error(cls, path: str, name: str, error: AppError, *, value: Any = None) -> FieldError:
        """Attribute a configuration AppError to a field."""
        rule = error.metadata.get("rule") or error.metadata.get("tag") or ""
        return cls(path=path, field=name, rule=str(rule), message=error.message, kind=ErrorKind.for_code(error.code),
            code=error.code, value=value)


@dataclass(eq=False)
class ValidationErrors(Exception):
    """All errors from one validation run, in traversal order."""
    details: list[FieldError]
    message: str = "Validation failed"

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.details: return self.message
        return "; ".join(str(d) for d in self.details)

    def __iter__(self) -> Iterator[FieldError]: return iter(self.details)

    def __len__(self) -> int: return len(self.details)

    @property
    def field_errors(self) -> dict[str, list[FieldError]]:
        """Group errors by field path."""
        result: dict[str, list[FieldError]] = {}
        for detail in self.details: result.setdefault(detail.path, []).append(detail)
        return result

    @property
    def configuration_errors(self) -> list[FieldError]: return [d for d in self.details if d.is_configuration]

    @property
    def first_error(self) -> FieldError | None: return self.details[0] if self.details else None

    def to_app_error(self) -> AppError:
        """Convert to AppError for host error handling."""
        code = (ErrorCode.E8000_CONFIGURATION_GENERIC if self.configuration_errors
                else ErrorCode.E2000_VALIDATION_GENERIC)
        if len(self.details) == 1:
            d = self.details[0]
            return AppError(code=code, message=str(d), metadata={"field": d.path, "rule": d.rule, "kind": d.kind.value})
        return AppError(code=code, message=f"Validation failed: {len(self.details)} errors",
            metadata={"error_count": len(self.details), "errors": [d.to_dict() for d in self.details]})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for reports."""
        return {"error": {"type": "validation_error", "message": self.message, "error_count": len(self.details),
            "errors": [d.to_dict() for d in self.details]}}


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result of validating one value.

    Unpacks as ``valid, errors = outcome``.
    """
    valid: bool
    errors: tuple[FieldError, ...] = ()

    def __iter__(self) -> Iterator:
        yield self.valid
        yield self.errors

    def __bool__(self) -> bool: return self.valid

    @property
    def error(self) -> ValidationErrors | None:
        return ValidationErrors(list(self.errors)) if self.errors else None

    @property
    def has_configuration_errors(self) -> bool: return any(e.is_configuration for e in self.errors)

    def raise_if_invalid(self) -> None:
        if (error := self.error) is not None: raise error


@dataclass
class ErrorAccumulator:
    """Collects FieldErrors in traversal order.

    Failures never stop the walk. Configuration errors stop it when the
    mode is ABORT; add() returns False to tell the walker to unwind.
    """
    mode: ConfigErrorMode = ConfigErrorMode.COLLECT
    _errors: list[FieldError] = field(default_factory=list)
    _aborted: bool = False

    def add(self, detail: FieldError) -> bool:
        """Add error detail. Returns True if the walk should continue."""
        self._errors.append(detail)
        if detail.is_configuration and self.mode == ConfigErrorMode.ABORT: self._aborted = True
        return not self._aborted

    @property
    def aborted(self) -> bool: return self._aborted

    def get_errors(self) -> list[FieldError]: return self._errors.copy()

    def to_outcome(self) -> ValidationOutcome:
        return ValidationOutcome(valid=not self._errors, errors=tuple(self._errors))
