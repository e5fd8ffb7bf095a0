"""Error types shared by the parser, registry and walker.

Rule declarations are data supplied by users of the library, so a broken
one must never blow up a validation call. The parser and the registry
return ``Ok``/``Err`` instead of raising; the walker turns every ``Err``
into a field-attributed entry of the outcome.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterable, Iterator, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Numeric error taxonomy.

    E2xxx: the data broke a rule
    E8xxx: the rule declaration itself is broken
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2005_CONSTRAINT_VIOLATION = 2005
    E2006_CUSTOM_VALIDATOR_ERROR = 2006

    # Configuration (E8xxx)
    E8000_CONFIGURATION_GENERIC = 8000
    E8001_UNKNOWN_RULE = 8001
    E8002_MALFORMED_PARAMETERS = 8002
    E8003_UNSUPPORTED_TYPE = 8003
    E8004_RULE_NOT_APPLICABLE = 8004
    E8005_TAG_SYNTAX = 8005

    @property
    def category(self) -> str:
        match self.value // 1000:
            case 8: return "configuration"
            case _: return "validation"

    @property
    def is_configuration(self) -> bool: return self.category == "configuration"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where an error was raised: component name plus a short id for log correlation."""
    origin: str = ""
    correlation_id: str = field(default_factory=lambda: uuid4().hex[:8])


@dataclass(frozen=True, slots=True)
class AppError:
    """A typed error value.

    metadata carries the offending ``rule`` or ``tag`` text so the walker
    can report which declaration broke.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    @property
    def rule(self) -> str | None: return self.metadata.get("rule")

    @property
    def origin(self) -> str: return self.context.origin

    @property
    def is_configuration(self) -> bool: return self.code.is_configuration

    def chain(self, cause: Exception) -> AppError:
        """Same error, recording the exception that produced it."""
        return AppError(self.code, self.message, self.context, self.metadata, cause)

    def to_dict(self) -> dict:
        report = {"code": self.code.name, "category": self.code.category, "message": self.message,
            "origin": self.origin, "metadata": self.metadata}
        if self.cause is not None:
            report["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return {"error": report}

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful Result."""
    value: T

    def is_ok(self) -> bool: return True

    def is_err(self) -> bool: return False

    def unwrap(self) -> T: return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed Result carrying an AppError."""
    error: E

    def is_ok(self) -> bool: return False

    def is_err(self) -> bool: return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E: return self.error

    def __iter__(self) -> Iterator:
        return iter(())


Result = Union[Ok[T], Err[E]]


def sequence_results(results: Iterable[Result[T, AppError]]) -> Result[list[T], AppError]:
    """All values if every Result is Ok, otherwise the first Err."""
    values: list[T] = []
    for result in results:
        if isinstance(result, Err): return result
        values.append(result.value)
    return Ok(values)
