"""Builders for configuration errors (E8xxx).

Each returns Err(AppError) so resolution code can ``return`` it directly.
Messages are what ends up in FieldError.message, so they are written for
the person who wrote the broken declaration.
"""
from .types import AppError, Err, ErrorCode, ErrorContext

NOT_APPLICABLE_MESSAGE = "The following validator is invalid or can't be applied to the field: {rule!r}"


def config_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E8000_CONFIGURATION_GENERIC,
    rule: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Configuration error for a broken rule declaration. None-valued metadata is dropped."""
    meta = {"rule": rule, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def unknown_rule(rule: str, origin: str = "") -> Err[AppError]:
    return config_error(NOT_APPLICABLE_MESSAGE.format(rule=rule), code=ErrorCode.E8001_UNKNOWN_RULE, rule=rule,
        origin=origin)


def malformed_parameters(rule: str, raw: str, expected: str, origin: str = "") -> Err[AppError]:
    return config_error(
        f"Malformed parameters for validator {rule!r}: got {raw!r}, expected {expected}",
        code=ErrorCode.E8002_MALFORMED_PARAMETERS,
        rule=rule,
        origin=origin,
        raw=raw,
        expected=expected,
    )


def unsupported_type(type_name: str, rule: str | None = None, origin: str = "") -> Err[AppError]:
    message = (f"Validator {rule!r} can't be applied to values of type {type_name}" if rule
               else f"function only accepts described records; got {type_name}")
    return config_error(message, code=ErrorCode.E8003_UNSUPPORTED_TYPE, rule=rule, origin=origin, type=type_name)


def rule_not_applicable(rule: str, type_name: str, origin: str = "") -> Err[AppError]:
    return config_error(NOT_APPLICABLE_MESSAGE.format(rule=rule), code=ErrorCode.E8004_RULE_NOT_APPLICABLE,
        rule=rule, origin=origin, type=type_name)


def tag_syntax(tag: str, reason: str, position: int | None = None, origin: str = "") -> Err[AppError]:
    return config_error(
        f"Invalid rule declaration {tag!r}: {reason}",
        code=ErrorCode.E8005_TAG_SYNTAX,
        origin=origin,
        tag=tag,
        position=position,
    )
