"""Typed errors and Result values.

- ErrorCode: E2xxx for bad data, E8xxx for bad rule declarations
- AppError: error value with code, message, origin and metadata
- Ok / Err: Result variants returned by the parser and registry
- Builders: one constructor per error family, each returning Err(AppError)

Usage:
    from tagvalidator.core.errors import Ok, Err, unknown_rule

    def lookup(name):
        if name not in table:
            return unknown_rule(name, origin="registry")
        return Ok(table[name])

    match lookup("email"):
        case Ok(rule):
            rule.apply(ctx, value, root)
        case Err(error):
            log.warning("rule_configuration_error", code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    sequence_results,
)

from .builders import (
    config_error,
    unknown_rule,
    malformed_parameters,
    unsupported_type,
    rule_not_applicable,
    tag_syntax,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "sequence_results",
    "config_error",
    "unknown_rule",
    "malformed_parameters",
    "unsupported_type",
    "rule_not_applicable",
    "tag_syntax",
]
