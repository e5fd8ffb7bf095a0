"""Declarative Struct Validation

Rules live next to the fields they guard, as short declarations in the
field's metadata. A Validator walks a record depth-first, applies each
field's rules in order and reports every failing field.

Key Features:
- Tag mini-language: ``required,length(1|64)~too long,!null``
- Built-in simple and parameterized rules (email, url, length, range, in, ...)
- Per-validator custom rules receiving (ctx, value, root)
- Nested records, sequences and mappings with indexed error paths
- Configuration errors reported alongside failures (collect or abort)

Usage:
    from tagvalidator.validation import new, tag

    @dataclass
    class Signup:
        email: str = tag("required,email")
        password: str = tag("required,length(8|64)")
        confirm: str = tag("matchespassword~passwords differ")

    v = new()
    v.add_custom_type_tag_fn("matchespassword", lambda ctx, value, root: value == root.password)

    valid, errors = v.validate_struct(Signup("a@b.io", "hunter22", "hunter22"))
"""

# Rule declarations
from .rules import RuleInvocation, RuleSet, Marker
from .parser import parse_tag, split_top_level

# Registry
from .registry import (
    ValidatorRegistry,
    ValidationResult,
    ResolvedRule,
    RuleKind,
    ParamRule,
    SIMPLE_RULES,
    PARAM_RULES,
)

# Field descriptions
from .schema import FieldSpec, Field, tag, describe, register_shape, unregister_shape, is_record

# Errors
from .errors import ErrorKind, FieldError, ValidationErrors, ValidationOutcome, ErrorAccumulator

# Walker and engine
from .walker import StructWalker, is_empty
from .engine import Validator, new

__all__ = [
    "RuleInvocation",
    "RuleSet",
    "Marker",
    "parse_tag",
    "split_top_level",
    "ValidatorRegistry",
    "ValidationResult",
    "ResolvedRule",
    "RuleKind",
    "ParamRule",
    "SIMPLE_RULES",
    "PARAM_RULES",
    "FieldSpec",
    "Field",
    "tag",
    "describe",
    "register_shape",
    "unregister_shape",
    "is_record",
    "ErrorKind",
    "FieldError",
    "ValidationErrors",
    "ValidationOutcome",
    "ErrorAccumulator",
    "StructWalker",
    "is_empty",
    "Validator",
    "new",
]
