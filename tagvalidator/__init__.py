"""tagvalidator: declarative, tag-driven validation for Python records."""
from tagvalidator.core.config import ConfigErrorMode, Settings, get_settings
from tagvalidator.core.logging import configure_logging
from tagvalidator.validation import (
    Field,
    FieldError,
    ErrorKind,
    ValidationErrors,
    ValidationOutcome,
    Validator,
    new,
    register_shape,
    tag,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigErrorMode",
    "Settings",
    "get_settings",
    "configure_logging",
    "Field",
    "FieldError",
    "ErrorKind",
    "ValidationErrors",
    "ValidationOutcome",
    "Validator",
    "new",
    "register_shape",
    "tag",
]
