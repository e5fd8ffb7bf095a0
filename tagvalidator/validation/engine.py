"""Validation engine: the public entry point tying settings, registry and walker together."""
from __future__ import annotations

from typing import Any

from tagvalidator.core.config import ConfigErrorMode, Settings, get_settings
from tagvalidator.core.logging import engine_logger, validation_scope

from .errors import ErrorAccumulator, ValidationOutcome
from .registry import CustomValidatorFn, ValidatorRegistry
from .walker import StructWalker

log = engine_logger()


class Validator:
    """Validates described records against their rule declarations.

    Each instance owns its custom validator table. Instances are safe to
    share between threads: validations may run concurrently with each
    other and with add_custom_type_tag_fn().

    Args:
        settings: Base configuration, defaults to get_settings()
        tag_name: Metadata key holding rule declarations
        fields_required_by_default: Treat every field as ``required`` unless ``optional``
        config_error_mode: COLLECT or ABORT on broken declarations
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        registry: ValidatorRegistry | None = None,
        tag_name: str | None = None,
        fields_required_by_default: bool | None = None,
        config_error_mode: ConfigErrorMode | str | None = None,
    ):
        settings = settings or get_settings()
        self.registry = registry or ValidatorRegistry()
        self.tag_name = tag_name or settings.TAG_NAME
        self.fields_required_by_default = (settings.FIELDS_REQUIRED_BY_DEFAULT if fields_required_by_default is None
                                           else fields_required_by_default)
        self.config_error_mode = ConfigErrorMode(config_error_mode or settings.CONFIG_ERROR_MODE)

    def add_custom_type_tag_fn(self, name: str, fn: CustomValidatorFn) -> None:
        """Register fn(ctx, value, root) under name. Visible to every later validation."""
        self.registry.register_custom(name, fn)

    def validate_struct(self, value: Any) -> ValidationOutcome:
        return self.validate_struct_ctx(None, value)

    def validate_struct_ctx(self, ctx: Any, value: Any) -> ValidationOutcome:
        """Validate value, passing ctx untouched to every custom validator.

        Never raises for bad data or bad declarations; both end up in the
        outcome's errors.
        """
        accumulator = ErrorAccumulator(mode=self.config_error_mode)
        walker = StructWalker(
            self.registry,
            accumulator,
            ctx=ctx,
            custom=self.registry.custom_snapshot(),
            tag_name=self.tag_name,
            required_by_default=self.fields_required_by_default,
        )
        with validation_scope(root_type=type(value).__name__):
            walker.walk(value)
            outcome = accumulator.to_outcome()
            log.debug("validation_completed", valid=outcome.valid, error_count=len(outcome.errors),
                aborted=accumulator.aborted)
        return outcome


def new(**options) -> Validator:
    """Create a Validator. Keyword options override the environment settings."""
    return Validator(**options)
