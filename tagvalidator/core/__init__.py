# Core module exports
from tagvalidator.core.config import ConfigErrorMode, Settings, get_settings
from tagvalidator.core.logging import (
    configure_logging,
    get_logger,
    generate_correlation_id,
    validation_scope,
    engine_logger,
    registry_logger,
    parser_logger,
)
