"""Shared fixtures for tagvalidator tests."""
import pytest

from tagvalidator.core.config import ConfigErrorMode, Settings
from tagvalidator.validation import Validator, new


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def validator(settings) -> Validator:
    return new(settings=settings)


@pytest.fixture
def make_validator(settings):
    """Factory for validators with option overrides."""
    def _make(**options) -> Validator:
        return new(settings=settings, **options)
    return _make


@pytest.fixture
def aborting_validator(make_validator) -> Validator:
    return make_validator(config_error_mode=ConfigErrorMode.ABORT)
