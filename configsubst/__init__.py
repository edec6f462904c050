"""Interpolation of ${ENV} references and user placeholders in config values."""

from .exceptions import InterpolationError
from .processing import process_config_object
from .variables import (
    ALLOWED_USER_FIELDS,
    EnvironmentResolver,
    UserRecord,
    extract_env_variable,
    extract_variable_name,
    process_user_placeholders,
)

__version__ = '0.1.0'

__all__ = [
    'ALLOWED_USER_FIELDS',
    'EnvironmentResolver',
    'InterpolationError',
    'UserRecord',
    'extract_env_variable',
    'extract_variable_name',
    'process_config_object',
    'process_user_placeholders',
]
