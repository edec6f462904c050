"""
Variable substitution module.
Resolves ${ENV} references and {{LIBRECHAT_USER_*}} placeholders.
"""

from .substitution import EnvironmentResolver, extract_variable_name, extract_env_variable
from .placeholders import ALLOWED_USER_FIELDS, UserRecord, process_user_placeholders

__all__ = [
    'EnvironmentResolver',
    'extract_variable_name',
    'extract_env_variable',
    'ALLOWED_USER_FIELDS',
    'UserRecord',
    'process_user_placeholders',
]
