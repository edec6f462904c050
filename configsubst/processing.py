"""Config-object resolution: env variables then user placeholders, per key."""

import logging
from collections import abc
from typing import Any, Dict, Mapping, Optional

from .variables.placeholders import process_user_placeholders
from .variables.substitution import EnvironmentResolver

logger = logging.getLogger(__name__)

# Value assigned to a key whose resolution failed
FAILED_VALUE = 'null'


def process_config_object(
    obj: Any,
    user: Any = None,
    environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """
    Resolve every value of a flat config mapping (headers, env blocks).

    Each value is passed through environment resolution and then user
    placeholder resolution. A key that fails to resolve is set to 'null';
    the remaining keys are still processed.

    Args:
        obj: Mapping of key to template string
        user: Optional user record for {{LIBRECHAT_USER_*}} placeholders
        environ: Environment source; os.environ when omitted

    Returns:
        New dict with the same keys; {} when obj is not a mapping
    """
    processed: Dict[str, Any] = {}

    if not isinstance(obj, abc.Mapping):
        return processed

    resolver = EnvironmentResolver(environ)

    for key, value in obj.items():
        try:
            processed_value = resolver.resolve(value)
            processed[key] = process_user_placeholders(processed_value, user)
        except Exception as e:
            logger.warning(f"Failed to resolve config value for key '{key}': {e}")
            processed[key] = FAILED_VALUE

    if resolver.unresolved:
        logger.debug(f"Unresolved environment variables: {sorted(resolver.unresolved)}")

    return processed
