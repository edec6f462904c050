"""
Environment variable substitution.
Handles ${NAME} resolution against a read-only environment mapping.
"""

import logging
import os
import re
from typing import Any, List, Mapping, Optional, Set, Tuple

from ..exceptions import InterpolationError

logger = logging.getLogger(__name__)


# Whole-string token; NAME is greedy and may contain '}'
SINGLE_VAR_PATTERN = re.compile(r'\$\{(.+)\}')

# Token occurring anywhere in a string
VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')


def extract_variable_name(value: Optional[str]) -> Optional[str]:
    """
    Extract the variable name from a string that is exactly one ${NAME} token.

    Args:
        value: Candidate template string

    Returns:
        NAME, or None when the (stripped) value is not a single token
    """
    if not value:
        return None

    match = SINGLE_VAR_PATTERN.fullmatch(value.strip())
    return match.group(1) if match else None


class EnvironmentResolver:
    """
    Replaces ${NAME} tokens with values from an environment mapping.

    Unset or empty variables keep their literal token text so that
    misconfiguration stays visible in the resolved value.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the resolver.

        Args:
            environ: Environment source; os.environ when omitted
        """
        self.environ = environ if environ is not None else os.environ
        self.unresolved: Set[str] = set()

    def resolve(self, value: Any) -> Any:
        """
        Resolve every ${NAME} token in a string.

        Args:
            value: Template string

        Returns:
            The stripped string with tokens substituted; falsy values unchanged

        Raises:
            InterpolationError: If value is a non-empty non-string
        """
        if not value:
            return value

        if not isinstance(value, str):
            raise InterpolationError(value)

        trimmed = value.strip()

        # Whole value is a single variable
        var_name = extract_variable_name(trimmed)
        if var_name is not None:
            env_value = self.environ.get(var_name)
            if env_value:
                return env_value

        matches: List[Tuple[int, int, str]] = [
            (m.start(), len(m.group(0)), m.group(1))
            for m in VAR_PATTERN.finditer(trimmed)
        ]

        result = trimmed
        # Rightmost first so earlier offsets stay valid
        for start, length, name in reversed(matches):
            env_value = self.environ.get(name)
            if not env_value:
                self.unresolved.add(name)
                logger.debug(f"Environment variable not set, keeping literal: {name}")
                env_value = trimmed[start:start + length]

            result = result[:start] + env_value + result[start + length:]

        return result


def extract_env_variable(
    value: Any,
    environ: Optional[Mapping[str, str]] = None
) -> Any:
    """Resolve ${NAME} tokens in value against environ (os.environ by default)."""
    return EnvironmentResolver(environ).resolve(value)
