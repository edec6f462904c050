"""
User placeholder substitution.
Handles {{LIBRECHAT_USER_<FIELD>}} tokens for a fixed allow-list of user fields.
"""

import logging
from collections import abc
from dataclasses import dataclass, field
from typing import Any, Mapping

logger = logging.getLogger(__name__)


# Non-sensitive string/boolean fields eligible for substitution, in order
ALLOWED_USER_FIELDS = (
    'name',
    'username',
    'email',
    'provider',
    'role',
    'googleId',
    'facebookId',
    'openidId',
    'samlId',
    'ldapId',
    'githubId',
    'discordId',
    'appleId',
    'emailVerified',
    'twoFactorEnabled',
    'termsAccepted',
)

USER_ID_PLACEHOLDER = '{{LIBRECHAT_USER_ID}}'


def user_placeholder(field_name: str) -> str:
    """Build the placeholder token for an allow-listed field."""
    return '{{LIBRECHAT_USER_' + field_name.upper() + '}}'


@dataclass(frozen=True)
class UserRecord:
    """
    Narrow view of an authenticated user.

    Holds the identifier plus allow-listed fields only, so the full user
    entity never reaches the resolver.
    """
    id: Any = None
    fields: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'UserRecord':
        """
        Build a record from a user dict, dropping non-allow-listed keys.

        Args:
            data: User document (e.g. decoded session payload)

        Returns:
            UserRecord with id and allow-listed fields
        """
        fields = {name: data[name] for name in ALLOWED_USER_FIELDS if name in data}
        return cls(id=data.get('id'), fields=fields)

    @classmethod
    def from_object(cls, obj: Any) -> 'UserRecord':
        """Build a record from an object exposing user fields as attributes."""
        fields = {
            name: getattr(obj, name)
            for name in ALLOWED_USER_FIELDS
            if hasattr(obj, name)
        }
        return cls(id=getattr(obj, 'id', None), fields=fields)

    def get(self, name: str, default: Any = None) -> Any:
        """Return an allow-listed field value, or default when absent."""
        return self.fields.get(name, default)


def _user_value(user: Any, name: str) -> Any:
    if isinstance(user, (UserRecord, abc.Mapping)):
        return user.get(name)
    return getattr(user, name, None)


def _user_id(user: Any) -> Any:
    if isinstance(user, abc.Mapping):
        return user.get('id')
    return getattr(user, 'id', None)


def _to_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def process_user_placeholders(value: Any, user: Any = None) -> Any:
    """
    Replace user field placeholders in a string.

    Args:
        value: String possibly containing {{LIBRECHAT_USER_*}} tokens
        user: UserRecord, mapping, or object with user attributes

    Returns:
        String with placeholders replaced; value unchanged when there is
        no user or value is not a string
    """
    if user is None or not isinstance(value, str):
        return value

    # The id only replaces a value that is exactly the id token
    if value == USER_ID_PLACEHOLDER:
        user_id = _user_id(user)
        if user_id is not None:
            return _to_text(user_id)

    for name in ALLOWED_USER_FIELDS:
        placeholder = user_placeholder(name)
        if placeholder in value:
            logger.debug(f"Substituting user field: {name}")
            value = value.replace(placeholder, _to_text(_user_value(user, name)))

    return value
