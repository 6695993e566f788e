"""Serialized form of the identity store.

The persisted document mirrors what the browser client kept in local storage::

    {"state": {"user": {...} | null, "isAuthenticated": bool, "users": [...]},
     "version": 0}

Keys are camelCase and dates are ISO-8601 strings. Validation goes through
pydantic so dates come back as datetime objects and a broken document is
reported as a single ValidationError.
"""

from __future__ import annotations

import logging
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from skillset_app.constants.storage_constants import AUTH_STORAGE_VERSION
from skillset_app.core.models import User, UserRole
from skillset_app.core.services.user_roster import RegisteredUser

logger = logging.getLogger(__name__)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRecord(_CamelModel):
    """Schema for a user inside the persisted document."""

    id: str
    email: str
    name: str
    role: UserRole
    avatar: str | None = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserRecord":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            avatar=user.avatar,
            created_at=user.created_at,
        )

    def to_user(self) -> User:
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            role=self.role,
            avatar=self.avatar,
            created_at=self.created_at,
        )


class RegisteredUserRecord(UserRecord):
    password: str

    @classmethod
    def from_entry(cls, entry: RegisteredUser) -> "RegisteredUserRecord":
        user = entry.user
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            avatar=user.avatar,
            created_at=user.created_at,
            password=entry.password,
        )

    def to_entry(self) -> RegisteredUser:
        return RegisteredUser(user=self.to_user(), password=self.password)


class AuthStateRecord(_CamelModel):
    user: UserRecord | None = None
    is_authenticated: bool = False
    users: list[RegisteredUserRecord] = Field(default_factory=list)


class PersistedAuthState(BaseModel):
    """Envelope written under the storage key."""

    state: AuthStateRecord
    version: int = AUTH_STORAGE_VERSION


def encode_auth_state(
    user: User | None,
    is_authenticated: bool,
    entries: list[RegisteredUser],
) -> str:
    record = AuthStateRecord(
        user=UserRecord.from_user(user) if user is not None else None,
        is_authenticated=is_authenticated,
        users=[RegisteredUserRecord.from_entry(entry) for entry in entries],
    )
    envelope = PersistedAuthState(state=record)
    return envelope.model_dump_json(by_alias=True)


def decode_auth_state(raw: str) -> AuthStateRecord | None:
    """Parse a persisted document; returns None when it cannot be used."""
    try:
        envelope = PersistedAuthState.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning("Discarding persisted auth state (%d error(s))", exc.error_count())
        return None
    if envelope.version != AUTH_STORAGE_VERSION:
        logger.warning(
            "Discarding persisted auth state with version %s (expected %s)",
            envelope.version,
            AUTH_STORAGE_VERSION,
        )
        return None
    return envelope.state
