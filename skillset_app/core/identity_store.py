"""Session user and registered roster, persisted to a key-value storage."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from skillset_app.constants.storage_constants import AUTH_STORAGE_KEY
from skillset_app.core.auth_snapshot import decode_auth_state, encode_auth_state
from skillset_app.core.clock import Clock, IdFactory, new_id, utc_now
from skillset_app.core.models import User, UserRole
from skillset_app.core.seed_data import seed_roster
from skillset_app.core.services.change_notifier import ChangeListener, ChangeNotifier
from skillset_app.core.services.user_roster import RegisteredUser, UserRoster
from skillset_app.core.storage import KeyValueStorage, MemoryStorage

logger = logging.getLogger(__name__)


class IdentityStore:
    """Holds who is signed in and who may sign in.

    State is rehydrated from ``storage`` on construction and written back
    synchronously after every mutation. Credentials are compared in plain text
    and failures are reported as ``False`` only.
    """

    def __init__(
        self,
        storage: KeyValueStorage | None = None,
        *,
        storage_key: str = AUTH_STORAGE_KEY,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
        seed_users: list[RegisteredUser] | None = None,
    ) -> None:
        self._storage: KeyValueStorage = storage if storage is not None else MemoryStorage()
        self._storage_key = storage_key
        self._clock = clock
        self._id_factory = id_factory
        self._notifier = ChangeNotifier()

        self._user: User | None = None
        self._is_authenticated: bool = False
        self._roster = UserRoster(seed_users if seed_users is not None else seed_roster())
        self._rehydrate()

    # --- State access ---

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._is_authenticated

    def users(self) -> list[User]:
        return self._roster.get_users()

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        return self._notifier.subscribe(listener)

    # --- Operations ---

    def login(self, email: str, password: str) -> bool:
        user = self._roster.find_by_credentials(email, password)
        if user is None:
            logger.info("Sign-in rejected for %s", email)
            return False
        self._user = user
        self._is_authenticated = True
        logger.info("Signed in %s", email)
        self._commit("login")
        return True

    def register(self, name: str, email: str, password: str, role: UserRole | str) -> bool:
        if self._roster.has_email(email):
            logger.info("Registration rejected, email already used: %s", email)
            return False
        resolved_role = UserRole(role)
        user = User(
            id=self._id_factory(),
            email=email,
            name=name,
            role=resolved_role,
            created_at=self._clock(),
        )
        self._roster.add(user, password)
        self._user = user
        self._is_authenticated = True
        logger.info("Registered %s as %s", email, resolved_role.value)
        self._commit("register")
        return True

    def logout(self) -> None:
        self._user = None
        self._is_authenticated = False
        self._commit("logout")

    def update_profile(self, **changes: Any) -> None:
        """Merge ``changes`` into the session user; nothing happens when signed out."""
        if self._user is None:
            return
        if "role" in changes:
            changes["role"] = UserRole(changes["role"])
        updated = replace(self._user, **changes)
        self._user = updated
        self._roster.replace_user(updated)
        self._commit("update_profile")

    # --- Persistence ---

    def _rehydrate(self) -> None:
        raw = self._storage.get_item(self._storage_key)
        if raw is None:
            return
        record = decode_auth_state(raw)
        if record is None:
            return
        self._roster = UserRoster([entry.to_entry() for entry in record.users])
        self._user = record.user.to_user() if record.user is not None else None
        self._is_authenticated = record.is_authenticated and self._user is not None

    def _persist(self) -> None:
        document = encode_auth_state(self._user, self._is_authenticated, self._roster.get_entries())
        self._storage.set_item(self._storage_key, document)

    def _commit(self, operation: str) -> None:
        self._persist()
        self._notifier.notify(operation)
