"""Service for managing the roster of registered users."""

from __future__ import annotations

from dataclasses import dataclass, replace

from skillset_app.core.models import User


@dataclass(slots=True)
class RegisteredUser:
    """Roster entry pairing a user with the password it signs in with."""

    user: User
    password: str


class UserRoster:
    """Linear-scan roster; email uniqueness is only checked by callers.

    Users handed out are copies, so editing one never changes the roster.
    """

    def __init__(self, entries: list[RegisteredUser] | None = None) -> None:
        self._entries: list[RegisteredUser] = list(entries or [])

    def get_entries(self) -> list[RegisteredUser]:
        return list(self._entries)

    def get_users(self) -> list[User]:
        return [replace(entry.user) for entry in self._entries]

    def has_email(self, email: str) -> bool:
        return any(entry.user.email == email for entry in self._entries)

    def find_by_credentials(self, email: str, password: str) -> User | None:
        for entry in self._entries:
            if entry.user.email == email and entry.password == password:
                return replace(entry.user)
        return None

    def add(self, user: User, password: str) -> None:
        self._entries.append(RegisteredUser(user=replace(user), password=password))

    def replace_user(self, user: User) -> bool:
        """Swap the stored user with the same id; returns False when absent."""
        for index, entry in enumerate(self._entries):
            if entry.user.id == user.id:
                self._entries[index] = replace(entry, user=replace(user))
                return True
        return False
