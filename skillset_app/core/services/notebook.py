"""Service for per-course study notes."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any

from skillset_app.core.models import Note


class Notebook:
    """Free-form notes; the last write wins."""

    def __init__(self) -> None:
        self._notes: list[Note] = []

    def add(self, note: Note) -> None:
        self._notes.append(note)

    def update(self, note_id: str, changes: dict[str, Any], updated_at: datetime) -> Note | None:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                updated = replace(note, **{**changes, "updated_at": updated_at})
                self._notes[index] = updated
                return updated
        return None

    def delete(self, note_id: str) -> None:
        self._notes = [note for note in self._notes if note.id != note_id]

    def get_user_notes(self, user_id: str) -> list[Note]:
        return [note for note in self._notes if note.user_id == user_id]

    def get_course_notes(self, user_id: str, course_id: str) -> list[Note]:
        return [note for note in self._notes if note.user_id == user_id and note.course_id == course_id]

    def search(self, user_id: str, course_id: str, term: str) -> list[Note]:
        """Case-insensitive match on title or content; an empty term matches all."""
        needle = term.strip().lower()
        notes = self.get_course_notes(user_id, course_id)
        if not needle:
            return notes
        return [note for note in notes if needle in note.title.lower() or needle in note.content.lower()]
