"""Service for enrollments and per-user lesson progress."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from skillset_app.core.models import Course, Enrollment, Progress
from skillset_app.core.scoring import percentage


class EnrollmentTracker:
    """Tracks who joined which course and how far they got.

    Duplicate enrollments for the same (user, course) pair are stored as-is.
    """

    def __init__(
        self,
        enrollments: list[Enrollment] | None = None,
        progress: list[Progress] | None = None,
    ) -> None:
        self._enrollments: list[Enrollment] = list(enrollments or [])
        self._progress: list[Progress] = list(progress or [])

    def get_enrollments(self) -> list[Enrollment]:
        return list(self._enrollments)

    def get_course_enrollments(self, course_id: str) -> list[Enrollment]:
        return [e for e in self._enrollments if e.course_id == course_id]

    def get_user_course_ids(self, user_id: str) -> set[str]:
        return {e.course_id for e in self._enrollments if e.user_id == user_id}

    def is_enrolled(self, user_id: str, course_id: str) -> bool:
        return any(e.user_id == user_id and e.course_id == course_id for e in self._enrollments)

    def get_progress(self, user_id: str, course_id: str) -> Progress | None:
        return next(
            (p for p in self._progress if p.user_id == user_id and p.course_id == course_id),
            None,
        )

    def enroll(self, enrollment_id: str, user_id: str, course_id: str, now: datetime) -> Enrollment:
        enrollment = Enrollment(id=enrollment_id, user_id=user_id, course_id=course_id, enrolled_at=now)
        self._enrollments.append(enrollment)
        self._progress.append(Progress(user_id=user_id, course_id=course_id, last_accessed=now))
        return enrollment

    def complete_lesson(self, course: Course | None, user_id: str, lesson_id: str, now: datetime) -> None:
        """Mark ``lesson_id`` complete on every progress record of the pair."""
        if course is None:
            return
        total = len(course.lessons)
        for index, record in enumerate(self._progress):
            if record.user_id != user_id or record.course_id != course.id:
                continue
            completed = list(record.completed_lessons)
            if lesson_id not in completed:
                completed.append(lesson_id)
            self._progress[index] = replace(
                record,
                completed_lessons=completed,
                progress_percentage=percentage(len(completed), total),
                last_accessed=now,
            )
