"""Service for managing the collection of courses."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any

from skillset_app.core.models import Course, CourseLevel


class CourseNotFoundError(LookupError):
    """Raised when an operation needs a course that is not in the catalog."""


class CourseRepository:
    """Keeps courses in insertion order; no ownership or uniqueness checks."""

    def __init__(self, courses: list[Course] | None = None) -> None:
        self._courses: list[Course] = list(courses or [])

    def get_courses(self) -> list[Course]:
        return list(self._courses)

    def get_public_courses(self) -> list[Course]:
        return [course for course in self._courses if course.is_public]

    def find(self, course_id: str) -> Course | None:
        return next((course for course in self._courses if course.id == course_id), None)

    def require(self, course_id: str) -> Course:
        course = self.find(course_id)
        if course is None:
            raise CourseNotFoundError(f"Course not found: {course_id}")
        return course

    def get_by_instructor(self, instructor_id: str) -> list[Course]:
        return [course for course in self._courses if course.instructor_id == instructor_id]

    def add(self, course: Course) -> None:
        self._courses.append(course)

    def update(self, course_id: str, changes: dict[str, Any], updated_at: datetime) -> Course | None:
        """Merge ``changes`` into the matching course; returns None when absent."""
        for index, course in enumerate(self._courses):
            if course.id == course_id:
                if "level" in changes:
                    changes = {**changes, "level": CourseLevel(changes["level"])}
                updated = replace(course, **{**changes, "updated_at": updated_at})
                self._courses[index] = updated
                return updated
        return None

    def increment_enrolled(self, course_id: str, updated_at: datetime) -> None:
        for index, course in enumerate(self._courses):
            if course.id == course_id:
                self._courses[index] = replace(
                    course,
                    enrolled_students=course.enrolled_students + 1,
                    updated_at=updated_at,
                )

    def delete(self, course_id: str) -> None:
        self._courses = [course for course in self._courses if course.id != course_id]


def validate_course_pricing(level: CourseLevel | str, price: float) -> None:
    """Form-level rule: beginner courses are free and prices are never negative."""
    resolved = CourseLevel(level)
    if price < 0:
        raise ValueError("Course price cannot be negative.")
    if resolved is CourseLevel.BEGINNER and price != 0:
        raise ValueError("Beginner courses must be free.")
