"""Courses, enrollments, progress, assessments and notes held in memory."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Iterable

from skillset_app.constants.catalog_constants import (
    CERTIFICATE_NUMBER_SUFFIX_DIGITS,
    CERTIFICATE_PREFIX,
    UNTITLED_NOTE_TITLE,
)
from skillset_app.core.clock import Clock, IdFactory, epoch_millis, new_id, utc_now
from skillset_app.core.models import (
    Certificate,
    Course,
    CourseLevel,
    Enrollment,
    Lesson,
    Note,
    Progress,
    QuizAttempt,
)
from skillset_app.core.seed_data import seed_courses, seed_enrollments, seed_progress
from skillset_app.core.services import (
    AssessmentLedger,
    ChangeListener,
    ChangeNotifier,
    CourseRepository,
    EnrollmentTracker,
    Notebook,
)

logger = logging.getLogger(__name__)


class CatalogStore:
    """Facade for catalog services: Courses, Enrollments, Assessments and Notes.

    Every mutation is a synchronous, all-or-nothing list update followed by a
    change notification. Nothing here is persisted.
    """

    def __init__(
        self,
        courses: list[Course] | None = None,
        enrollments: list[Enrollment] | None = None,
        progress: list[Progress] | None = None,
        *,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        self._notifier = ChangeNotifier()

        # Services
        self._courses = CourseRepository(courses)
        self._enrollments = EnrollmentTracker(enrollments, progress)
        self._assessments = AssessmentLedger()
        self._notes = Notebook()

        self._selected_course_id: str | None = None

    @classmethod
    def with_demo_data(cls, *, clock: Clock = utc_now, id_factory: IdFactory = new_id) -> "CatalogStore":
        return cls(
            seed_courses(),
            seed_enrollments(),
            seed_progress(),
            clock=clock,
            id_factory=id_factory,
        )

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        return self._notifier.subscribe(listener)

    # --- Course queries ---

    def get_courses(self) -> list[Course]:
        return self._courses.get_courses()

    def get_public_courses(self) -> list[Course]:
        return self._courses.get_public_courses()

    def get_course_by_id(self, course_id: str) -> Course | None:
        return self._courses.find(course_id)

    def get_enrolled_courses(self, user_id: str) -> list[Course]:
        course_ids = self._enrollments.get_user_course_ids(user_id)
        return [course for course in self._courses.get_courses() if course.id in course_ids]

    def get_instructor_courses(self, instructor_id: str) -> list[Course]:
        return self._courses.get_by_instructor(instructor_id)

    def get_course_progress(self, user_id: str, course_id: str) -> Progress | None:
        return self._enrollments.get_progress(user_id, course_id)

    def get_enrollments(self, course_id: str | None = None) -> list[Enrollment]:
        if course_id is None:
            return self._enrollments.get_enrollments()
        return self._enrollments.get_course_enrollments(course_id)

    def is_enrolled(self, user_id: str, course_id: str) -> bool:
        return self._enrollments.is_enrolled(user_id, course_id)

    @property
    def selected_course(self) -> Course | None:
        """Current version of the selected course; None once it is deleted."""
        if self._selected_course_id is None:
            return None
        return self._courses.find(self._selected_course_id)

    def set_selected_course(self, course: Course | None) -> None:
        self._selected_course_id = course.id if course is not None else None
        self._notifier.notify("set_selected_course")

    # --- Enrollment & progress ---

    def enroll_in_course(self, user_id: str, course_id: str) -> Enrollment:
        now = self._clock()
        enrollment = self._enrollments.enroll(self._id_factory(), user_id, course_id, now)
        self._courses.increment_enrolled(course_id, now)
        logger.info("User %s enrolled in course %s", user_id, course_id)
        self._notifier.notify("enroll_in_course")
        return enrollment

    def update_progress(self, user_id: str, course_id: str, lesson_id: str) -> None:
        course = self._courses.find(course_id)
        self._enrollments.complete_lesson(course, user_id, lesson_id, self._clock())
        self._notifier.notify("update_progress")

    # --- Course authoring ---

    def create_course(
        self,
        *,
        title: str,
        description: str,
        instructor_id: str,
        instructor_name: str,
        price: float,
        duration: str,
        level: CourseLevel | str,
        category: str,
        thumbnail: str = "",
        lessons: Iterable[Lesson] = (),
        enrolled_students: int = 0,
        rating: float = 0.0,
        is_public: bool = True,
    ) -> str:
        now = self._clock()
        course_id = self._id_factory()
        course = Course(
            id=course_id,
            title=title,
            description=description,
            instructor_id=instructor_id,
            instructor_name=instructor_name,
            price=price,
            duration=duration,
            level=CourseLevel(level),
            category=category,
            created_at=now,
            updated_at=now,
            thumbnail=thumbnail,
            lessons=[replace(lesson, course_id=course_id) for lesson in lessons],
            enrolled_students=enrolled_students,
            rating=rating,
            is_public=is_public,
        )
        self._courses.add(course)
        logger.info("Instructor %s created course %s", instructor_id, course_id)
        self._notifier.notify("create_course")
        return course_id

    def update_course(self, course_id: str, **changes: Any) -> None:
        self._courses.update(course_id, changes, self._clock())
        self._notifier.notify("update_course")

    def delete_course(self, course_id: str) -> None:
        self._courses.delete(course_id)
        self._notifier.notify("delete_course")

    # --- Quizzes & certificates ---

    def save_quiz_attempt(self, attempt: QuizAttempt) -> None:
        self._assessments.record_attempt(attempt)
        self._notifier.notify("save_quiz_attempt")

    def generate_certificate(self, user_id: str, course_id: str, score: int) -> Certificate:
        course = self._courses.require(course_id)
        issued_at = self._clock()
        suffix = str(epoch_millis(issued_at))[-CERTIFICATE_NUMBER_SUFFIX_DIGITS:]
        certificate = Certificate(
            id=self._id_factory(),
            user_id=user_id,
            course_id=course_id,
            course_name=course.title,
            instructor_name=course.instructor_name,
            issued_at=issued_at,
            score=score,
            certificate_number=f"{CERTIFICATE_PREFIX}-{course_id}-{user_id}-{suffix}",
        )
        self._assessments.record_certificate(certificate)
        logger.info("Issued certificate %s", certificate.certificate_number)
        self._notifier.notify("generate_certificate")
        return certificate

    def get_user_certificates(self, user_id: str) -> list[Certificate]:
        return self._assessments.get_certificates(user_id)

    def get_course_quiz_attempts(self, user_id: str, course_id: str) -> list[QuizAttempt]:
        return self._assessments.get_attempts(user_id, course_id)

    def has_course_completion(self, user_id: str, course_id: str) -> bool:
        return self._assessments.has_passed(user_id, course_id)

    # --- Notes ---

    def save_note(
        self,
        user_id: str,
        course_id: str,
        title: str,
        content: str,
        lesson_id: str | None = None,
    ) -> Note:
        now = self._clock()
        note = Note(
            id=self._id_factory(),
            user_id=user_id,
            course_id=course_id,
            lesson_id=lesson_id,
            title=title.strip() or UNTITLED_NOTE_TITLE,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self._notes.add(note)
        self._notifier.notify("save_note")
        return note

    def update_note(self, note_id: str, **changes: Any) -> None:
        self._notes.update(note_id, changes, self._clock())
        self._notifier.notify("update_note")

    def delete_note(self, note_id: str) -> None:
        self._notes.delete(note_id)
        self._notifier.notify("delete_note")

    def get_user_notes(self, user_id: str) -> list[Note]:
        return self._notes.get_user_notes(user_id)

    def get_course_notes(self, user_id: str, course_id: str) -> list[Note]:
        return self._notes.get_course_notes(user_id, course_id)

    def search_notes(self, user_id: str, course_id: str, term: str) -> list[Note]:
        return self._notes.search(user_id, course_id, term)
