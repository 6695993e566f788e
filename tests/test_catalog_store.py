"""
Unit tests for the catalog store.

These tests focus on:
- enrollment bookkeeping (counter, zeroed progress, duplicates allowed)
- progress percentage rules (dedup, half-up rounding, unknown course)
- course authoring, quiz attempts, certificates and notes CRUD
- change notifications
"""

import itertools
import unittest
from datetime import datetime, timedelta, timezone

from skillset_app.core.catalog_store import CatalogStore
from skillset_app.core.models import Course, CourseLevel, Lesson, LessonType, QuizAttempt
from skillset_app.core.scoring import percentage, round_half_up
from skillset_app.core.services.course_repository import CourseNotFoundError, validate_course_pricing

START = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)


class _TickingClock:
    """Advances one minute per call so updates are observable."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return START + timedelta(minutes=self.calls)


def _store() -> CatalogStore:
    counter = itertools.count(1)
    return CatalogStore.with_demo_data(clock=_TickingClock(), id_factory=lambda: f"id{next(counter)}")


def _lessons(count: int) -> list[Lesson]:
    return [
        Lesson(
            id=f"l{n}",
            course_id="draft",
            title=f"Lesson {n}",
            description="",
            type=LessonType.VIDEO,
            content=f"https://example.com/{n}",
            order=n,
        )
        for n in range(1, count + 1)
    ]


class TestCourseQueries(unittest.TestCase):
    def test_demo_catalog(self) -> None:
        store = _store()
        self.assertEqual([c.id for c in store.get_courses()], ["1", "2", "3"])
        self.assertEqual(len(store.get_public_courses()), 3)
        self.assertEqual(store.get_course_by_id("2").category, "Finance")
        self.assertIsNone(store.get_course_by_id("404"))
        self.assertEqual(len(store.get_instructor_courses("2")), 3)
        self.assertEqual(store.get_instructor_courses("1"), [])

    def test_seeded_progress(self) -> None:
        store = _store()
        progress = store.get_course_progress("1", "1")
        self.assertEqual(progress.completed_lessons, ["1-1", "1-2"])
        self.assertEqual([c.id for c in store.get_enrolled_courses("1")], ["1"])

    def test_private_courses_are_not_public(self) -> None:
        store = _store()
        store.update_course("3", is_public=False)
        self.assertEqual([c.id for c in store.get_public_courses()], ["1", "2"])

    def test_selected_course(self) -> None:
        store = _store()
        course = store.get_course_by_id("1")
        store.set_selected_course(course)
        self.assertIs(store.selected_course, course)
        store.set_selected_course(None)
        self.assertIsNone(store.selected_course)

    def test_selected_course_follows_updates(self) -> None:
        store = _store()
        store.set_selected_course(store.get_course_by_id("2"))
        store.enroll_in_course("9", "2")
        store.update_course("2", title="Crypto 101")
        self.assertEqual(store.selected_course.title, "Crypto 101")
        self.assertEqual(store.selected_course.enrolled_students, 893)
        store.delete_course("2")
        self.assertIsNone(store.selected_course)


class TestEnrollment(unittest.TestCase):
    def test_enroll_creates_enrollment_progress_and_bumps_counter(self) -> None:
        store = _store()
        before = store.get_course_by_id("2")
        enrollment = store.enroll_in_course("9", "2")

        self.assertEqual(enrollment.user_id, "9")
        self.assertEqual(enrollment.course_id, "2")
        self.assertTrue(store.is_enrolled("9", "2"))
        self.assertEqual([c.id for c in store.get_enrolled_courses("9")], ["2"])

        after = store.get_course_by_id("2")
        self.assertEqual(after.enrolled_students, before.enrolled_students + 1)
        self.assertGreater(after.updated_at, before.updated_at)

        progress = store.get_course_progress("9", "2")
        self.assertEqual(progress.completed_lessons, [])
        self.assertEqual(progress.progress_percentage, 0)
        self.assertEqual(progress.current_lesson, "")

    def test_duplicate_enrollment_is_stored_but_course_listed_once(self) -> None:
        store = _store()
        store.enroll_in_course("9", "2")
        store.enroll_in_course("9", "2")
        self.assertEqual(len(store.get_enrollments("2")), 2)
        self.assertEqual([c.id for c in store.get_enrolled_courses("9")], ["2"])
        self.assertEqual(store.get_course_by_id("2").enrolled_students, 894)

    def test_enroll_in_unknown_course_still_records_enrollment(self) -> None:
        store = _store()
        store.enroll_in_course("9", "missing")
        self.assertTrue(store.is_enrolled("9", "missing"))
        self.assertEqual(store.get_enrolled_courses("9"), [])


class TestProgress(unittest.TestCase):
    def test_percentage_recomputed_per_lesson(self) -> None:
        store = _store()
        store.enroll_in_course("9", "2")  # five lessons
        store.update_progress("9", "2", "2-1")
        self.assertEqual(store.get_course_progress("9", "2").progress_percentage, 20)
        store.update_progress("9", "2", "2-2")
        progress = store.get_course_progress("9", "2")
        self.assertEqual(progress.completed_lessons, ["2-1", "2-2"])
        self.assertEqual(progress.progress_percentage, 40)

    def test_update_progress_is_idempotent(self) -> None:
        store = _store()
        store.enroll_in_course("9", "2")
        store.update_progress("9", "2", "2-3")
        first = store.get_course_progress("9", "2").progress_percentage
        store.update_progress("9", "2", "2-3")
        progress = store.get_course_progress("9", "2")
        self.assertEqual(progress.progress_percentage, first)
        self.assertEqual(progress.completed_lessons, ["2-3"])

    def test_percentage_rounds_half_up(self) -> None:
        store = CatalogStore()
        course_id = store.create_course(
            title="Eight",
            description="",
            instructor_id="2",
            instructor_name="Sarah Wilson",
            price=0,
            duration="1 hour",
            level=CourseLevel.BEGINNER,
            category="Design",
            lessons=_lessons(8),
        )
        store.enroll_in_course("u", course_id)
        store.update_progress("u", course_id, "l1")
        self.assertEqual(store.get_course_progress("u", course_id).progress_percentage, 13)

    def test_percentage_matches_formula_for_every_step(self) -> None:
        store = _store()
        store.enroll_in_course("9", "3")  # four lessons
        for index, lesson in enumerate(store.get_course_by_id("3").lessons, start=1):
            store.update_progress("9", "3", lesson.id)
            self.assertEqual(
                store.get_course_progress("9", "3").progress_percentage,
                round_half_up(index / 4 * 100),
            )
        self.assertEqual(store.get_course_progress("9", "3").progress_percentage, 100)

    def test_course_without_lessons_reports_zero(self) -> None:
        store = CatalogStore()
        course_id = store.create_course(
            title="Empty",
            description="",
            instructor_id="2",
            instructor_name="Sarah Wilson",
            price=10,
            duration="0 hours",
            level="advanced",
            category="Design",
        )
        store.enroll_in_course("u", course_id)
        store.update_progress("u", course_id, "anything")
        progress = store.get_course_progress("u", course_id)
        self.assertEqual(progress.completed_lessons, ["anything"])
        self.assertEqual(progress.progress_percentage, 0)

    def test_unknown_course_leaves_progress_alone(self) -> None:
        store = _store()
        store.enroll_in_course("9", "gone")
        store.update_progress("9", "gone", "x")
        self.assertEqual(store.get_course_progress("9", "gone").completed_lessons, [])

    def test_update_without_enrollment_is_noop(self) -> None:
        store = _store()
        store.update_progress("nobody", "1", "1-1")
        self.assertIsNone(store.get_course_progress("nobody", "1"))

    def test_updates_last_accessed(self) -> None:
        store = _store()
        store.enroll_in_course("9", "2")
        before = store.get_course_progress("9", "2").last_accessed
        store.update_progress("9", "2", "2-1")
        self.assertGreater(store.get_course_progress("9", "2").last_accessed, before)


class TestCourseAuthoring(unittest.TestCase):
    def test_create_update_delete(self) -> None:
        store = _store()
        course_id = store.create_course(
            title="Watercolor Basics",
            description="Paint with water",
            instructor_id="2",
            instructor_name="Sarah Wilson",
            price=0,
            duration="3 hours",
            level="beginner",
            category="Digital Art",
            lessons=_lessons(2),
        )
        course = store.get_course_by_id(course_id)
        self.assertEqual(course.level, CourseLevel.BEGINNER)
        self.assertEqual({lesson.course_id for lesson in course.lessons}, {course_id})
        self.assertEqual(course.created_at, course.updated_at)

        store.update_course(course_id, title="Watercolor Fundamentals", level="intermediate", price=19.0)
        updated = store.get_course_by_id(course_id)
        self.assertEqual(updated.title, "Watercolor Fundamentals")
        self.assertEqual(updated.level, CourseLevel.INTERMEDIATE)
        self.assertGreater(updated.updated_at, course.updated_at)

        store.delete_course(course_id)
        self.assertIsNone(store.get_course_by_id(course_id))

    def test_update_with_timestamp_uses_store_clock(self) -> None:
        store = _store()
        stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
        store.update_course("1", title="New", updated_at=stale)
        updated = store.get_course_by_id("1")
        self.assertEqual(updated.title, "New")
        self.assertGreater(updated.updated_at, START)

    def test_update_with_whole_edited_record(self) -> None:
        store = _store()
        course = store.get_course_by_id("3")
        edited = {name: getattr(course, name) for name in Course.__dataclass_fields__}
        edited["price"] = 199.99
        store.update_course("3", **edited)
        updated = store.get_course_by_id("3")
        self.assertEqual(updated.price, 199.99)
        self.assertEqual(updated.lessons, course.lessons)
        self.assertGreater(updated.updated_at, course.updated_at)

    def test_update_unknown_field_raises(self) -> None:
        store = _store()
        with self.assertRaises(TypeError):
            store.update_course("1", colour="red")

    def test_update_missing_course_is_noop(self) -> None:
        store = _store()
        store.update_course("404", title="Nope")
        self.assertEqual(len(store.get_courses()), 3)

    def test_ordered_lessons(self) -> None:
        store = _store()
        course = store.get_course_by_id("1")
        shuffled = list(reversed(course.lessons))
        store.update_course("1", lessons=shuffled)
        ordered = store.get_course_by_id("1").ordered_lessons()
        self.assertEqual([lesson.order for lesson in ordered], [1, 2, 3, 4, 5])

    def test_pricing_rule_is_form_level_only(self) -> None:
        validate_course_pricing("beginner", 0)
        validate_course_pricing(CourseLevel.ADVANCED, 99.0)
        with self.assertRaises(ValueError):
            validate_course_pricing("beginner", 10)
        with self.assertRaises(ValueError):
            validate_course_pricing("advanced", -1)

        store = _store()
        store.update_course("2", price=25.0)
        self.assertTrue(store.get_course_by_id("2").violates_free_beginner_rule())
        self.assertFalse(store.get_course_by_id("1").violates_free_beginner_rule())


class TestAssessments(unittest.TestCase):
    def _attempt(self, user_id: str, course_id: str, score: int) -> QuizAttempt:
        return QuizAttempt(
            id=f"a-{score}",
            user_id=user_id,
            course_id=course_id,
            answers={},
            score=score,
            passed=score >= 70,
            completed_at=START,
            time_spent=60,
        )

    def test_completion_requires_a_passed_attempt(self) -> None:
        store = _store()
        self.assertFalse(store.has_course_completion("1", "1"))
        store.save_quiz_attempt(self._attempt("1", "1", 50))
        self.assertFalse(store.has_course_completion("1", "1"))
        store.save_quiz_attempt(self._attempt("1", "1", 80))
        self.assertTrue(store.has_course_completion("1", "1"))
        self.assertFalse(store.has_course_completion("1", "2"))
        self.assertEqual(len(store.get_course_quiz_attempts("1", "1")), 2)

    def test_generate_certificate(self) -> None:
        store = CatalogStore.with_demo_data(
            clock=lambda: datetime(2024, 6, 1, tzinfo=timezone.utc), id_factory=lambda: "cert1"
        )
        certificate = store.generate_certificate("1", "1", 85)
        self.assertEqual(certificate.course_name, "Complete Digital Art Mastery")
        self.assertEqual(certificate.instructor_name, "Sarah Wilson")
        self.assertEqual(certificate.score, 85)
        # 2024-06-01T00:00:00Z is 1717200000000 ms since the epoch
        self.assertEqual(certificate.certificate_number, "SKILLSET-1-1-000000")
        self.assertEqual(store.get_user_certificates("1"), [certificate])
        self.assertEqual(store.get_user_certificates("2"), [])

    def test_certificate_number_uses_millisecond_suffix(self) -> None:
        moment = datetime(2024, 6, 1, 0, 0, 0, 123456, tzinfo=timezone.utc)
        store = CatalogStore.with_demo_data(clock=lambda: moment)
        certificate = store.generate_certificate("1", "2", 90)
        self.assertEqual(certificate.certificate_number, "SKILLSET-2-1-000123")

    def test_certificate_for_unknown_course_raises(self) -> None:
        store = _store()
        with self.assertRaises(CourseNotFoundError):
            store.generate_certificate("1", "404", 99)
        self.assertEqual(store.get_user_certificates("1"), [])


class TestNotes(unittest.TestCase):
    def test_note_crud(self) -> None:
        store = _store()
        note = store.save_note("1", "1", "Layers", "Use **layers** a lot", lesson_id="1-1")
        self.assertEqual(note.created_at, note.updated_at)
        self.assertEqual(store.get_course_notes("1", "1"), [note])

        store.update_note(note.id, content="Layers are non-destructive")
        updated = store.get_user_notes("1")[0]
        self.assertEqual(updated.content, "Layers are non-destructive")
        self.assertGreater(updated.updated_at, note.updated_at)

        store.delete_note(note.id)
        self.assertEqual(store.get_user_notes("1"), [])

    def test_update_note_with_timestamp_uses_store_clock(self) -> None:
        store = _store()
        note = store.save_note("1", "1", "Layers", "old")
        store.update_note(note.id, content="x", updated_at=datetime(2000, 1, 1, tzinfo=timezone.utc))
        updated = store.get_user_notes("1")[0]
        self.assertEqual(updated.content, "x")
        self.assertGreater(updated.updated_at, note.updated_at)

    def test_blank_title_becomes_untitled(self) -> None:
        store = _store()
        note = store.save_note("1", "1", "   ", "text")
        self.assertEqual(note.title, "Untitled Note")
        self.assertIsNone(note.lesson_id)

    def test_notes_are_scoped_per_user_and_course(self) -> None:
        store = _store()
        store.save_note("1", "1", "a", "x")
        store.save_note("1", "2", "b", "y")
        store.save_note("2", "1", "c", "z")
        self.assertEqual([n.title for n in store.get_user_notes("1")], ["a", "b"])
        self.assertEqual([n.title for n in store.get_course_notes("1", "1")], ["a"])

    def test_search_notes(self) -> None:
        store = _store()
        store.save_note("1", "1", "Color wheel", "complementary colors")
        store.save_note("1", "1", "Brushes", "Soft round for GRADIENTS")
        self.assertEqual([n.title for n in store.search_notes("1", "1", "gradient")], ["Brushes"])
        self.assertEqual([n.title for n in store.search_notes("1", "1", "COLOR")], ["Color wheel"])
        self.assertEqual(len(store.search_notes("1", "1", "  ")), 2)

    def test_update_missing_note_is_noop(self) -> None:
        store = _store()
        store.update_note("ghost", title="x")
        self.assertEqual(store.get_user_notes("1"), [])


class TestNotifications(unittest.TestCase):
    def test_mutations_notify_in_order(self) -> None:
        store = _store()
        seen: list[str] = []
        unsubscribe = store.subscribe(seen.append)
        store.enroll_in_course("9", "2")
        store.update_progress("9", "2", "2-1")
        note = store.save_note("9", "2", "t", "c")
        store.delete_note(note.id)
        unsubscribe()
        store.delete_course("2")
        self.assertEqual(seen, ["enroll_in_course", "update_progress", "save_note", "delete_note"])


class TestScoring(unittest.TestCase):
    def test_percentage(self) -> None:
        self.assertEqual(percentage(1, 8), 13)
        self.assertEqual(percentage(1, 3), 33)
        self.assertEqual(percentage(2, 3), 67)
        self.assertEqual(percentage(0, 0), 0)
        self.assertEqual(percentage(5, 5), 100)


if __name__ == "__main__":
    unittest.main()
