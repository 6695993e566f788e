"""Domain models for the learning platform stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    STUDENT = "student"
    INSTRUCTOR = "instructor"


class CourseLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class LessonType(str, Enum):
    VIDEO = "video"
    PDF = "pdf"
    QUIZ = "quiz"
    IMAGE = "image"


@dataclass(slots=True)
class User:
    """Account visible to the rest of the application (no credentials)."""

    id: str
    email: str
    name: str
    role: UserRole
    created_at: datetime
    avatar: str | None = None


@dataclass(slots=True)
class Lesson:
    """Single lesson of a course; `content` is a URL or a quiz identifier."""

    id: str
    course_id: str
    title: str
    description: str
    type: LessonType
    content: str
    order: int
    duration: int | None = None  # minutes


@dataclass(slots=True)
class Course:
    id: str
    title: str
    description: str
    instructor_id: str
    instructor_name: str
    price: float
    duration: str
    level: CourseLevel
    category: str
    created_at: datetime
    updated_at: datetime
    thumbnail: str = ""
    lessons: list[Lesson] = field(default_factory=list)
    enrolled_students: int = 0
    rating: float = 0.0
    is_public: bool = True

    def ordered_lessons(self) -> list[Lesson]:
        """Return lessons sorted by their `order` field."""
        return sorted(self.lessons, key=lambda lesson: lesson.order)

    def violates_free_beginner_rule(self) -> bool:
        """Beginner courses are expected to be free."""
        return self.level is CourseLevel.BEGINNER and self.price != 0


@dataclass(slots=True)
class Enrollment:
    id: str
    user_id: str
    course_id: str
    enrolled_at: datetime
    completed_at: datetime | None = None


@dataclass(slots=True)
class Progress:
    """Per-user, per-course completion tracker."""

    user_id: str
    course_id: str
    last_accessed: datetime
    completed_lessons: list[str] = field(default_factory=list)
    current_lesson: str = ""
    progress_percentage: int = 0


@dataclass(slots=True)
class QuizQuestion:
    """Multiple-choice question with exactly four options."""

    id: str
    question_text: str
    options: list[str]
    correct_option_index: int
    topic: str
    explanation: str | None = None
    category: str | None = None


@dataclass(slots=True)
class CourseQuiz:
    id: str
    course_id: str
    questions: list[QuizQuestion]
    passing_score: int
    time_limit_minutes: int


@dataclass(slots=True)
class QuizAttempt:
    id: str
    user_id: str
    course_id: str
    answers: dict[str, int]
    score: int
    passed: bool
    completed_at: datetime
    time_spent: int  # seconds


@dataclass(slots=True)
class Certificate:
    id: str
    user_id: str
    course_id: str
    course_name: str
    instructor_name: str
    issued_at: datetime
    score: int
    certificate_number: str


@dataclass(slots=True)
class Note:
    id: str
    user_id: str
    course_id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    lesson_id: str | None = None
