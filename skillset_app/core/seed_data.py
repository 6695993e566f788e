"""Demo accounts and catalog used when no other state is supplied."""

from __future__ import annotations

from datetime import datetime, timezone

from skillset_app.constants.storage_constants import SEED_PASSWORD
from skillset_app.core.models import (
    Course,
    CourseLevel,
    Enrollment,
    Lesson,
    LessonType,
    Progress,
    User,
    UserRole,
)
from skillset_app.core.services.user_roster import RegisteredUser


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def seed_roster() -> list[RegisteredUser]:
    return [
        RegisteredUser(
            user=User(
                id="1",
                email="student@example.com",
                name="John Doe",
                role=UserRole.STUDENT,
                avatar="https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=150&h=150&fit=crop&crop=face",
                created_at=_date(2024, 1, 15),
            ),
            password=SEED_PASSWORD,
        ),
        RegisteredUser(
            user=User(
                id="2",
                email="instructor@example.com",
                name="Sarah Wilson",
                role=UserRole.INSTRUCTOR,
                avatar="https://images.unsplash.com/photo-1494790108755-2616b612b786?w=150&h=150&fit=crop&crop=face",
                created_at=_date(2023, 12, 1),
            ),
            password=SEED_PASSWORD,
        ),
    ]


def _lesson(
    course_id: str,
    order: int,
    title: str,
    description: str,
    lesson_type: LessonType,
    content: str,
    duration: int | None = None,
) -> Lesson:
    return Lesson(
        id=f"{course_id}-{order}",
        course_id=course_id,
        title=title,
        description=description,
        type=lesson_type,
        content=content,
        order=order,
        duration=duration,
    )


def seed_courses() -> list[Course]:
    video = LessonType.VIDEO
    return [
        Course(
            id="1",
            title="Complete Digital Art Mastery",
            description=(
                "Learn digital art from scratch with industry professionals. Master tools like "
                "Photoshop, Procreate, and develop your unique artistic style."
            ),
            thumbnail="https://images.unsplash.com/photo-1561736778-92e52a7769ef?w=400&h=250&fit=crop",
            instructor_id="2",
            instructor_name="Sarah Wilson",
            price=149.99,
            duration="12 hours",
            level=CourseLevel.INTERMEDIATE,
            category="Digital Art",
            enrolled_students=1247,
            rating=4.8,
            is_public=True,
            created_at=_date(2024, 1, 10),
            updated_at=_date(2024, 1, 15),
            lessons=[
                _lesson("1", 1, "Introduction to Digital Art", "Overview of digital art tools and techniques",
                        video, "https://www.youtube.com/embed/IAmtFtIBjx4", 45),
                _lesson("1", 2, "Setting Up Your Workspace", "Configuring Photoshop and essential brushes",
                        video, "https://www.youtube.com/embed/IyR_uYsRdPs", 30),
                _lesson("1", 3, "Basic Drawing Techniques", "Fundamental drawing skills for digital art",
                        LessonType.PDF, "/documents/basic-drawing-techniques.pdf"),
                _lesson("1", 4, "Color Theory and Composition", "Understanding color harmony and visual composition",
                        video, "https://www.youtube.com/embed/_2LLXnUdUIc", 50),
                _lesson("1", 5, "Knowledge Check: Art Basics", "Test your understanding of basic concepts",
                        LessonType.QUIZ, "quiz-1-5"),
            ],
        ),
        Course(
            id="2",
            title="Cryptocurrency Trading Fundamentals",
            description=(
                "Master the basics of crypto trading, technical analysis, and risk management "
                "strategies for beginners."
            ),
            thumbnail="https://images.unsplash.com/photo-1621761191319-c6fb62004040?w=400&h=250&fit=crop",
            instructor_id="2",
            instructor_name="Sarah Wilson",
            price=0,
            duration="8 hours",
            level=CourseLevel.BEGINNER,
            category="Finance",
            enrolled_students=892,
            rating=4.6,
            is_public=True,
            created_at=_date(2024, 1, 20),
            updated_at=_date(2024, 1, 25),
            lessons=[
                _lesson("2", 1, "What is Cryptocurrency?", "Understanding blockchain and digital currencies",
                        video, "https://www.youtube.com/embed/VYWc9dFqROI", 60),
                _lesson("2", 2, "Setting Up Your Trading Account", "Choose and configure crypto exchanges",
                        video, "https://www.youtube.com/embed/8MhxhzPGbxY", 40),
                _lesson("2", 3, "Technical Analysis Fundamentals", "Reading crypto charts and indicators",
                        video, "https://www.youtube.com/embed/nC8ByFjeBJc", 55),
                _lesson("2", 4, "Risk Management Strategies", "Protecting your capital while trading",
                        video, "https://www.youtube.com/embed/w-k_ebgfKqc", 45),
                _lesson("2", 5, "Trading Psychology", "Managing emotions and discipline in trading",
                        video, "https://www.youtube.com/embed/Cr0QxLwM6AA", 50),
            ],
        ),
        Course(
            id="3",
            title="Advanced React Development",
            description="Deep dive into React patterns, performance optimization, and modern development practices.",
            thumbnail="https://images.unsplash.com/photo-1633356122544-f134324a6cee?w=400&h=250&fit=crop",
            instructor_id="2",
            instructor_name="Sarah Wilson",
            price=249.99,
            duration="16 hours",
            level=CourseLevel.ADVANCED,
            category="Programming",
            enrolled_students=634,
            rating=4.9,
            is_public=True,
            created_at=_date(2024, 2, 1),
            updated_at=_date(2024, 2, 5),
            lessons=[
                _lesson("3", 1, "Advanced Hooks Patterns", "Custom hooks and advanced React patterns",
                        video, "https://www.youtube.com/embed/Gc9qbCYZGlM", 75),
                _lesson("3", 2, "State Management with Context", "Advanced state management techniques",
                        video, "https://www.youtube.com/embed/5LrDIWkK_Bc", 60),
                _lesson("3", 3, "Performance Optimization", "React.memo, useMemo, and useCallback",
                        video, "https://www.youtube.com/embed/DEPwA3mv_R8", 55),
                _lesson("3", 4, "Testing React Applications", "Unit testing and integration testing strategies",
                        video, "https://www.youtube.com/embed/8Xwq35cPwYg", 70),
            ],
        ),
    ]


def seed_enrollments() -> list[Enrollment]:
    return [Enrollment(id="1", user_id="1", course_id="1", enrolled_at=_date(2024, 1, 16))]


def seed_progress() -> list[Progress]:
    return [
        Progress(
            user_id="1",
            course_id="1",
            completed_lessons=["1-1", "1-2"],
            current_lesson="1-3",
            progress_percentage=40,
            last_accessed=_date(2024, 1, 20),
        )
    ]
