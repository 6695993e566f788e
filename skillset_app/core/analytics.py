"""Instructor analytics derived from enrollments plus simulated traffic.

Only enrollment count, price, rating and lesson count are real. Views, daily
traffic and the student progress sample are simulated, so every function
takes the random source and the current date as arguments; with a seeded
``random.Random`` the numbers are reproducible.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from datetime import date, timedelta

from skillset_app.core.catalog_store import CatalogStore
from skillset_app.core.models import CourseLevel

# time range -> (days, views multiplier)
TIME_RANGES: dict[str, tuple[int, float]] = {
    "7d": (7, 0.3),
    "30d": (30, 1.0),
    "90d": (90, 2.5),
}

VIEWS_PER_ENROLLMENT = 8
MINUTES_PER_LESSON_VIEW = 25
SAMPLED_STUDENTS = 5

_BASE_COMPLETION = {
    CourseLevel.BEGINNER: 0.8,
    CourseLevel.INTERMEDIATE: 0.65,
    CourseLevel.ADVANCED: 0.45,
}

_STUDENT_NAMES = (
    "Alice Johnson",
    "Bob Smith",
    "Carol Davis",
    "David Wilson",
    "Eva Brown",
    "Frank Miller",
    "Grace Lee",
    "Henry Taylor",
    "Ivy Chen",
    "Jack Anderson",
)


@dataclass(slots=True)
class DailyViews:
    day: date
    views: int


@dataclass(slots=True)
class StudentProgressSample:
    student_id: str
    student_name: str
    progress: int
    last_active: date


@dataclass(slots=True)
class CourseAnalytics:
    course_id: str
    course_name: str
    views: int = 0
    enrollments: int = 0
    completion_rate: int = 0
    average_rating: float = 0.0
    revenue: float = 0.0
    watch_time: int = 0  # minutes
    views_today: int = 0
    enrollments_today: int = 0
    daily_views: list[DailyViews] = field(default_factory=list)
    student_progress: list[StudentProgressSample] = field(default_factory=list)


def estimated_completion_rate(level: CourseLevel, lesson_count: int) -> int:
    """Longer and harder courses are assumed to be finished less often."""
    length_factor = max(0.3, 1 - (lesson_count - 5) * 0.05)
    return math.floor(_BASE_COMPLETION[level] * length_factor * 100)


def build_course_analytics(
    catalog: CatalogStore,
    course_id: str,
    time_range: str = "30d",
    rng: random.Random | None = None,
    today: date | None = None,
) -> CourseAnalytics:
    if time_range not in TIME_RANGES:
        raise ValueError(f"Unknown time range {time_range!r}; expected one of {sorted(TIME_RANGES)}.")
    rng = rng if rng is not None else random.Random()
    today = today if today is not None else date.today()

    course = catalog.get_course_by_id(course_id)
    if course is None:
        return CourseAnalytics(course_id=course_id, course_name=course_id)

    enrollments = catalog.get_enrollments(course_id)
    days, multiplier = TIME_RANGES[time_range]
    total = len(enrollments)
    views = math.floor(total * VIEWS_PER_ENROLLMENT * multiplier)

    base_daily = views // days
    daily_views = []
    for offset in range(days - 1, -1, -1):
        variance = math.floor(base_daily * 0.4 * (rng.random() - 0.5))
        daily_views.append(DailyViews(day=today - timedelta(days=offset), views=max(0, base_daily + variance)))

    samples = []
    for index, enrollment in enumerate(enrollments[:SAMPLED_STUDENTS]):
        progress = math.floor(rng.random() * 100)
        days_ago = math.floor(rng.random() * days)
        samples.append(
            StudentProgressSample(
                student_id=enrollment.user_id,
                student_name=_STUDENT_NAMES[index % len(_STUDENT_NAMES)],
                progress=progress,
                last_active=today - timedelta(days=days_ago),
            )
        )

    return CourseAnalytics(
        course_id=course_id,
        course_name=course.title,
        views=views,
        enrollments=total,
        completion_rate=estimated_completion_rate(course.level, len(course.lessons)),
        average_rating=course.rating,
        revenue=total * course.price,
        watch_time=total * len(course.lessons) * MINUTES_PER_LESSON_VIEW,
        views_today=math.floor(views * 0.05),
        enrollments_today=rng.randrange(3),
        daily_views=daily_views,
        student_progress=samples,
    )


def apply_live_tick(snapshot: CourseAnalytics, rng: random.Random) -> CourseAnalytics:
    """One periodic update: a few more views and, rarely, a new enrollment."""
    return replace(
        snapshot,
        views=snapshot.views + rng.randrange(5),
        views_today=snapshot.views_today + rng.randrange(3),
        enrollments_today=snapshot.enrollments_today + (1 if rng.random() > 0.9 else 0),
    )


def apply_refresh_jitter(snapshot: CourseAnalytics, rng: random.Random) -> CourseAnalytics:
    return replace(
        snapshot,
        views=snapshot.views + rng.randrange(50),
        views_today=snapshot.views_today + rng.randrange(10),
        enrollments_today=snapshot.enrollments_today + rng.randrange(2),
    )


def export_analytics_csv(snapshot: CourseAnalytics, today: date) -> str:
    return (
        "Course Analytics Report\n"
        f"Course: {snapshot.course_name}\n"
        f"Date: {today.isoformat()}\n"
        "\n"
        "Metric,Value\n"
        f"Total Views,{snapshot.views}\n"
        f"Total Enrollments,{snapshot.enrollments}\n"
        f"Completion Rate,{snapshot.completion_rate}%\n"
        f"Average Rating,{snapshot.average_rating}\n"
        f"Revenue,${snapshot.revenue:.2f}\n"
        f"Watch Time,{snapshot.watch_time / 60:.1f} hours\n"
    )
