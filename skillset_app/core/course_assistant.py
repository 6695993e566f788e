"""Keyword-matching assistant that answers pre-enrollment questions about a course."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from skillset_app.core.clock import Clock, utc_now
from skillset_app.core.models import Course, CourseLevel

_LEVEL_ADVICE = {
    CourseLevel.BEGINNER: "Perfect for newcomers! No prior experience needed. We start from the basics.",
    CourseLevel.INTERMEDIATE: "Best suited for those with some basic knowledge. We build on fundamental concepts.",
    CourseLevel.ADVANCED: "Designed for experienced learners. Assumes solid foundation in the subject matter.",
}

_PREREQUISITES = {
    CourseLevel.BEGINNER: "No prerequisites required! Just bring your enthusiasm to learn.",
    CourseLevel.INTERMEDIATE: "Basic understanding of the fundamentals would be helpful.",
    CourseLevel.ADVANCED: "Strong foundation in the subject area is recommended.",
}


@dataclass(slots=True)
class AssistantMessage:
    sender: str  # "user" or "bot"
    content: str
    sent_at: datetime


@dataclass(slots=True)
class _Rule:
    keywords: tuple[str, ...]
    respond: Callable[[Course], str]


def _duration(course: Course) -> str:
    return (
        f"This course has a total duration of {course.duration} and contains "
        f"{len(course.lessons)} lessons. You can learn at your own pace!"
    )


def _price(course: Course) -> str:
    if course.level is CourseLevel.BEGINNER:
        return (
            "Great news! This beginner course is completely FREE! All beginner-level courses "
            "have no cost and give you lifetime access to all materials."
        )
    return (
        f"The course price is ${course.price}. This is a one-time payment that gives you "
        "lifetime access to all course materials."
    )


def _content(course: Course) -> str:
    lesson_types: list[str] = []
    for lesson in course.lessons:
        if lesson.type.value not in lesson_types:
            lesson_types.append(lesson.type.value)
    return (
        f"The course covers {len(course.lessons)} comprehensive lessons including "
        f"{', '.join(lesson_types)} content. You'll learn: {course.description}"
    )


# Checked in order; the first rule with a matching keyword answers.
_RULES: tuple[_Rule, ...] = (
    _Rule(("duration", "long", "time"), _duration),
    _Rule(("price", "cost", "fee", "money"), _price),
    _Rule(
        ("level", "difficulty", "beginner", "advanced"),
        lambda c: f"This is a {c.level.value} level course. {_LEVEL_ADVICE[c.level]}",
    ),
    _Rule(
        ("prerequisite", "requirement", "need to know"),
        lambda c: f"Prerequisites: {_PREREQUISITES[c.level]}",
    ),
    _Rule(("content", "curriculum", "learn", "cover"), _content),
    _Rule(
        ("instructor", "teacher", "who teaches"),
        lambda c: (
            f"This course is taught by {c.instructor_name}, an experienced instructor in "
            f"{c.category}. They bring real-world expertise to help you succeed."
        ),
    ),
    _Rule(
        ("rating", "review", "feedback", "quality"),
        lambda c: (
            f"This course has an average rating of {c.rating}/5 from {c.enrolled_students} students. "
            "Students love the practical approach and clear explanations!"
        ),
    ),
    _Rule(
        ("category", "field", "subject"),
        lambda c: f"This course falls under {c.category}. It's designed to give you practical skills in this field.",
    ),
    _Rule(
        ("enroll", "sign up", "register", "join"),
        lambda c: (
            'Ready to enroll? Just click the "Enroll Now" button! You\'ll get immediate access '
            "to all course materials and can start learning right away."
        ),
    ),
    _Rule(
        ("support", "help", "stuck", "question"),
        lambda c: (
            "Once enrolled, you'll have access to community forums and can ask questions anytime. "
            "The instructor is very responsive to student queries!"
        ),
    ),
    _Rule(
        ("certificate", "completion", "credential"),
        lambda c: (
            "Yes! You'll receive a certificate of completion when you finish the course. "
            "This can be added to your LinkedIn profile and resume."
        ),
    ),
    _Rule(
        ("device", "mobile", "tablet", "access"),
        lambda c: (
            "You can access the course on any device - desktop, tablet, or mobile. "
            "All content is optimized for mobile learning!"
        ),
    ),
    _Rule(
        ("refund", "guarantee", "money back"),
        lambda c: (
            "We offer a 30-day money-back guarantee. If you're not satisfied with the course, "
            "you can request a full refund within 30 days."
        ),
    ),
)


def answer_question(course: Course, question: str) -> str:
    """Return the canned answer for the first rule whose keyword appears in ``question``."""
    message = question.lower()
    for rule in _RULES:
        if any(keyword in message for keyword in rule.keywords):
            return rule.respond(course)
    return (
        "I'd be happy to help you with that! Here are some things I can tell you about:\n"
        "- Course duration and structure\n"
        "- Pricing and payment options\n"
        "- Difficulty level and prerequisites\n"
        "- What you'll learn and course content\n"
        "- Instructor information\n"
        "- Student ratings and reviews\n"
        "- Enrollment process\n"
        "- Technical requirements\n"
        "- Certificates and completion\n"
        f'Feel free to ask me anything specific about "{course.title}"!'
    )


class CourseAssistant:
    """Conversation with the assistant for one course."""

    def __init__(self, course: Course, clock: Clock = utc_now) -> None:
        self._course = course
        self._clock = clock
        self._messages: list[AssistantMessage] = [
            AssistantMessage(
                sender="bot",
                content=(
                    f'Hi! I\'m your course assistant for "{course.title}". I can help answer '
                    "questions about this course before you enroll. Feel free to ask me anything!"
                ),
                sent_at=clock(),
            )
        ]

    def ask(self, question: str) -> AssistantMessage:
        """Record the question and the reply; blank questions are rejected."""
        text = question.strip()
        if not text:
            raise ValueError("Question must not be empty.")
        self._messages.append(AssistantMessage(sender="user", content=text, sent_at=self._clock()))
        reply = AssistantMessage(sender="bot", content=answer_question(self._course, text), sent_at=self._clock())
        self._messages.append(reply)
        return reply

    def get_messages(self) -> list[AssistantMessage]:
        return list(self._messages)
