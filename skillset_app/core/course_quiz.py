"""Building and grading the end-of-course quiz."""

from __future__ import annotations

from datetime import datetime

from skillset_app.constants.catalog_constants import (
    DEFAULT_MIX_QUESTIONS_PER_TOPIC,
    PLACEHOLDER_QUIZ_USER_ID,
    QUIZ_OPTION_COUNT,
    QUIZ_PASSING_SCORE,
    QUIZ_TIME_LIMIT_MINUTES,
)
from skillset_app.core.clock import IdFactory, new_id
from skillset_app.core.models import Course, CourseQuiz, QuizAttempt, QuizQuestion
from skillset_app.core.question_bank import QuestionBank
from skillset_app.core.scoring import percentage


def generate_course_quiz(course: Course, bank: QuestionBank) -> CourseQuiz:
    """Pick the questions matching the course category, or a mix of every topic."""
    questions = bank.questions_for_topic(course.category)
    if not questions:
        questions = []
        for topic in bank.topics():
            questions.extend(bank.questions_for_topic(topic)[:DEFAULT_MIX_QUESTIONS_PER_TOPIC])
    return CourseQuiz(
        id=f"quiz-{course.id}",
        course_id=course.id,
        questions=questions,
        passing_score=QUIZ_PASSING_SCORE,
        time_limit_minutes=QUIZ_TIME_LIMIT_MINUTES,
    )


def count_correct(questions: list[QuizQuestion], answers: dict[str, int]) -> int:
    return sum(1 for q in questions if answers.get(q.id) == q.correct_option_index)


def grade_quiz(
    quiz: CourseQuiz,
    answers: dict[str, int],
    started_at: datetime,
    completed_at: datetime,
    user_id: str = PLACEHOLDER_QUIZ_USER_ID,
    id_factory: IdFactory = new_id,
) -> QuizAttempt:
    """Score ``answers`` (question id -> option index) and build the attempt record.

    Unanswered questions count as wrong. ``user_id`` defaults to the placeholder
    the quiz screen has always recorded.
    """
    for question_id, option_index in answers.items():
        if not 0 <= option_index < QUIZ_OPTION_COUNT:
            raise ValueError(f"Answer for {question_id} must be between 0 and {QUIZ_OPTION_COUNT - 1}.")

    score = percentage(count_correct(quiz.questions, answers), len(quiz.questions))
    time_spent = max(0, int((completed_at - started_at).total_seconds()))
    return QuizAttempt(
        id=id_factory(),
        user_id=user_id,
        course_id=quiz.course_id,
        answers=dict(answers),
        score=score,
        passed=score >= quiz.passing_score,
        completed_at=completed_at,
        time_spent=time_spent,
    )
