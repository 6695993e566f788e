"""Utilities for exporting question banks to the plain-text format used for imports."""

from __future__ import annotations

from pathlib import Path

from skillset_app.core.models import QuizQuestion

_OPTION_LETTERS = ("A", "B", "C", "D")


def save_question_bank_to_file(file_path: Path, questions: list[QuizQuestion]) -> None:
    """Persist the provided questions to disk in the text import format."""

    if not questions:
        raise ValueError("Cannot export an empty question bank.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_questions(questions), encoding="utf-8")


def serialize_questions(questions: list[QuizQuestion]) -> str:
    blocks = [_serialize_question(question) for question in questions]
    return "\n\n---\n\n".join(blocks) + "\n"


def _serialize_question(question: QuizQuestion) -> str:
    lines = [f"ID: {question.id}", f"TOPIC: {question.topic}"]
    if question.category:
        lines.append(f"CATEGORY: {question.category}")

    question_lines = question.question_text.splitlines() or [question.question_text]
    lines.append(f"Q: {question_lines[0]}")
    lines.extend(question_lines[1:])

    for idx, letter in enumerate(_OPTION_LETTERS):
        option_text = question.options[idx] if idx < len(question.options) else ""
        option_lines = option_text.splitlines() or [option_text]
        lines.append(f"{letter}: {option_lines[0]}")
        lines.extend(option_lines[1:])

    lines.append(f"CORRECT: {_OPTION_LETTERS[question.correct_option_index]}")

    if question.explanation:
        explanation_lines = question.explanation.splitlines()
        lines.append(f"EXPLANATION: {explanation_lines[0]}")
        lines.extend(explanation_lines[1:])

    return "\n".join(lines)
