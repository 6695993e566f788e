"""Loading course-quiz questions from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    ID: da-1                (optional, generated from the topic when omitted)
    TOPIC: Digital Art      (course category the question belongs to)
    CATEGORY: Fundamentals  (optional sub-category shown with results)
    Q: Question text. Additional lines until the next marker are treated
       as part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D
    EXPLANATION: Optional text shown after grading.

Topics are matched case-insensitively against a course's category.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path

from skillset_app.core.models import QuizQuestion

_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "question_bank.txt"
_OPTION_ORDER = ["A", "B", "C", "D"]


class QuestionBankImportError(Exception):
    """Raised when a question bank definition cannot be parsed."""


@dataclass(slots=True)
class QuestionBank:
    """Questions grouped by topic, in file order."""

    questions: list[QuizQuestion] = field(default_factory=list)

    @classmethod
    def from_default_file(cls) -> "QuestionBank":
        return load_question_bank(_DATA_PATH)

    def topics(self) -> list[str]:
        seen: dict[str, None] = {}
        for question in self.questions:
            seen.setdefault(question.topic, None)
        return list(seen)

    def questions_for_topic(self, topic: str) -> list[QuizQuestion]:
        key = topic.strip().lower()
        return [q for q in self.questions if q.topic.lower() == key]

    def has_topic(self, topic: str) -> bool:
        return bool(self.questions_for_topic(topic))


def load_question_bank(file_path: Path) -> QuestionBank:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_question_bank(text)
    if not questions:
        raise QuestionBankImportError("Question bank file did not contain any questions.")
    return QuestionBank(questions=questions)


def parse_question_bank(text: str) -> list[QuizQuestion]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    questions: list[QuizQuestion] = []
    per_topic: dict[str, int] = defaultdict(int)
    seen_ids: set[str] = set()
    for block in blocks:
        if not block:
            continue
        question = _parse_block(block)
        per_topic[question.topic.lower()] += 1
        if not question.id:
            question.id = f"{_slug(question.topic)}-{per_topic[question.topic.lower()]}"
        if question.id in seen_ids:
            raise QuestionBankImportError(f"Duplicate question id '{question.id}'.")
        seen_ids.add(question.id)
        questions.append(question)
    return questions


def _parse_block(block: str) -> QuizQuestion:
    question_lines: list[str] = []
    explanation_lines: list[str] = []
    options: dict[str, str] = {}
    question_id = ""
    topic: str | None = None
    category: str | None = None
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("ID:"):
            question_id = _value(line)
            current_section = None
            continue

        if upper.startswith("TOPIC:"):
            topic = _value(line)
            current_section = None
            continue

        if upper.startswith("CATEGORY:"):
            category = _value(line) or None
            current_section = None
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = _value(line).upper()
            current_section = None
            continue

        if upper.startswith("EXPLANATION:"):
            explanation_lines = [_value(line)]
            current_section = "EXPLANATION"
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuestionBankImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    if not topic:
        raise QuestionBankImportError("Topic missing (TOPIC: ...)")
    if not question_lines:
        raise QuestionBankImportError("Question text missing (Q: ...)")
    if len(options) != 4:
        raise QuestionBankImportError("Each question must define exactly four options (A-D).")

    option_list = [options.get(letter, "").strip() for letter in _OPTION_ORDER]
    if any(not opt for opt in option_list):
        raise QuestionBankImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuestionBankImportError("CORRECT is required for course quiz questions.")
    if correct_letter not in _OPTION_ORDER:
        raise QuestionBankImportError("CORRECT must be one of A, B, C, or D.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuestionBankImportError("Question text cannot be empty.")

    explanation = "\n".join(explanation_lines).strip() or None
    return QuizQuestion(
        id=question_id,
        question_text=question_text,
        options=option_list,
        correct_option_index=_OPTION_ORDER.index(correct_letter),
        topic=topic,
        explanation=explanation,
        category=category,
    )


def _value(line: str) -> str:
    return line.split(":", 1)[1].strip()


def _slug(text: str) -> str:
    return "-".join(text.lower().split())
