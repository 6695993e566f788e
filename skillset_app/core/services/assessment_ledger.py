"""Service for quiz attempts and issued certificates."""

from __future__ import annotations

from skillset_app.core.models import Certificate, QuizAttempt


class AssessmentLedger:
    """Append-only record of quiz attempts and certificates."""

    def __init__(self) -> None:
        self._attempts: list[QuizAttempt] = []
        self._certificates: list[Certificate] = []

    def record_attempt(self, attempt: QuizAttempt) -> None:
        self._attempts.append(attempt)

    def get_attempts(self, user_id: str, course_id: str) -> list[QuizAttempt]:
        return [a for a in self._attempts if a.user_id == user_id and a.course_id == course_id]

    def has_passed(self, user_id: str, course_id: str) -> bool:
        return any(attempt.passed for attempt in self.get_attempts(user_id, course_id))

    def record_certificate(self, certificate: Certificate) -> None:
        self._certificates.append(certificate)

    def get_certificates(self, user_id: str) -> list[Certificate]:
        return [c for c in self._certificates if c.user_id == user_id]
