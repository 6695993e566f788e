"""Catalog, quiz and certificate constants shared across the core layer."""

QUIZ_PASSING_SCORE: int = 70
QUIZ_TIME_LIMIT_MINUTES: int = 45
QUIZ_OPTION_COUNT: int = 4
DEFAULT_MIX_QUESTIONS_PER_TOPIC: int = 4

# Placeholder user id recorded by course quizzes when no user is passed in.
PLACEHOLDER_QUIZ_USER_ID: str = "current-user"

CERTIFICATE_PREFIX: str = "SKILLSET"
CERTIFICATE_NUMBER_SUFFIX_DIGITS: int = 6
ACADEMY_NAME: str = "Skillset Academy"

UNTITLED_NOTE_TITLE: str = "Untitled Note"

PAYMENT_FAILURE_RATE: float = 0.1
PAYMENT_MIN_DELAY_SECONDS: float = 2.0
PAYMENT_DELAY_SPREAD_SECONDS: float = 2.0
