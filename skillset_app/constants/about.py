"""Static metadata describing Skillset."""

APP_NAME = "Skillset"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Skillset keeps the state of a small online academy: accounts, course catalog, "
    "enrollments, lesson progress, course quizzes, certificates and study notes."
)
