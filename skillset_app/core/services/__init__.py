"""In-memory services composed by the catalog and identity stores."""

from .assessment_ledger import AssessmentLedger
from .change_notifier import ChangeListener, ChangeNotifier
from .course_repository import CourseNotFoundError, CourseRepository, validate_course_pricing
from .enrollment_tracker import EnrollmentTracker
from .notebook import Notebook
from .user_roster import RegisteredUser, UserRoster

__all__ = [
    "AssessmentLedger",
    "ChangeListener",
    "ChangeNotifier",
    "CourseNotFoundError",
    "CourseRepository",
    "EnrollmentTracker",
    "Notebook",
    "RegisteredUser",
    "UserRoster",
    "validate_course_pricing",
]
