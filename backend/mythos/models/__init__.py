"""SQLAlchemy models for Mythos Ascendant."""

from .enums import MediaCategory
from .submission import Submission
from .student import Student
from .settings import JourneyTitle, SystemSetting, VERIFICATION_SETTING, MAIN_LOGO_SETTING

__all__ = [
    "MediaCategory",
    "Submission",
    "Student",
    "JourneyTitle",
    "SystemSetting",
    "VERIFICATION_SETTING",
    "MAIN_LOGO_SETTING",
]
