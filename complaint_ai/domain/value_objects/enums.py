"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ComplaintCategory(str, Enum):
    SERVICE = "service"
    SAFETY = "safety"
    ACCESSIBILITY = "accessibility"
    CLEANLINESS = "cleanliness"
    STAFF = "staff"
    VEHICLE = "vehicle"
    SCHEDULE = "schedule"
    OTHER = "other"


class SettingCategory(str, Enum):
    AI = "ai"
    SYSTEM = "system"


class FailureKind(str, Enum):
    """Why a classification attempt fell back. Used for logging only."""

    QUOTA = "quota"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    MALFORMED = "malformed"
    UNEXPECTED = "unexpected"
