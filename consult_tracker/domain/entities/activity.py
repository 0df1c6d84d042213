"""Domain entity for logged activities — appointments, calls, emails, meetings."""

from dataclasses import dataclass
from enum import Enum


class ActivityType(str, Enum):
    """Kind of client interaction."""

    APPOINTMENT = "appointment"
    CALL = "call"
    EMAIL = "email"
    MEETING = "meeting"
    OTHER = "other"


ACTIVITY_TYPE_LABELS: dict[ActivityType, str] = {
    ActivityType.APPOINTMENT: "Appointment",
    ActivityType.CALL: "Call",
    ActivityType.EMAIL: "Email",
    ActivityType.MEETING: "Meeting",
    ActivityType.OTHER: "Other",
}


@dataclass
class Activity:
    """An immutable activity log entry.

    There is no ``updated_at``: corrections are made by deleting the entry
    and logging a new one.
    """

    id: str
    project_id: str = ""
    client_id: str = ""
    type: ActivityType = ActivityType.OTHER
    title: str = ""
    description: str = ""
    date: str = ""
    created_at: str = ""
