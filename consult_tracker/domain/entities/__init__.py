from .activity import ACTIVITY_TYPE_LABELS, Activity, ActivityType
from .app_data import AppData
from .client import Client
from .meeting_note import MeetingNote
from .project import OPEN_STATUSES, PROJECT_STATUS_LABELS, Project, ProjectStatus
from .remote import Absent, Found, ProbeResult, ReadResult, RemoteConfig

__all__ = [
    "ACTIVITY_TYPE_LABELS",
    "Activity",
    "ActivityType",
    "AppData",
    "Client",
    "MeetingNote",
    "OPEN_STATUSES",
    "PROJECT_STATUS_LABELS",
    "Project",
    "ProjectStatus",
    "Absent",
    "Found",
    "ProbeResult",
    "ReadResult",
    "RemoteConfig",
]
