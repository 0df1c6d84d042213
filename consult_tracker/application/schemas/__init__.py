from .activity import ActivityCreate, ActivityResponse
from .app_data import AppDataResponse, DashboardSummaryResponse, LabelsResponse
from .client import ClientCreate, ClientResponse, ClientUpdate
from .meeting_note import MeetingNoteCreate, MeetingNoteResponse
from .project import ProjectCreate, ProjectResponse, ProjectStatusUpdate, ProjectUpdate
from .settings import ConnectionTestResponse, RemoteConfigResponse, RemoteConfigUpdate

__all__ = [
    "ActivityCreate",
    "ActivityResponse",
    "AppDataResponse",
    "DashboardSummaryResponse",
    "LabelsResponse",
    "ClientCreate",
    "ClientResponse",
    "ClientUpdate",
    "MeetingNoteCreate",
    "MeetingNoteResponse",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectStatusUpdate",
    "ProjectUpdate",
    "ConnectionTestResponse",
    "RemoteConfigResponse",
    "RemoteConfigUpdate",
]
