from .collection_store import (
    ACTIVITIES_PATH,
    CLIENTS_PATH,
    MEETING_NOTES_PATH,
    PROJECTS_PATH,
    CollectionStore,
)
from .identity import generate_id, now_timestamp
from .seed_data import get_seed_data
from .settings_service import SettingsService
from .tracker_service import DashboardSummary, TrackerService
