"""Application service (use case) for the tracked collections.

Holds the session's snapshot of all four collections. Every mutation builds
the complete next-state list from the snapshot, saves it through the
CollectionStore, and only then swaps it into the snapshot, so a failed save
leaves the snapshot as it was.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from consult_tracker.application.schemas import (
    ActivityCreate,
    ClientCreate,
    ClientUpdate,
    MeetingNoteCreate,
    ProjectCreate,
    ProjectUpdate,
)
from consult_tracker.application.services.collection_store import CollectionStore
from consult_tracker.application.services.identity import generate_id, now_timestamp
from consult_tracker.domain.entities import (
    OPEN_STATUSES,
    Activity,
    AppData,
    Client,
    MeetingNote,
    Project,
    ProjectStatus,
)
from consult_tracker.domain.exceptions import EntityNotFoundError, MeetingNoteTooLargeError

logger = logging.getLogger(__name__)


@dataclass
class DashboardSummary:
    client_count: int
    project_count: int
    status_counts: dict[str, int]
    won_amount: int
    pipeline_amount: int
    recent_activities: list[Activity] = field(default_factory=list)


class TrackerService:
    """Orchestrates CRUD over the in-memory snapshot. Depends on the CollectionStore (DI)."""

    def __init__(
        self,
        store: CollectionStore,
        *,
        clock: Callable[[], str] = now_timestamp,
        id_factory: Callable[[], str] = generate_id,
        max_meeting_note_bytes: int = 500 * 1024,
    ):
        self._store = store
        self._clock = clock
        self._id_factory = id_factory
        self._max_meeting_note_bytes = max_meeting_note_bytes
        self._data = AppData()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def data(self) -> AppData:
        return self._data

    # ── Loading ─────────────────────────────────────────────────────

    async def refresh(self) -> AppData:
        """Reload every collection from the remote store."""
        self._data = await self._store.load_all()
        self._initialized = True
        return self._data

    def reset(self) -> None:
        """Drop the snapshot; the next access reloads it from the remote store."""
        self._data = AppData()
        self._initialized = False

    async def get_data(self) -> AppData:
        """Return the snapshot, loading it first if this session has not yet."""
        if not self._initialized:
            await self.refresh()
        return self._data

    async def init_seed_data(self) -> AppData:
        """Write the sample dataset, then reload it.

        Existing documents are read first so their version tokens are known.
        """
        await self.get_data()
        await self._store.seed()
        logger.info("Sample data written — reloading snapshot")
        return await self.refresh()

    # ── Clients ─────────────────────────────────────────────────────

    async def get_client(self, client_id: str) -> Client:
        data = await self.get_data()
        return _find(data.clients, client_id, "Client")

    async def add_client(self, payload: ClientCreate) -> Client:
        data = await self.get_data()
        now = self._clock()
        client = Client(
            id=self._id_factory(),
            **payload.model_dump(),
            created_at=now,
            updated_at=now,
        )
        updated = [*data.clients, client]
        await self._store.save_clients(updated)
        data.clients = updated
        return client

    async def update_client(self, client_id: str, payload: ClientUpdate) -> Client:
        data = await self.get_data()
        current = _find(data.clients, client_id, "Client")
        client = replace(current, **payload.model_dump(), updated_at=self._clock())
        updated = _replace_by_id(data.clients, client)
        await self._store.save_clients(updated)
        data.clients = updated
        return client

    async def delete_client(self, client_id: str) -> None:
        data = await self.get_data()
        _find(data.clients, client_id, "Client")
        updated = [c for c in data.clients if c.id != client_id]
        await self._store.save_clients(updated)
        data.clients = updated

    # ── Projects ────────────────────────────────────────────────────

    async def get_project(self, project_id: str) -> Project:
        data = await self.get_data()
        return _find(data.projects, project_id, "Project")

    async def projects_for_client(self, client_id: str) -> list[Project]:
        data = await self.get_data()
        return [p for p in data.projects if p.client_id == client_id]

    async def add_project(self, payload: ProjectCreate) -> Project:
        data = await self.get_data()
        now = self._clock()
        project = Project(
            id=self._id_factory(),
            **payload.model_dump(),
            created_at=now,
            updated_at=now,
        )
        updated = [*data.projects, project]
        await self._store.save_projects(updated)
        data.projects = updated
        return project

    async def update_project(self, project_id: str, payload: ProjectUpdate) -> Project:
        data = await self.get_data()
        current = _find(data.projects, project_id, "Project")
        project = replace(current, **payload.model_dump(), updated_at=self._clock())
        return await self._commit_project(data, project)

    async def update_project_status(self, project_id: str, status: ProjectStatus) -> Project:
        data = await self.get_data()
        current = _find(data.projects, project_id, "Project")
        project = replace(current, status=status, updated_at=self._clock())
        return await self._commit_project(data, project)

    async def _commit_project(self, data: AppData, project: Project) -> Project:
        updated = _replace_by_id(data.projects, project)
        await self._store.save_projects(updated)
        data.projects = updated
        return project

    async def delete_project(self, project_id: str) -> None:
        data = await self.get_data()
        _find(data.projects, project_id, "Project")
        updated = [p for p in data.projects if p.id != project_id]
        await self._store.save_projects(updated)
        data.projects = updated

    # ── Activities ──────────────────────────────────────────────────

    async def activities_for_project(self, project_id: str) -> list[Activity]:
        """Activities of one project, newest date first."""
        data = await self.get_data()
        matches = [a for a in data.activities if a.project_id == project_id]
        return sorted(matches, key=lambda a: a.date, reverse=True)

    async def add_activity(self, payload: ActivityCreate) -> Activity:
        data = await self.get_data()
        activity = Activity(
            id=self._id_factory(),
            **payload.model_dump(),
            created_at=self._clock(),
        )
        updated = [*data.activities, activity]
        await self._store.save_activities(updated)
        data.activities = updated
        return activity

    async def delete_activity(self, activity_id: str) -> None:
        data = await self.get_data()
        _find(data.activities, activity_id, "Activity")
        updated = [a for a in data.activities if a.id != activity_id]
        await self._store.save_activities(updated)
        data.activities = updated

    # ── Meeting notes ───────────────────────────────────────────────

    async def meeting_notes_for_project(self, project_id: str) -> list[MeetingNote]:
        """Meeting notes of one project, most recently uploaded first."""
        data = await self.get_data()
        matches = [n for n in data.meeting_notes if n.project_id == project_id]
        return sorted(matches, key=lambda n: n.uploaded_at, reverse=True)

    async def add_meeting_note(self, payload: MeetingNoteCreate) -> MeetingNote:
        size = len(payload.content.encode("utf-8"))
        if size > self._max_meeting_note_bytes:
            raise MeetingNoteTooLargeError(size, self._max_meeting_note_bytes)

        data = await self.get_data()
        note = MeetingNote(
            id=self._id_factory(),
            **payload.model_dump(),
            uploaded_at=self._clock(),
        )
        updated = [*data.meeting_notes, note]
        await self._store.save_meeting_notes(updated)
        data.meeting_notes = updated
        return note

    async def delete_meeting_note(self, note_id: str) -> None:
        data = await self.get_data()
        _find(data.meeting_notes, note_id, "MeetingNote")
        updated = [n for n in data.meeting_notes if n.id != note_id]
        await self._store.save_meeting_notes(updated)
        data.meeting_notes = updated

    # ── Dashboard ───────────────────────────────────────────────────

    async def dashboard_summary(self, recent_limit: int = 5) -> DashboardSummary:
        data = await self.get_data()
        status_counts = {s.value: 0 for s in ProjectStatus}
        for project in data.projects:
            status_counts[project.status.value] += 1

        recent = sorted(data.activities, key=lambda a: a.date, reverse=True)
        return DashboardSummary(
            client_count=len(data.clients),
            project_count=len(data.projects),
            status_counts=status_counts,
            won_amount=sum(p.amount for p in data.projects if p.status == ProjectStatus.WON),
            pipeline_amount=sum(p.amount for p in data.projects if p.status in OPEN_STATUSES),
            recent_activities=recent[:recent_limit],
        )


def _find(items: list[Any], item_id: str, entity_type: str) -> Any:
    for item in items:
        if item.id == item_id:
            return item
    raise EntityNotFoundError(entity_type, item_id)


def _replace_by_id(items: list[Any], replacement: Any) -> list[Any]:
    return [replacement if item.id == replacement.id else item for item in items]
