"""Collection store — the four fixed collections as whole-document reads and writes.

Every collection is one JSON array in the remote store. Saving always
replaces the whole array; callers compute the next state (insert, update or
delete against the previously loaded list) before calling ``save_*``.
Remote errors pass through unchanged.
"""

import asyncio
from dataclasses import fields
from enum import Enum
from typing import Any, TypeVar

from consult_tracker.application.interfaces import ContentStore
from consult_tracker.application.services.seed_data import get_seed_data
from consult_tracker.domain.entities import (
    Activity,
    AppData,
    Client,
    Found,
    MeetingNote,
    Project,
)
from consult_tracker.domain.exceptions import RemoteReadError
from consult_tracker.infrastructure.logging.colored_logger import (
    OperationLogger,
    OperationStage,
)

log = OperationLogger("CollectionStore")

CLIENTS_PATH = "data/clients.json"
PROJECTS_PATH = "data/projects.json"
ACTIVITIES_PATH = "data/activities.json"
MEETING_NOTES_PATH = "data/meeting-notes.json"

COMMIT_MESSAGES: dict[str, str] = {
    CLIENTS_PATH: "Update clients",
    PROJECTS_PATH: "Update projects",
    ACTIVITIES_PATH: "Update activity log",
    MEETING_NOTES_PATH: "Update meeting notes",
}

E = TypeVar("E")


# ── Document mapping ─────────────────────────────────────────────────


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_document(entity: Any) -> dict[str, Any]:
    """Map a domain entity → camelCase JSON record. ``None`` fields are omitted."""
    record: dict[str, Any] = {}
    for f in fields(entity):
        value = getattr(entity, f.name)
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        record[_camel(f.name)] = value
    return record


def from_document(entity_type: type[E], record: dict[str, Any]) -> E:
    """Map a camelCase JSON record → domain entity. Unknown keys are ignored."""
    kwargs: dict[str, Any] = {}
    for f in fields(entity_type):
        value = record.get(_camel(f.name))
        if value is None:
            continue
        if isinstance(f.type, type) and issubclass(f.type, Enum):
            value = f.type(value)
        elif f.type is int:
            value = int(value)
        kwargs[f.name] = value
    return entity_type(**kwargs)


def _decode_collection(path: str, entity_type: type[E], document: Any) -> list[E]:
    if not isinstance(document, list):
        raise RemoteReadError(
            path,
            detail=f"Expected a JSON array, got {type(document).__name__}",
            kind="decode",
        )
    try:
        return [from_document(entity_type, record) for record in document]
    except (TypeError, ValueError, AttributeError) as exc:
        raise RemoteReadError(
            path, detail=f"Invalid {entity_type.__name__} record: {exc}", kind="decode"
        ) from exc


# ── CollectionStore ──────────────────────────────────────────────────


class CollectionStore:
    """Load/save façade over a ContentStore for clients, projects, activities and notes."""

    def __init__(self, content_store: ContentStore, *, sequential_seed: bool = True):
        self._content_store = content_store
        self._sequential_seed = sequential_seed

    async def _load(self, path: str, entity_type: type[E]) -> list[E]:
        result = await self._content_store.read(path)
        if not isinstance(result, Found):
            return []
        return _decode_collection(path, entity_type, result.document)

    async def load_all(self) -> AppData:
        """Read all four collections concurrently.

        All-or-nothing: the first failing read propagates and no partial
        snapshot is returned. Missing documents load as empty lists.
        """
        with log.timed_step(OperationStage.LOAD, "Loading all collections"):
            clients, projects, activities, meeting_notes = await asyncio.gather(
                self._load(CLIENTS_PATH, Client),
                self._load(PROJECTS_PATH, Project),
                self._load(ACTIVITIES_PATH, Activity),
                self._load(MEETING_NOTES_PATH, MeetingNote),
            )
        log.stats(
            clients=len(clients),
            projects=len(projects),
            activities=len(activities),
            meeting_notes=len(meeting_notes),
        )
        return AppData(
            clients=clients,
            projects=projects,
            activities=activities,
            meeting_notes=meeting_notes,
        )

    async def _save(self, path: str, items: list[Any]) -> None:
        with log.timed_step(OperationStage.SAVE, f"Saving {path}", records=len(items)):
            await self._content_store.write(
                path,
                [to_document(item) for item in items],
                COMMIT_MESSAGES[path],
            )

    async def save_clients(self, clients: list[Client]) -> None:
        await self._save(CLIENTS_PATH, clients)

    async def save_projects(self, projects: list[Project]) -> None:
        await self._save(PROJECTS_PATH, projects)

    async def save_activities(self, activities: list[Activity]) -> None:
        await self._save(ACTIVITIES_PATH, activities)

    async def save_meeting_notes(self, meeting_notes: list[MeetingNote]) -> None:
        await self._save(MEETING_NOTES_PATH, meeting_notes)

    async def seed(self) -> None:
        """Write the demonstration dataset: clients → projects → activities → notes.

        Writes go out one after another so four commits do not hit GitHub in
        the same instant (secondary rate limits). This is throttling policy:
        the paths are independent, so the version-token cache would be safe
        with concurrent writes too. A failing write stops the remaining ones.
        """
        data = get_seed_data()
        writes = [
            (self.save_clients, data.clients),
            (self.save_projects, data.projects),
            (self.save_activities, data.activities),
            (self.save_meeting_notes, data.meeting_notes),
        ]
        with log.timed_step(OperationStage.SEED, "Writing sample data", sequential=self._sequential_seed):
            if self._sequential_seed:
                for save, items in writes:
                    await save(items)
            else:
                await asyncio.gather(*(save(items) for save, items in writes))
