"""Unit tests for the CollectionStore."""

import pytest

from consult_tracker.application.interfaces import ContentStore
from consult_tracker.application.services import (
    ACTIVITIES_PATH,
    CLIENTS_PATH,
    MEETING_NOTES_PATH,
    PROJECTS_PATH,
    CollectionStore,
)
from consult_tracker.application.services.collection_store import from_document, to_document
from consult_tracker.domain.entities import (
    Absent,
    Activity,
    ActivityType,
    AppData,
    Client,
    Found,
    MeetingNote,
    ProbeResult,
    Project,
    ProjectStatus,
    RemoteConfig,
)
from consult_tracker.domain.exceptions import RemoteReadError, RemoteWriteError
from consult_tracker.infrastructure.github import GitHubContentClient
from tests.services.fake_github import FakeGitHub


class FakeContentStore(ContentStore):
    """In-memory fake content store for unit testing."""

    def __init__(self, documents: dict | None = None):
        self.documents: dict = dict(documents or {})
        self.writes: list[tuple[str, object, str | None]] = []
        self.fail_write_on: str | None = None
        self.fail_read_on: str | None = None

    async def read(self, path: str):
        if path == self.fail_read_on:
            raise RemoteReadError(path, status_code=500, detail="Server Error")
        if path not in self.documents:
            return Absent(path)
        return Found(document=self.documents[path], sha=f"sha-{path}")

    async def write(self, path: str, document, message: str | None = None) -> str:
        if path == self.fail_write_on:
            raise RemoteWriteError(path, status_code=500, detail="Server Error")
        self.writes.append((path, document, message))
        self.documents[path] = document
        return f"sha-{len(self.writes)}"

    async def probe(self) -> ProbeResult:
        return ProbeResult(ok=True, detail="fake")


@pytest.fixture
def content() -> FakeContentStore:
    return FakeContentStore()


@pytest.fixture
def store(content: FakeContentStore) -> CollectionStore:
    return CollectionStore(content)


# ── load_all ──


@pytest.mark.asyncio
async def test_load_all_on_empty_remote_returns_empty_collections(store: CollectionStore):
    data = await store.load_all()
    assert data == AppData(clients=[], projects=[], activities=[], meeting_notes=[])


@pytest.mark.asyncio
async def test_load_all_decodes_camel_case_records():
    content = FakeContentStore({
        CLIENTS_PATH: [{"id": "c1", "companyName": "Acme", "createdAt": "t0", "updatedAt": "t1"}],
        PROJECTS_PATH: [{"id": "p1", "clientId": "c1", "status": "won", "amount": 8000000}],
        ACTIVITIES_PATH: [{"id": "a1", "projectId": "p1", "type": "call", "date": "2026-02-11"}],
        MEETING_NOTES_PATH: [{"id": "mn1", "projectId": "p1", "fileName": "m.txt", "content": "x"}],
    })

    data = await CollectionStore(content).load_all()

    assert data.clients == [Client(id="c1", company_name="Acme", created_at="t0", updated_at="t1")]
    assert data.projects[0].status is ProjectStatus.WON
    assert data.projects[0].amount == 8000000
    assert data.activities[0].type is ActivityType.CALL
    assert data.meeting_notes[0].activity_id is None


@pytest.mark.asyncio
async def test_load_all_fails_when_any_read_fails():
    content = FakeContentStore({CLIENTS_PATH: []})
    content.fail_read_on = ACTIVITIES_PATH

    with pytest.raises(RemoteReadError) as exc_info:
        await CollectionStore(content).load_all()

    assert exc_info.value.path == ACTIVITIES_PATH


@pytest.mark.asyncio
async def test_load_all_rejects_non_array_document():
    content = FakeContentStore({PROJECTS_PATH: {"id": "p1"}})

    with pytest.raises(RemoteReadError) as exc_info:
        await CollectionStore(content).load_all()

    assert exc_info.value.kind == "decode"


@pytest.mark.asyncio
async def test_load_all_rejects_unknown_enum_value():
    content = FakeContentStore({PROJECTS_PATH: [{"id": "p1", "status": "archived"}]})

    with pytest.raises(RemoteReadError):
        await CollectionStore(content).load_all()


# ── save ──


@pytest.mark.asyncio
async def test_save_writes_whole_collection_with_fixed_message(
    store: CollectionStore, content: FakeContentStore
):
    clients = [
        Client(id="c1", company_name="A", created_at="t", updated_at="t"),
        Client(id="c2", company_name="B", created_at="t", updated_at="t"),
    ]

    await store.save_clients(clients)

    path, document, message = content.writes[0]
    assert path == CLIENTS_PATH
    assert message == "Update clients"
    assert [r["id"] for r in document] == ["c1", "c2"]
    assert document[0]["companyName"] == "A"
    assert "company_name" not in document[0]


@pytest.mark.asyncio
async def test_each_collection_has_its_own_path_and_message(
    store: CollectionStore, content: FakeContentStore
):
    await store.save_projects([])
    await store.save_activities([])
    await store.save_meeting_notes([])

    assert [(p, m) for p, _, m in content.writes] == [
        (PROJECTS_PATH, "Update projects"),
        (ACTIVITIES_PATH, "Update activity log"),
        (MEETING_NOTES_PATH, "Update meeting notes"),
    ]


@pytest.mark.asyncio
async def test_save_then_load_round_trips_through_github():
    github = FakeGitHub()
    client = GitHubContentClient(
        config_provider=lambda: RemoteConfig(token="t", owner="o", repo="r"),
        http_client=github.client(),
    )
    store = CollectionStore(client)
    projects = [
        Project(id="p2", client_id="c1", title="Second", status=ProjectStatus.LOST, amount=1),
        Project(id="p1", client_id="c1", title="First", status=ProjectStatus.DEEPENING, amount=2),
    ]
    notes = [MeetingNote(id="n1", project_id="p1", activity_id="a1", content="議事メモ")]

    await store.save_projects(projects)
    await store.save_meeting_notes(notes)
    data = await store.load_all()

    assert data.projects == projects
    assert data.meeting_notes == notes
    assert github.document(PROJECTS_PATH)[0]["status"] == "lost"


def test_document_mapping_omits_missing_activity_id():
    note = MeetingNote(id="n1", project_id="p1", client_id="c1", file_name="a.txt")

    record = to_document(note)

    assert "activityId" not in record
    assert record["fileName"] == "a.txt"
    assert from_document(MeetingNote, record) == note


def test_document_mapping_ignores_unknown_keys():
    activity = from_document(Activity, {"id": "a1", "type": "email", "legacyField": 1})
    assert activity == Activity(id="a1", type=ActivityType.EMAIL)
    assert "updatedAt" not in to_document(activity)


# ── seed ──


@pytest.mark.asyncio
async def test_seed_writes_collections_in_order(store: CollectionStore, content: FakeContentStore):
    await store.seed()

    assert [path for path, _, _ in content.writes] == [
        CLIENTS_PATH,
        PROJECTS_PATH,
        ACTIVITIES_PATH,
        MEETING_NOTES_PATH,
    ]
    sizes = [len(document) for _, document, _ in content.writes]
    assert sizes == [3, 4, 3, 1]


@pytest.mark.asyncio
async def test_seed_stops_at_first_failed_write(content: FakeContentStore):
    content.fail_write_on = PROJECTS_PATH

    with pytest.raises(RemoteWriteError):
        await CollectionStore(content).seed()

    assert [path for path, _, _ in content.writes] == [CLIENTS_PATH]


@pytest.mark.asyncio
async def test_seed_can_write_concurrently_when_policy_disabled(content: FakeContentStore):
    await CollectionStore(content, sequential_seed=False).seed()

    assert sorted(path for path, _, _ in content.writes) == sorted(
        [CLIENTS_PATH, PROJECTS_PATH, ACTIVITIES_PATH, MEETING_NOTES_PATH]
    )


@pytest.mark.asyncio
async def test_seed_data_cross_references_resolve(store: CollectionStore):
    await store.seed()
    data = await store.load_all()

    client_ids = {c.id for c in data.clients}
    project_ids = {p.id for p in data.projects}
    activity_ids = {a.id for a in data.activities}
    assert all(p.client_id in client_ids for p in data.projects)
    assert all(a.project_id in project_ids for a in data.activities)
    assert data.meeting_notes[0].activity_id in activity_ids
