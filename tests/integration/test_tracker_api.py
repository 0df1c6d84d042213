"""API tests — the v1 routers wired to a fake GitHub through dependency overrides."""

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from consult_tracker.application.services import (
    CLIENTS_PATH,
    CollectionStore,
    SettingsService,
    TrackerService,
)
from consult_tracker.infrastructure.dependencies import get_settings_service, get_tracker_service
from consult_tracker.infrastructure.github import GitHubContentClient
from consult_tracker.infrastructure.settings import JsonFileRemoteConfigRepository
from consult_tracker.main import app
from tests.services.fake_github import FakeGitHub


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def repository(tmp_path) -> JsonFileRemoteConfigRepository:
    return JsonFileRemoteConfigRepository(tmp_path / "github_config.json")


def _override_services(
    repository: JsonFileRemoteConfigRepository, http_client: httpx.AsyncClient
) -> None:
    """Wire the app to one content client and tracker, as dependencies.py does."""
    content_client = GitHubContentClient(
        config_provider=repository.load,
        http_client=http_client,
    )
    tracker = TrackerService(CollectionStore(content_client))
    app.dependency_overrides[get_tracker_service] = lambda: tracker
    app.dependency_overrides[get_settings_service] = lambda: SettingsService(
        repository,
        content_client,
        on_target_change=(content_client.token_cache.clear, tracker.reset),
    )


@pytest_asyncio.fixture
async def api(github: FakeGitHub, repository: JsonFileRemoteConfigRepository):
    _override_services(repository, github.client())

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


async def _configure(api: AsyncClient, repo: str = "r") -> None:
    response = await api.put(
        "/api/v1/settings/github",
        json={"token": "t", "owner": "o", "repo": repo, "branch": "main"},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_data_requires_configuration(api: AsyncClient, github: FakeGitHub):
    response = await api.get("/api/v1/data")

    assert response.status_code == 428
    assert github.requests == []


@pytest.mark.asyncio
async def test_settings_hide_token(api: AsyncClient):
    await _configure(api)

    response = await api.get("/api/v1/settings/github")

    body = response.json()
    assert body == {
        "owner": "o",
        "repo": "r",
        "branch": "main",
        "token_set": True,
        "configured": True,
    }


@pytest.mark.asyncio
async def test_connection_test(api: AsyncClient):
    unconfigured = await api.post("/api/v1/settings/github/test")
    await _configure(api)
    configured = await api.post("/api/v1/settings/github/test")

    assert unconfigured.json()["ok"] is False
    assert configured.json() == {"ok": True, "detail": "Connected: o/r"}


@pytest.mark.asyncio
async def test_empty_remote_loads_as_empty_collections(api: AsyncClient):
    await _configure(api)

    response = await api.get("/api/v1/data")

    assert response.status_code == 200
    assert response.json() == {
        "clients": [],
        "projects": [],
        "activities": [],
        "meeting_notes": [],
    }


@pytest.mark.asyncio
async def test_client_crud(api: AsyncClient, github: FakeGitHub):
    await _configure(api)

    created = await api.post("/api/v1/clients", json={"company_name": "Acme"})
    assert created.status_code == 201
    client_id = created.json()["id"]

    updated = await api.put(f"/api/v1/clients/{client_id}", json={"company_name": "Acme Ltd."})
    assert updated.status_code == 200
    assert updated.json()["created_at"] == created.json()["created_at"]
    assert github.document(CLIENTS_PATH)[0]["companyName"] == "Acme Ltd."

    deleted = await api.delete(f"/api/v1/clients/{client_id}")
    assert deleted.status_code == 204
    missing = await api.get(f"/api/v1/clients/{client_id}")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_conflict_maps_to_409(api: AsyncClient, github: FakeGitHub):
    await _configure(api)
    await api.post("/api/v1/clients", json={"company_name": "Acme"})
    github.put_file(CLIENTS_PATH, [])

    response = await api.post("/api/v1/clients", json={"company_name": "Beta"})

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_remote_failure_maps_to_502(api: AsyncClient, github: FakeGitHub):
    await _configure(api)
    github.fail("GET", CLIENTS_PATH, 500, "Server Error")

    response = await api.post("/api/v1/data/refresh")

    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail["path"] == CLIENTS_PATH
    assert detail["status"] == 500


@pytest.mark.asyncio
async def test_seed_project_status_and_dashboard(api: AsyncClient):
    await _configure(api)

    seeded = await api.post("/api/v1/data/seed")
    assert seeded.status_code == 200
    assert len(seeded.json()["projects"]) == 4

    moved = await api.patch("/api/v1/projects/p2/status", json={"status": "won"})
    assert moved.json()["status"] == "won"

    dashboard = (await api.get("/api/v1/data/dashboard")).json()
    assert dashboard["status_counts"]["won"] == 2
    assert dashboard["won_amount"] == 11_000_000

    activities = (await api.get("/api/v1/projects/p1/activities")).json()
    assert [a["id"] for a in activities] == ["a1"]
    notes = (await api.get("/api/v1/projects/p1/meeting-notes")).json()
    assert notes[0]["activity_id"] == "a1"


@pytest.mark.asyncio
async def test_meeting_note_too_large_maps_to_413(api: AsyncClient):
    await _configure(api)

    response = await api.post(
        "/api/v1/meeting-notes",
        json={
            "project_id": "p1",
            "client_id": "c1",
            "file_name": "huge.txt",
            "content": "x" * (500 * 1024 + 1),
        },
    )

    assert response.status_code == 413


@pytest.mark.asyncio
async def test_labels():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/data/labels")

    labels = response.json()
    assert labels["project_statuses"]["deepening"] == "Deepening"
    assert set(labels["activity_types"]) == {"appointment", "call", "email", "meeting", "other"}


@pytest.mark.asyncio
async def test_switching_repository_drops_snapshot_and_version_tokens(
    repository: JsonFileRemoteConfigRepository,
):
    repo_a = FakeGitHub(repo="a")
    repo_b = FakeGitHub(repo="b")

    def route(request: httpx.Request) -> httpx.Response:
        target = repo_b if request.url.path.startswith("/repos/o/b") else repo_a
        return target.handle(request)

    _override_services(repository, httpx.AsyncClient(transport=httpx.MockTransport(route)))
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as api:
            await _configure(api, repo="a")
            await api.post("/api/v1/data/seed")

            await _configure(api, repo="b")
            listed = await api.get("/api/v1/clients")
            created = await api.post("/api/v1/clients", json={"company_name": "Acme"})
    finally:
        app.dependency_overrides.clear()

    assert listed.json() == []
    assert created.status_code == 201
    assert "sha" not in repo_b.writes()[0].body
    assert [r["companyName"] for r in repo_b.document(CLIENTS_PATH)] == ["Acme"]
    assert len(repo_a.document(CLIENTS_PATH)) == 3


@pytest.mark.asyncio
async def test_saving_same_repository_keeps_snapshot(api: AsyncClient, github: FakeGitHub):
    await _configure(api)
    await api.post("/api/v1/clients", json={"company_name": "Acme"})
    reads_before = len([r for r in github.requests if r.method == "GET"])

    await _configure(api)
    await api.post("/api/v1/clients", json={"company_name": "Beta"})

    reads_after = len([r for r in github.requests if r.method == "GET"])
    assert reads_after == reads_before
    assert [r["companyName"] for r in github.document(CLIENTS_PATH)] == ["Acme", "Beta"]
