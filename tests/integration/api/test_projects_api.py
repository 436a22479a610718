from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from project_hub.app.core import get_project_repository
from project_hub.app.infrastructure.projects.repositories import InMemoryProjectRepository
from project_hub.app.main import create_app
from tests.unit.fakes.project_repo import FailingProjectRepository

BASE = "/api/v1/projects"


def _client(repo) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_project_repository] = lambda: repo
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def repo() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def client(repo) -> TestClient:
    return _client(repo)


def _create(client: TestClient, **body) -> str:
    resp = client.post(BASE, json=body)
    assert resp.status_code == 201
    return resp.headers["location"].rsplit("/", 1)[-1]


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_project_crud(client):
    create = client.post(BASE, json={"title": "Demo", "description": "First", "status": "active"})
    assert create.status_code == 201
    assert create.content == b""
    location = create.headers["location"]
    project_id = location.rsplit("/", 1)[-1]
    assert location == f"{BASE}/{project_id}"

    listing = client.get(BASE)
    assert listing.status_code == 200
    assert listing.json() == [
        {"id": project_id, "title": "Demo", "description": "First", "status": "active"}
    ]

    fetched = client.get(location)
    assert fetched.status_code == 200
    assert fetched.json()["title"] == "Demo"

    updated = client.put(location, json={"status": "completed"})
    assert updated.status_code == 204
    assert client.get(location).json()["status"] == "completed"
    assert client.get(location).json()["title"] == "Demo"

    deleted = client.delete(location)
    assert deleted.status_code == 204
    assert client.get(location).status_code == 404


def test_create_defaults(client):
    project_id = _create(client, title="Only title")
    body = client.get(f"{BASE}/{project_id}").json()
    assert body["description"] == ""
    assert body["status"] == "draft"


@pytest.mark.parametrize(
    "body, detail",
    [
        ({"title": ""}, "Title must be between 1 and 50 characters."),
        ({"title": "t" * 51}, "Title must be between 1 and 50 characters."),
        ({"title": "ok", "description": "d" * 251}, "Description must be up to 250 characters."),
        ({"title": "ok", "status": "Active"}, "Invalid project status"),
    ],
)
def test_create_validation_errors_are_400(client, repo, body, detail):
    resp = client.post(BASE, json=body)
    assert resp.status_code == 400
    assert resp.json() == {"detail": detail}
    assert repo.records() == []


def test_malformed_body_is_rejected_by_schema(client):
    resp = client.post(BASE, json={"description": "no title"})
    assert resp.status_code == 422


def test_update_unknown_project_is_404(client):
    resp = client.put(f"{BASE}/missing", json={"title": "X"})
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Project with id missing not found."}


def test_update_invalid_status_is_400_and_keeps_record(client, repo):
    project_id = _create(client, title="Stable")
    before = repo.records()

    resp = client.put(f"{BASE}/{project_id}", json={"title": "New", "status": "invalid"})

    assert resp.status_code == 400
    assert repo.records() == before


def test_delete_unknown_project_is_404(client):
    assert client.delete(f"{BASE}/ghost").status_code == 404


def test_storage_failure_is_500_with_operation_message():
    client = _client(FailingProjectRepository("find_all"))

    resp = client.get(BASE)

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to list projects: storage offline"}


def test_unexpected_error_outside_use_case_is_generic_500(repo):
    app = create_app()
    app.dependency_overrides[get_project_repository] = lambda: repo

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaput")

    resp = TestClient(app, raise_server_exceptions=False).get("/boom")

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
