from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from soccer_results_api.app.stores.memory import InMemoryMatchStore
from tests.conftest import FailingStore, make_client

BASE = "/api/v1/matches"
MATCH = {"teamOne": "A", "teamTwo": "B", "scoreOne": 2, "scoreTwo": 1}


def test_create_returns_201_with_assigned_id(client: TestClient) -> None:
    response = client.post(BASE, json=MATCH)
    assert response.status_code == 201
    assert response.json() == {"id": 1, **MATCH}


def test_create_ignores_client_supplied_id(client: TestClient) -> None:
    response = client.post(BASE, json={"id": 99, **MATCH})
    assert response.status_code == 201
    assert response.json()["id"] == 1


def test_create_accepts_snake_case_fields(client: TestClient) -> None:
    response = client.post(BASE, json={"team_one": "A", "team_two": "B"})
    assert response.status_code == 201
    assert response.json() == {"id": 1, "teamOne": "A", "teamTwo": "B", "scoreOne": None, "scoreTwo": None}


def test_list_after_two_creates(client: TestClient) -> None:
    client.post(BASE, json=MATCH)
    client.post(BASE, json={**MATCH, "teamTwo": "C"})
    response = client.get(BASE)
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 2
    assert {m["teamTwo"] for m in body} == {"B", "C"}


def test_read_by_id(client: TestClient) -> None:
    created = client.post(BASE, json=MATCH).json()
    response = client.get(f"{BASE}/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_read_missing_is_404(client: TestClient) -> None:
    response = client.get(f"{BASE}/1")
    assert response.status_code == 404
    assert response.json() == {"detail": "Match not found"}


def test_update_replaces_record(client: TestClient) -> None:
    client.post(BASE, json=MATCH)
    response = client.put(BASE, json={"id": 1, "teamOne": "A", "teamTwo": "C", "scoreOne": 3, "scoreTwo": 1})
    assert response.status_code == 200
    assert client.get(f"{BASE}/1").json()["teamTwo"] == "C"

    client.put(BASE, json={"id": 1, "teamOne": "A"})
    assert client.get(f"{BASE}/1").json() == {
        "id": 1,
        "teamOne": "A",
        "teamTwo": None,
        "scoreOne": None,
        "scoreTwo": None,
    }


def test_update_without_id_is_rejected(client: TestClient) -> None:
    response = client.put(BASE, json=MATCH)
    assert response.status_code == 422


def test_delete_then_read_is_404(client: TestClient) -> None:
    client.post(BASE, json=MATCH)
    response = client.delete(f"{BASE}/1")
    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["X-Delete-Outcome"] == "deleted"
    assert client.get(f"{BASE}/1").status_code == 404


def test_delete_missing_still_succeeds(client: TestClient) -> None:
    response = client.delete(f"{BASE}/5")
    assert response.status_code == 204
    assert response.headers["X-Delete-Outcome"] == "not_found"


def test_delete_storage_failure_still_succeeds() -> None:
    with make_client(FailingStore({"delete"})) as client:
        response = client.delete(f"{BASE}/1")
    assert response.status_code == 204
    assert response.headers["X-Delete-Outcome"] == "storage_failed"


@pytest.mark.parametrize(
    "method, path, operation",
    [
        ("post", BASE, "put"),
        ("get", BASE, "get_all"),
        ("get", f"{BASE}/1", "get"),
        ("put", BASE, "put"),
    ],
)
def test_storage_failure_is_500(method: str, path: str, operation: str) -> None:
    with make_client(FailingStore({operation})) as client:
        response = client.request(method, path, json={"id": 1, **MATCH} if method in {"post", "put"} else None)
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage failure"}


def test_non_integer_id_is_422(client: TestClient) -> None:
    assert client.get(f"{BASE}/abc").status_code == 422


def test_invalid_score_is_422(client: TestClient) -> None:
    response = client.post(BASE, json={**MATCH, "scoreOne": "two"})
    assert response.status_code == 422


def test_legacy_prefix_serves_the_same_routes() -> None:
    store = InMemoryMatchStore()
    with make_client(store) as client:
        created = client.post("/api/matches", json=MATCH).json()
        assert client.get(f"{BASE}/{created['id']}").json() == created
        assert client.get("/api/matches").json() == [created]
    assert len(store.get_all()) == 1


def test_openapi_lists_match_routes(client: TestClient) -> None:
    paths = client.get("/openapi.json").json()["paths"]
    assert set(paths) == {BASE, f"{BASE}/{{match_id}}"}


def test_read_unrepresentable_id_is_404(client: TestClient) -> None:
    response = client.get(f"{BASE}/{2**63}")
    assert response.status_code == 404
    assert response.json() == {"detail": "Match not found"}


def test_delete_unrepresentable_id_succeeds(client: TestClient) -> None:
    response = client.delete(f"{BASE}/{2**63}")
    assert response.status_code == 204
    assert response.headers["X-Delete-Outcome"] == "not_found"


def test_oversized_score_is_422(client: TestClient) -> None:
    response = client.post(BASE, json={"teamOne": "A", "scoreOne": 2**63})
    assert response.status_code == 422
    assert client.get(BASE).json() == []


def test_update_oversized_id_is_422(client: TestClient) -> None:
    response = client.put(BASE, json={"id": 2**63, "teamOne": "A"})
    assert response.status_code == 422


def test_trailing_slash_routes_are_served_directly(client: TestClient) -> None:
    created = client.post(f"{BASE}/", json=MATCH, follow_redirects=False)
    assert created.status_code == 201
    listed = client.get(f"{BASE}/", follow_redirects=False)
    assert listed.status_code == 200
    assert listed.json() == [created.json()]
    updated = client.put(f"{BASE}/", json={**created.json(), "teamTwo": "C"}, follow_redirects=False)
    assert updated.status_code == 200
    assert updated.json()["teamTwo"] == "C"
