from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, Set

import pytest
from fastapi.testclient import TestClient

from soccer_results_api.app.core.config import Settings
from soccer_results_api.app.core.errors import StorageError
from soccer_results_api.app.main import create_app
from soccer_results_api.app.models.match import MatchRecord
from soccer_results_api.app.services.match_service import MatchService
from soccer_results_api.app.stores.base import MatchStore
from soccer_results_api.app.stores.memory import InMemoryMatchStore
from soccer_results_api.app.stores.sqlite import SqliteMatchStore


class FailingStore(InMemoryMatchStore):
    """In-memory store whose selected operations raise ``StorageError``."""

    def __init__(self, failing: Set[str]) -> None:
        super().__init__()
        self.failing = failing

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise StorageError(f"{operation} unavailable")

    def put(self, record: MatchRecord) -> MatchRecord:
        self._check("put")
        return super().put(record)

    def get(self, match_id: int) -> Optional[MatchRecord]:
        self._check("get")
        return super().get(match_id)

    def get_all(self) -> list[MatchRecord]:
        self._check("get_all")
        return super().get_all()

    def delete(self, match_id: int) -> bool:
        self._check("delete")
        return super().delete(match_id)


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "matches.db")


@pytest.fixture
def sqlite_store(db_path: str) -> SqliteMatchStore:
    store = SqliteMatchStore(db_path)
    store.init_schema()
    return store


@pytest.fixture(params=["sqlite", "memory"])
def store(request: pytest.FixtureRequest) -> MatchStore:
    """Every store implementation, so contract tests run against each."""
    if request.param == "sqlite":
        return request.getfixturevalue("sqlite_store")
    return InMemoryMatchStore()


@pytest.fixture
def service(store: MatchStore) -> MatchService:
    return MatchService(store)


@pytest.fixture
def client(db_path: str) -> Iterator[TestClient]:
    app = create_app(Settings(database_url=db_path))
    with TestClient(app) as test_client:
        yield test_client


def make_client(store: MatchStore) -> TestClient:
    return TestClient(create_app(Settings(), store=store))
