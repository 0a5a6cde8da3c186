"""Shared fixtures: an in-memory request log and an app wired to it."""

import itertools
import json
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from culinarycompanion.app import create_app
from culinarycompanion.features.recipes.infra.entities import EntityProber, NullEntitySearch, get_entity_prober
from culinarycompanion.features.recipes.infra.request_log import RequestLog, get_request_log


class InMemoryRequestLog(RequestLog):
    """Request log kept in a list; timestamps advance one second per append."""

    def __init__(self) -> None:
        super().__init__(db=object())
        self.rows = []
        self._ids = itertools.count(1)
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def append(self, *, input_text, input_type, response_data, language):
        self._clock += timedelta(seconds=1)
        now = self._clock.isoformat()
        row = {
            "id": next(self._ids),
            "input_text": input_text,
            "input_type": input_type,
            "response_data": json.dumps(response_data),
            "language": language,
            "created_at": now,
            "updated_at": now,
        }
        self.rows.append(row)
        return row

    def recent(self, limit=10):
        rows = sorted(self.rows, key=lambda r: (r["created_at"], r["id"]), reverse=True)
        return [dict(r) for r in rows[:limit]]


class FailingRequestLog(RequestLog):
    def __init__(self) -> None:
        super().__init__(db=object())

    def append(self, **kwargs):
        raise ConnectionError("database unreachable")

    def recent(self, limit=10):
        raise ConnectionError("database unreachable")


@pytest.fixture
def request_log():
    return InMemoryRequestLog()


@pytest.fixture
def app(request_log):
    application = create_app()
    application.dependency_overrides[get_request_log] = lambda: request_log
    application.dependency_overrides[get_entity_prober] = lambda: EntityProber(NullEntitySearch())
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def failing_client(app):
    app.dependency_overrides[get_request_log] = lambda: FailingRequestLog()
    return TestClient(app, raise_server_exceptions=False)
