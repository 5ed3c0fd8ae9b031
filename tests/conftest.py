"""Pytest configuration and shared fixtures.

Every test gets its own SQLite file under ``tmp_path``; services and
the HTTP app are wired against it exactly as in production.
"""

from typing import Any, Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from event_registration_api.app.core.config import Settings
from event_registration_api.app.core.db import ConnectionFactory, connection_factory, init_db
from event_registration_api.app.main import create_app
from event_registration_api.app.services import Services, build_services


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_url=str(tmp_path / "eventos-test.db"), db_timeout=1.0)


@pytest.fixture
def connect(settings: Settings) -> ConnectionFactory:
    factory = connection_factory(settings.database_url, settings.db_timeout)
    init_db(factory)
    return factory


@pytest.fixture
def services(connect: ConnectionFactory) -> Services:
    return build_services(connect)


@pytest.fixture
def api_client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def event_payload() -> Callable[..., dict[str, Any]]:
    def make(**overrides: Any) -> dict[str, Any]:
        payload = {
            "nome": "Talk",
            "data": "2025-01-01",
            "local": "Hall",
            "numero_vagas": 2,
            "descricao": "x",
        }
        payload.update(overrides)
        return payload

    return make
