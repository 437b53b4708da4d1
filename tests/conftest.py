from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from ranking_api.app import create_app
from ranking_api.core import Settings, build_engine
from ranking_api.services import RankingService, RankingStore, initialize

ADMIN_PASSWORD = "test-reset-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        admin_reset_password=ADMIN_PASSWORD,
        database_url=f"sqlite:///{tmp_path / 'rankings.db'}",
    )


@pytest.fixture
def engine(settings):
    engine = build_engine(settings)
    initialize(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session):
    return RankingStore(session)


@pytest.fixture
def service(store, settings):
    return RankingService(store, settings)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
