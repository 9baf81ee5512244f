from __future__ import annotations

from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from bookstore.api.http.app import create_app
from bookstore.core.services import DbSessionService
from bookstore.runtime.config.config_data import ConfigData, DatabaseConfig

__all__ = [
    "app_config",
    "session",
    "app",
    "client",
    "database_service",
]


@pytest.fixture
def app_config() -> ConfigData:
    """Configuration backed by a private in-memory SQLite database."""
    config = ConfigData()
    config.app.environment = "test"
    config.database = DatabaseConfig(url="sqlite://", environment_mode="test")
    config.logging.level = "WARNING"
    config.logging.file = None
    return config


@pytest.fixture
def session() -> Generator[Session]:
    """Create a fresh database session for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    from bookstore.entities.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()
            engine.dispose()


@pytest.fixture
def app(app_config: ConfigData) -> FastAPI:
    return create_app(app_config)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client with startup/shutdown run around each test."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database_service(client: TestClient) -> DbSessionService:
    return client.app.state.app_dependencies.database_service
