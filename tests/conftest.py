import pytest
from fastapi.testclient import TestClient

from edumanage.config import Settings
from edumanage.infrastructure.db import Base, build_engine, build_session_factory
from edumanage.infrastructure.store import DocumentStore
from edumanage.main import create_app


@pytest.fixture
def settings():
    """Тестовые настройки: общая in-memory SQLite"""
    return Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # lifespan создаёт engine и таблицы, на выходе закрывает
    with TestClient(app) as c:
        yield c


@pytest.fixture
def app_store(client):
    """DocumentStore поверх той же БД, что и у приложения"""
    session = client.app.state.session_factory()
    try:
        yield DocumentStore(session)
    finally:
        session.close()


@pytest.fixture
def store():
    """Изолированный DocumentStore без HTTP-слоя"""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    try:
        yield DocumentStore(session)
    finally:
        session.close()
        engine.dispose()
