import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Point the service at SQLite before any application module builds its engine.
_original_database_url = os.environ.get("DATABASE_URL")
os.environ["DATABASE_URL"] = os.getenv("READING_LIST_TEST_DB", "sqlite+pysqlite:///:memory:")

from fastapi.testclient import TestClient  # noqa: E402

import reading_list.db.database as db_module  # noqa: E402
from reading_list.api.main import app  # noqa: E402
from reading_list.db import models  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _restore_test_env():
    """Restore the caller's DATABASE_URL after all tests complete"""
    yield
    if _original_database_url is None:
        os.environ.pop("DATABASE_URL", None)
    else:
        os.environ["DATABASE_URL"] = _original_database_url


@pytest.fixture
def _engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        models.Base.metadata.drop_all(bind=engine)
        engine.dispose()


# Fresh schema per test, shared with the app through the get_db override
@pytest.fixture
def db_session(_engine):
    SessionLocal = sessionmaker(bind=_engine, autoflush=False, autocommit=False)
    session = SessionLocal()

    def _override_get_db():
        yield session

    app.dependency_overrides[db_module.get_db] = _override_get_db
    try:
        yield session
    finally:
        app.dependency_overrides.pop(db_module.get_db, None)
        session.close()


@pytest.fixture
def client(db_session):
    return TestClient(app)


@pytest.fixture
def article_factory(db_session):
    def _create(title: str = "Example Article", url: str = "https://example.com/post", is_read: bool = False, **kwargs):
        article = models.Article(title=title, url=url, is_read=is_read, **kwargs)
        db_session.add(article)
        db_session.commit()
        db_session.refresh(article)
        return article
    return _create
