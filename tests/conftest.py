import os
from types import SimpleNamespace

os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from taskboard.db.database import SessionLocal, engine, create_schema
from taskboard.db import models, schemas
from taskboard.api import deps


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    """Create all tables once per test session (SQLite in-memory lives for the process)."""
    create_schema()
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Empty every table and reset id counters between tests."""
    with engine.begin() as connection:
        for table in reversed(models.Base.metadata.sorted_tables):
            connection.execute(table.delete())
        if connection.dialect.name == "sqlite":
            connection.exec_driver_sql("DELETE FROM sqlite_sequence")
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def managers(db_session: Session):
    """Managers wired exactly as the API wires them, sharing one session."""
    return SimpleNamespace(
        users=deps.build_user_manager(db_session),
        projects=deps.build_project_manager(db_session),
        tasks=deps.build_task_manager(db_session),
        entities=deps.build_entity_manager(db_session),
    )


@pytest.fixture
def user_factory(managers):
    def _create(email: str, name: str = None):
        return managers.users.create(schemas.UserCreate(name=name or email.split('@')[0], email=email))
    return _create


@pytest.fixture
def project_factory(managers):
    def _create(name: str, created_by: int = None, description: str = None):
        return managers.projects.create(
            schemas.ProjectCreate(
                name=name,
                description=description,
                created_by=schemas.Ref(id=created_by) if created_by is not None else None,
            )
        )
    return _create


@pytest.fixture
def client():
    from taskboard.api.main import app
    with TestClient(app) as c:
        yield c
