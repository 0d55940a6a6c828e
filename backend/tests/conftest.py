"""Pytest fixtures — file-backed SQLite database, fresh for every test."""
from datetime import datetime, timezone
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from waittimes.config import settings
from waittimes.database import Base, get_db
from waittimes.main import app
from waittimes.models.submission import SubmissionStatus, WaitTimeSubmission  # noqa: F401
from waittimes.services import submission_store

SQLITE_URL = "sqlite:///./test.db"
ADMIN_PASSWORD = "letmein"
ADMIN_HEADERS = {"X-Admin-Password": ADMIN_PASSWORD}


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # Enable WAL mode for better concurrency
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def admin_password(monkeypatch):
    """Every test runs with a known admin password and no auto-notify."""
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "NOTIFY_ON_SUBMIT", False)
    return ADMIN_PASSWORD


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def utc(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def submit(client: TestClient, hospital: str = "General Hospital", wait_time=30) -> dict:
    """Helper — POST /api/submissions and return response JSON."""
    resp = client.post("/api/submissions/", json={
        "hospital_name": hospital,
        "wait_time": wait_time,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def seed(db, hospital: str, wait_time: int, when: datetime, status: SubmissionStatus = SubmissionStatus.approved):
    """Helper — insert directly through the store with a fixed timestamp and status."""
    submission = submission_store.insert(db, hospital, wait_time, timestamp=when)
    if status != SubmissionStatus.pending:
        submission = submission_store.update_status(db, submission.submission_id, status)
    return submission
