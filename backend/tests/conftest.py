"""Test configuration and fixtures."""

import os

# The application engine is created at import time; keep it off disk
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mythos.database import Base
from mythos import models  # noqa: F401
from mythos.notifications import NotificationError


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite:///:memory:"


class RecordingNotifier:
    """Notifier double that keeps every update it is asked to send."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, update):
        if self.fail:
            raise NotificationError("Simulated delivery failure")
        self.sent.append(update)
        return f"msg-{len(self.sent)}"


@pytest.fixture
def engine():
    """Create a fresh test database engine per test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create test database session."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def make_service(db_session, notifier):
    """Factory for a JourneyService over seeded default settings."""
    from mythos.journey import JourneyService

    def factory(verification_enabled=True):
        service = JourneyService(db_session, notifier)
        result = service.seed_defaults(verification_enabled=verification_enabled)
        assert result.status == "success"
        return service

    return factory


@pytest.fixture
def service(make_service):
    """Service with teacher verification enabled."""
    return make_service(verification_enabled=True)


@pytest.fixture
def open_service(make_service):
    """Service with teacher verification disabled (points award immediately)."""
    return make_service(verification_enabled=False)


@pytest.fixture
def sample_student(db_session):
    """Create a sample roster student."""
    from mythos.models import Student
    student = Student(
        email="ariadne@example.com",
        name="Ariadne",
        class_period="Period 3",
    )
    db_session.add(student)
    db_session.commit()
    db_session.refresh(student)
    return student


@pytest.fixture
def sample_submission(db_session, sample_student):
    """Create a sample pending submission."""
    from mythos.models import Submission, MediaCategory
    submission = Submission(
        student_email=sample_student.email,
        media_type=MediaCategory.written_story,
        media_title="The Lightning Thief",
        bonus_points=True,
        reflection="Percy's quest mirrors the labours of Heracles.",
    )
    db_session.add(submission)
    db_session.commit()
    db_session.refresh(submission)
    return submission


@pytest.fixture
def client(db_session, notifier):
    """TestClient with the database and notifier dependencies overridden."""
    from fastapi.testclient import TestClient
    from mythos.main import app
    from mythos.database import get_db
    from mythos.notifications import get_notifier

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
