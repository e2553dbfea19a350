"""Pytest configuration and fixtures for testing."""

from __future__ import annotations

import os
from datetime import date
from typing import Callable, Generator

# Settings are read at import time, so configure them before importing the app
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token
from app.database import Base
from app.main import app, get_db
from app.models import ActiveDays, ProgramRequest, Trainee, Trainer, User, UserRole

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """
    Create a fresh database for each test.

    Yields:
        Database session for testing
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with database dependency override.

    Args:
        db: Test database session

    Yields:
        FastAPI test client
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _make_user(db: Session, email: str, first_name: str, last_name: str, role: UserRole) -> User:
    user = User(email=email, first_name=first_name, last_name=last_name, role=role.value, is_active=True)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def trainer_user(db: Session) -> User:
    """User account behind the trainer fixture."""
    return _make_user(db, "coach@test.com", "Lena", "Rivera", UserRole.TRAINER)


@pytest.fixture
def trainer(db: Session, trainer_user: User) -> Trainer:
    """
    Create a trainer with a weekly plan.

    Returns:
        Trainer linked to ``trainer_user``
    """
    trainer = Trainer(
        user_id=trainer_user.id,
        user_name="coach_lena",
        status="available",
        coach_experience=8,
        contact="+49 30 1234567",
        language="en",
        country="Germany",
        sports=["running", "strength"],
        achievements=["Berlin Marathon 2:58"],
        education=["B.Sc. Sports Science"],
    )
    trainer.active_days = ActiveDays(monday=True, wednesday=True, friday=True)
    db.add(trainer)
    db.commit()
    db.refresh(trainer)
    return trainer


@pytest.fixture
def trainees(db: Session, trainer: Trainer) -> list[Trainee]:
    """Two trainees coached by ``trainer``."""
    result = []
    for email, first, last in (("max@test.com", "Max", "Keller"), ("ana@test.com", "Ana", "Souza")):
        user = _make_user(db, email, first, last, UserRole.TRAINEE)
        trainee = Trainee(user_id=user.id, trainer_id=trainer.id)
        db.add(trainee)
        db.commit()
        db.refresh(trainee)
        result.append(trainee)
    return result


@pytest.fixture
def program_requests(db: Session, trainer: Trainer, trainees: list[Trainee]) -> list[ProgramRequest]:
    """One pending request per trainee."""
    result = []
    for trainee in trainees:
        request = ProgramRequest(
            trainer_id=trainer.id,
            trainee_id=trainee.id,
            trainee_name=trainee.name,
            date=date(2026, 11, 2),
            description=f"Plan for {trainee.user.first_name}",
            status="pending",
        )
        db.add(request)
        db.commit()
        db.refresh(request)
        result.append(request)
    return result


@pytest.fixture
def other_trainer(db: Session) -> Trainer:
    """A second trainer, to check ownership boundaries."""
    user = _make_user(db, "other@test.com", "Tom", "Berg", UserRole.TRAINER)
    trainer = Trainer(user_id=user.id, user_name="coach_tom", status="busy", sports=["swimming"])
    db.add(trainer)
    db.commit()
    db.refresh(trainer)
    return trainer


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Factory for signed tokens: ``make_token(user_id, expires_delta=None)``."""
    return create_access_token


@pytest.fixture
def trainer_token(trainer: Trainer) -> str:
    """
    Get a token for the trainer's user.

    Returns:
        JWT token
    """
    return create_access_token(trainer.user_id)


@pytest.fixture
def auth_headers(trainer_token: str) -> dict[str, str]:
    """
    Get authentication headers for requests.

    Returns:
        Headers dictionary with Authorization
    """
    return {"Authorization": f"Bearer {trainer_token}"}
