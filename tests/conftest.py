"""
Pytest configuration and shared fixtures
"""
import os
from pathlib import Path

import pytest

# Settings are read when grounded is first imported
os.environ.setdefault("GROUNDED_CONFIG", str(Path(__file__).parent / "config.yaml"))

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from grounded.core.dependencies import get_db, get_db_session_factory
from grounded.core.security import hash_password
from grounded.main import app
from grounded.models import Base, Client, Job, Lead, User

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
def engine(tmp_path):
    """SQLite file database, shared across the threads the dashboard uses"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'grounded-test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """API client wired to the test database"""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_db_session_factory] = lambda: session_factory
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def employee(db):
    user = User(
        name="Dana Reyes",
        email="dana@example.com",
        password_hash=hash_password(TEST_PASSWORD),
        role="admin",
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def employee_password():
    return TEST_PASSWORD


@pytest.fixture
def auth_client(client, employee):
    """API client with a logged-in session"""
    response = client.post("/api/v1/auth/login", json={"email": employee.email, "password": TEST_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def make_client(db):
    """Factory for stored clients"""
    def _make_client(**overrides):
        fields = {
            "first_name": "Jordan",
            "last_name": "Miles",
            "email": "jordan@example.com",
            "phone": "555-0100",
            "address": "12 Oak Lane",
            "city": "Raleigh",
            "state": "NC",
            "zip_code": "27601",
        }
        fields.update(overrides)
        record = Client(**fields)
        db.add(record)
        db.commit()
        return record

    return _make_client


@pytest.fixture
def make_job(db, make_client):
    """Factory for stored jobs; creates a client when none is given"""
    def _make_job(client=None, **overrides):
        client = client or make_client()
        fields = {
            "title": "Spring cleanup",
            "service_type": "mulch",
            "priority": "normal",
            "status": "scheduled",
            "client_id": client.id,
            "job_address": "12 Oak Lane",
            "job_city": "Raleigh",
            "job_state": "NC",
            "job_zip_code": "27601",
        }
        fields.update(overrides)
        job = Job(**fields)
        db.add(job)
        db.commit()
        return job

    return _make_job


@pytest.fixture
def make_lead(db):
    def _make_lead(**overrides):
        fields = {
            "name": "Sam Carter",
            "email": "sam@example.com",
            "phone": "555-0199",
            "service": "plant_installation",
            "message": "Looking for a quote on foundation plantings.",
            "status": "new",
        }
        fields.update(overrides)
        lead = Lead(**fields)
        db.add(lead)
        db.commit()
        return lead

    return _make_lead


@pytest.fixture
def sample_line_items():
    """Two rows adding up to 75.00"""
    return [
        {"description": "Mulch (yards)", "quantity": 2, "unitPrice": 25},
        {"description": "Labor", "quantity": 1, "unitPrice": 25},
    ]
