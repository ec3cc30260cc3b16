"""Pytest configuration and fixtures for Jobly tests."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["POSTGRES_PASSWORD"] = "test"
os.environ["BCRYPT_WORK_FACTOR"] = "4"

from jobly.database import Base, get_db
from jobly.main import app
from jobly.models import Company, Job, User
from jobly.services.auth import hash_password, create_user_token


# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Enable foreign key support for SQLite (required for ON DELETE CASCADE)
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Create a test client with database dependency override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_companies(db):
    """Create companies c1, c2, c3."""
    created = [
        Company(handle=f"c{i}", name=f"C{i}", num_employees=i, description=f"Desc{i}")
        for i in range(1, 4)
    ]
    db.add_all(created)
    db.commit()
    return created


@pytest.fixture
def sample_jobs(db, sample_companies):
    """Create six jobs, two per company.

    Ids follow insertion order: 1=j11, 2=j21, 3=j12, 4=j22, 5=j13, 6=j23.
    Salary equals the number in the title and no job offers equity.
    """
    titles = ["j11", "j21", "j12", "j22", "j13", "j23"]
    created = []
    for job_id, title in enumerate(titles, 1):
        job = Job(
            id=job_id,
            title=title,
            salary=int(title[1:]),
            equity=0,
            company_handle=f"c{title[2]}",
        )
        db.add(job)
        created.append(job)
    db.commit()
    return created


@pytest.fixture
def sample_users(db):
    """Create u1 (admin, password "password1") and u2 (password "password2")."""
    u1 = User(
        username="u1",
        password=hash_password("password1"),
        first_name="U1F",
        last_name="U1L",
        email="user1@user.com",
        is_admin=True,
    )
    u2 = User(
        username="u2",
        password=hash_password("password2"),
        first_name="U2F",
        last_name="U2L",
        email="user2@user.com",
        is_admin=False,
    )
    db.add_all([u1, u2])
    db.commit()
    return [u1, u2]


@pytest.fixture
def u1_token(sample_users):
    """Bearer token for the admin user u1."""
    return create_user_token({"username": "u1", "isAdmin": True})


@pytest.fixture
def u2_token(sample_users):
    """Bearer token for the regular user u2."""
    return create_user_token({"username": "u2", "isAdmin": False})


@pytest.fixture
def admin_headers(u1_token):
    return {"Authorization": f"Bearer {u1_token}"}


@pytest.fixture
def user_headers(u2_token):
    return {"Authorization": f"Bearer {u2_token}"}
