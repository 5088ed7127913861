# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import os

# Settings are read at import time; set test values before importing the app
os.environ.setdefault("JWT_SECRET_KEY", "test-signing-secret-0123456789abcdef")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("MONGODB_URI", "mongodb://127.0.0.1:27017/feeportal_test")
os.environ.setdefault("MONGODB_TIMEOUT_MS", "200")

import mongomock
import pytest
from fastapi.testclient import TestClient
from typing import Generator

from main import create_app
from core.database import ensure_indexes, get_database
from core.security import create_access_token
from services.account_store import AccountStore
from services.credential_service import CredentialService
from services.fee_request_store import FeeRequestStore
from services.workflow import WorkflowEngine


@pytest.fixture(scope="function")
def db():
    """In-memory MongoDB database with the production indexes."""
    database = mongomock.MongoClient()["feeportal_test"]
    ensure_indexes(database)
    return database


@pytest.fixture(scope="function")
def app(db):
    """Create a test FastAPI application bound to the in-memory database."""
    application = create_app()
    application.dependency_overrides[get_database] = lambda: db
    yield application
    application.dependency_overrides = {}


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def accounts(db):
    return AccountStore(db)


@pytest.fixture
def credentials(accounts):
    return CredentialService(accounts)


@pytest.fixture
def workflow(db):
    return WorkflowEngine(FeeRequestStore(db))


@pytest.fixture
def sample_request():
    return {
        "studentName": "Asha Rao",
        "regNumber": "21CS045",
        "year": "3",
        "branch": "CSE",
        "section": "B",
        "feeType": "semester",
        "amount": 5000,
        "attendance": "82%",
    }


def _headers(account_id: str, role: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(account_id, role)}"}


@pytest.fixture
def student_headers():
    return _headers("650000000000000000000001", "student")


@pytest.fixture
def faculty_headers():
    return _headers("650000000000000000000002", "faculty")


@pytest.fixture
def hod_headers():
    return _headers("650000000000000000000003", "hod")
