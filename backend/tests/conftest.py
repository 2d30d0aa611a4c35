import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from tradeslink.config import settings
from tradeslink.database import get_db, init_db
from tradeslink.main import app
from tradeslink.models.account import Account
from tradeslink.services.account_service import account_service

PASSWORD = "test-password-123"


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def company_profile(name="Acme Bau GmbH", contact="Anna Schmidt", country="Germany"):
    return {
        "company_name": name,
        "company_type": "GmbH",
        "contact_person": {"full_name": contact, "role": "Manager", "email": "anna@acme.de"},
        "address": {"street": "Hauptstrasse 1", "zip": "10115", "city": "Berlin", "country": country},
    }


def contractor_profile(name="Kowalski Builders", contact="Jan Kowalski", country="Poland"):
    return {
        "company_name": name,
        "company_type": "Sole Proprietor",
        "contact_person": {"full_name": contact, "role": "Owner"},
        "address": {"city": "Warsaw", "country": country},
        "skills": ["bricklayer"],
    }


def job_details(title="Bricklaying for new residential complex", **overrides):
    details = {
        "project_name": title,
        "job_type": "bricklayer",
        "city": "Berlin",
        "country": "Germany",
        "start_date": "2025-08-01",
        "end_date": "2025-10-30",
        "hourly_rate_from": "28",
        "hourly_rate_to": "32",
    }
    details.update(overrides)
    return details


@pytest.fixture
def tmp_data(tmp_path):
    data_path = tmp_path / "TradesLink"
    data_path.mkdir()
    return data_path


@pytest.fixture
def test_db(tmp_data):
    db_path = tmp_data / "db.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def db(test_db):
    session = test_db()
    yield session
    session.close()


@pytest.fixture
def fresh_sessions():
    """Reset sign-in sessions for each test."""
    account_service.clear_sessions()
    yield account_service
    account_service.clear_sessions()


@pytest.fixture
def client(tmp_data, test_db, fresh_sessions):
    original_data_path = settings.data_path
    settings.data_path = tmp_data
    c = TestClient(app)
    yield c
    settings.data_path = original_data_path


@pytest.fixture
def signup(client):
    """Sign up and log in an account. Returns (account_id, auth headers)."""

    def _signup(role="client", email=None, profile=None):
        email = email or f"{role}@example.com"
        if profile is None:
            profile = company_profile() if role == "client" else contractor_profile()
        r = client.post("/api/v1/accounts/signup", json={
            "role": role,
            "email": email,
            "password": PASSWORD,
            "profile": profile,
        })
        assert r.status_code == 201, r.text
        account_id = r.json()["id"]
        r = client.post("/api/v1/auth/login", json={"email": email, "password": PASSWORD})
        token = r.json()["token"]
        return account_id, {"Authorization": f"Bearer {token}"}

    return _signup


@pytest.fixture
def set_balance(test_db):
    """Set an account's balance directly, bypassing the ledger."""

    def _set(account_id, credits):
        session = test_db()
        try:
            session.get(Account, account_id).balance_credits = credits
            session.commit()
        finally:
            session.close()

    return _set
