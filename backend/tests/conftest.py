"""Pytest configuration and shared fixtures for Ledger Master tests.

Every test gets its own in-memory SQLite database seeded with the reference
data (cities, ledger groups), so API and repository tests never touch the
application database.
"""

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ledger_master.db.database import Base, get_db
from ledger_master.db.init_db import seed_reference_data
from ledger_master.main import app
from ledger_master.models import Supplier, User


@pytest.fixture(scope="function")
def db_session():
    """Isolated in-memory database with reference data."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    seed_reference_data(session)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    """TestClient whose requests share the test database session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def supplier_payload():
    """Factory for a valid create body in storage shape."""

    def build(**overrides):
        payload = {
            "Supplier": "Acme Traders",
            "PrintName": "Acme",
            "Add1": "12 Main Road",
            "Add2": "",
            "Add3": "",
            "City": 7,
            "TNGST_No": "33AAACA1234A1Z5",
            "Contact_person": "Ravi",
            "Mobile_No": "9876543210",
            "Phone": "0441234567",
            "Mailid": "acme@example.com",
            "Isactive": "Y",
            "LedgerGroupId": 1,
            "OpBalAmt": "150.00",
            "OpType": "Dr",
            "CompId": 1,
            "OpDt": "2024-04-01T00:00:00",
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def admin_user(db_session):
    user = User(username="admin", password="secret", is_active="Y", is_all_comp="N", rights_comp_id=1)
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def foreign_supplier(db_session):
    """Supplier 5, owned by company 2."""
    supplier = Supplier(
        id=5,
        name="Other Company Ledger",
        city_id=3,
        company_id=2,
        ledger_group_id=1,
        mobile_no="9000000005",
        is_active="Y",
        op_bal_amt=0,
        op_type="Dr",
        last_update=datetime(2024, 1, 1, 9, 0, 0),
    )
    db_session.add(supplier)
    db_session.commit()
    return supplier
