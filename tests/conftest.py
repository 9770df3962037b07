"""Pytest configuration and shared fixtures for DebtCycle tests.

Database fixtures use a throwaway SQLite file per test so repositories,
services and the Flask app never touch the real data directory.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from debtcycle import create_app
from debtcycle.config import TestingConfig
from debtcycle.infra.database import create_session_factory
from debtcycle.infra.repositories import (
    SQLModelDebtRepository,
    SQLModelPaymentRepository,
    SQLModelPreferencesRepository,
)
from debtcycle.models import Debt

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the application wires into repositories."""

    return create_session_factory(db_engine)


@pytest.fixture
def debt_repository(session_factory):
    return SQLModelDebtRepository(session_factory)


@pytest.fixture
def payment_repository(session_factory):
    return SQLModelPaymentRepository(session_factory)


@pytest.fixture
def preferences_repository(session_factory):
    return SQLModelPreferencesRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def debt_factory(debt_repository):
    """Factory for creating persisted debts.

    Returns:
        Callable: Function that creates and persists Debt instances
    """

    def _create_debt(
        name: str = "Test Debt",
        balance: float = 1000.0,
        monthly_payment: float = 50.0,
        apr: float = 18.0,
        due_day: int = 15,
        next_due_date: date = date(2024, 5, 15),
        active: bool = True,
        paid_this_cycle: float = 0.0,
        autopay: bool = False,
    ) -> Debt:
        debt = Debt(
            name=name,
            balance=balance,
            monthly_payment=monthly_payment,
            apr=apr,
            due_day=due_day,
            next_due_date=next_due_date,
            active=active,
            paid_this_cycle=paid_this_cycle,
            autopay=autopay,
        )
        return debt_repository.create(debt)

    return _create_debt


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Flask app backed by a SQLite file under ``tmp_path``."""

    monkeypatch.setenv("DEBTCYCLE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DEBTCYCLE_DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("DEBTCYCLE_DEV_MODE", "true")
    application = create_app(config=TestingConfig())
    yield application
    application.extensions["debtcycle"]["engine"].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def cli_runner(app):
    return app.test_cli_runner()
