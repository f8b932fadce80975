import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from report_analyzer.config.settings import Settings
from report_analyzer.database.connection import close_pool, get_connection, init_pool
from report_analyzer.database.repositories.report_repository import ReportRepository
from report_analyzer.reports.models import Report


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "report_analyzer_test")
    return Settings(interpretation_provider="example")


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        ReportRepository().create_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env vars.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def test_user_id(integration_pool: None) -> Generator[str, None, None]:
    """A fresh user id whose reports are removed after the test."""
    user_id = f"it-{uuid.uuid4()}"
    yield user_id
    with get_connection() as conn:
        conn.execute("DELETE FROM reports WHERE user_id = %s", (user_id,))
        conn.commit()


@pytest.fixture
def seed_report(test_user_id: str) -> Report:
    report = Report(
        id=f"report-{uuid.uuid4().hex}",
        user_id=test_user_id,
        filename="labs.pdf",
        upload_date="2025-01-15T09:30:00+00:00",
        raw_report="Glucose: 95 mg/dL\nCholesterol: 230 mg/dL (elevated)",
        health_status="needsAttention",
        file_type="pdf",
    )
    ReportRepository().save(report)
    return report
