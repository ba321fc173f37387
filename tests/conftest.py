"""
Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database with the schema created.
"""
import os

# Set test environment variables BEFORE any cruddemo import so the
# module-level settings and engine pick them up
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["LOG_LEVEL"] = "DEBUG"

import pytest  # noqa: E402

from cruddemo.core.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    create_database_tables,
)
from cruddemo.dao import StudentDAOImpl  # noqa: E402
from cruddemo.models.student import Student  # noqa: E402


@pytest.fixture
def engine():
    engine = build_engine("sqlite+pysqlite:///:memory:", echo=False)
    create_database_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def student_dao(session_factory):
    return StudentDAOImpl(session_factory)


@pytest.fixture
def make_student():
    def factory(first_name="Javier", last_name="Vegas", email="javi.vegas@x"):
        return Student(first_name=first_name, last_name=last_name, email=email)

    return factory
