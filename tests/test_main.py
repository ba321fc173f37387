import logging

import pytest
from sqlalchemy.exc import OperationalError

from cruddemo import main as runner
from cruddemo.core.exceptions import DatabaseConnectionError, NotFoundException


def test_create_student_logs_generated_id(student_dao, caplog):
    caplog.set_level(logging.INFO, logger="cruddemo")

    student = runner.create_student(student_dao)

    assert student.id is not None
    assert f"Generated id: {student.id}" in caplog.text


def test_create_multiple_students_saves_all(student_dao):
    students = runner.create_multiple_students(student_dao)

    assert all(s.id is not None for s in students)
    assert len(student_dao.find_all()) == 3


def test_read_student_returns_stored_copy(student_dao):
    found = runner.read_student(student_dao)

    assert found.last_name == "Duck"
    assert student_dao.find_by_id(found.id).email == "daffy@miempresa.com.ar"


def test_query_steps(student_dao):
    runner.create_multiple_students(student_dao)

    assert len(runner.query_for_students(student_dao)) == 3
    ordered = runner.query_for_students_order_by_last_name(student_dao)
    assert [s.last_name for s in ordered] == ["Mancuso", "Vegas", "Vitulli"]
    assert [s.first_name for s in runner.query_for_students_by_last_name(student_dao, "Vegas")] == ["Javier"]
    assert runner.query_for_students_by_last_name(student_dao, "Duck") == []


def test_update_student_changes_first_name(student_dao):
    student = runner.create_student(student_dao)

    runner.update_student(student_dao, student.id, "Scooby")

    assert student_dao.find_by_id(student.id).first_name == "Scooby"


def test_update_student_missing_raises(student_dao):
    with pytest.raises(NotFoundException) as exc_info:
        runner.update_student(student_dao, 404, "Scooby")

    assert exc_info.value.details == {"id": 404}


def test_run_demo(student_dao):
    runner.run_demo(student_dao)

    students = student_dao.find_all_order_by_last_name()
    assert [s.last_name for s in students] == ["Bollati", "Duck", "Mancuso", "Vegas", "Vitulli"]
    assert students[0].first_name == "Scooby"


def test_main_runs_demo(monkeypatch, session_factory):
    monkeypatch.setattr(runner, "init_db", lambda: None)
    monkeypatch.setattr(runner, "SessionLocal", session_factory)

    assert runner.main() == 0
    assert len(runner.StudentDAOImpl(session_factory).find_all()) == 5


def test_main_reports_startup_failure(monkeypatch):
    def fail():
        raise DatabaseConnectionError("Cannot connect to database!")

    monkeypatch.setattr(runner, "init_db", fail)

    assert runner.main() == 1


def test_main_reports_database_errors(monkeypatch):
    def fail():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(runner, "init_db", fail)

    assert runner.main() == 1


def test_main_reraises_unexpected_errors(monkeypatch):
    def fail():
        raise RuntimeError("boom")

    monkeypatch.setattr(runner, "init_db", fail)

    with pytest.raises(RuntimeError):
        runner.main()
