"""
Command line runner for the student CRUD demo.

Runs a fixed sequence of demonstration steps against a StudentDAO once the
database is ready, logging what each step does.
"""
import logging
import sys
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from cruddemo.core.database import SessionLocal, init_db
from cruddemo.core.exceptions import CruddemoException, NotFoundException
from cruddemo.core.logging import setup_logging
from cruddemo.dao import StudentDAO, StudentDAOImpl
from cruddemo.models.student import Student
from cruddemo.schemas.student import StudentCreate, StudentRead, StudentUpdate

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    StudentCreate(first_name="Javier", last_name="Vegas", email="javi.vegas@miempresa.com.ar"),
    StudentCreate(first_name="Mailen", last_name="Mancuso", email="mailen.mancuso@miempresa.com.ar"),
    StudentCreate(first_name="Diego", last_name="Vitulli", email="diego.vitulli@miempresa.com.ar"),
]


def _log_students(students: List[Student]):
    for student in students:
        logger.info(StudentRead.model_validate(student).model_dump_json())


def create_student(student_dao: StudentDAO) -> Student:
    logger.info("Creating new student object...")
    student = StudentCreate(
        first_name="Agustin",
        last_name="Bollati",
        email="agubollati@miempresa.com.ar"
    ).to_model()

    logger.info("Saving the student...")
    student_dao.save(student)

    logger.info(f"Saved student. Generated id: {student.id}")
    return student


def create_multiple_students(student_dao: StudentDAO) -> List[Student]:
    logger.info("Creating 3 student objects...")
    students = [data.to_model() for data in SAMPLE_STUDENTS]

    logger.info("Saving the students...")
    for student in students:
        student_dao.save(student)

    logger.info(f"Saved students. Generated ids: {[s.id for s in students]}")
    return students


def read_student(student_dao: StudentDAO) -> Student:
    logger.info("Creating new student object...")
    student = StudentCreate(
        first_name="Daffy",
        last_name="Duck",
        email="daffy@miempresa.com.ar"
    ).to_model()

    logger.info("Saving the student...")
    student_dao.save(student)
    logger.info(f"Saved student. Generated id: {student.id}")

    logger.info(f"Retrieving student with id: {student.id}")
    found = student_dao.find_by_id(student.id)
    if found is None:
        raise NotFoundException(f"Student {student.id} not found after saving")

    logger.info(f"Found the student: {found!r}")
    return found


def query_for_students(student_dao: StudentDAO) -> List[Student]:
    students = student_dao.find_all()
    _log_students(students)
    return students


def query_for_students_order_by_last_name(student_dao: StudentDAO) -> List[Student]:
    students = student_dao.find_all_order_by_last_name()
    _log_students(students)
    return students


def query_for_students_by_last_name(student_dao: StudentDAO, last_name: str) -> List[Student]:
    students = student_dao.find_by_last_name(last_name)
    if not students:
        logger.info(f"No students with last name {last_name!r}")
    _log_students(students)
    return students


def update_student(student_dao: StudentDAO, student_id: int, first_name: str) -> Student:
    logger.info(f"Getting student with id: {student_id}")
    student = student_dao.find_by_id(student_id)
    if student is None:
        raise NotFoundException(f"Student {student_id} not found", details={"id": student_id})

    logger.info(f"Updating student first name to {first_name!r}...")
    StudentUpdate(first_name=first_name).apply_to(student)
    student_dao.update(student)

    logger.info(f"Updated student: {student!r}")
    return student


def run_demo(student_dao: StudentDAO):
    """Default demonstration sequence."""
    first = create_student(student_dao)
    create_multiple_students(student_dao)
    read_student(student_dao)

    logger.info("All students:")
    query_for_students(student_dao)

    logger.info("All students ordered by last name:")
    query_for_students_order_by_last_name(student_dao)

    logger.info("Students named Vegas:")
    query_for_students_by_last_name(student_dao, "Vegas")

    update_student(student_dao, first.id, "Scooby")


def main() -> int:
    setup_logging()
    try:
        init_db()
        run_demo(StudentDAOImpl(SessionLocal))
    except CruddemoException as e:
        logger.error(f"{e.code}: {e.message}")
        return 1
    except SQLAlchemyError as e:
        logger.error(f"Database error: {e}")
        return 1
    except Exception as e:
        logger.critical(f"Unhandled Exception: {e}", exc_info=True)
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
