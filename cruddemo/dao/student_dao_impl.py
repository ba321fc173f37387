import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from cruddemo.dao.student_dao import StudentDAO
from cruddemo.models.student import Student

logger = logging.getLogger(__name__)


class StudentDAOImpl(StudentDAO):
    """
    SQLAlchemy implementation of StudentDAO.

    Every call opens its own session from the factory. Writes run inside
    ``session_factory.begin()``, which commits on success and rolls back
    (re-raising the error) on failure. Reads always hit the database.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def save(self, student: Student) -> None:
        with self.session_factory.begin() as session:
            session.add(student)
        logger.debug(f"Saved student id={student.id}")

    def find_by_id(self, student_id: int) -> Optional[Student]:
        with self.session_factory() as session:
            return session.get(Student, student_id)

    def find_all(self) -> List[Student]:
        with self.session_factory() as session:
            return list(session.scalars(select(Student)))

    def find_all_order_by_last_name(self) -> List[Student]:
        query = select(Student).order_by(Student.last_name.asc())
        with self.session_factory() as session:
            return list(session.scalars(query))

    def find_by_last_name(self, last_name: str) -> List[Student]:
        query = select(Student).where(Student.last_name == last_name)
        with self.session_factory() as session:
            return list(session.scalars(query))

    def update(self, student: Student) -> None:
        # merge copies every loaded field onto the row with the same id,
        # inserting it when the id is unknown
        with self.session_factory.begin() as session:
            session.merge(student)
        logger.debug(f"Updated student id={student.id}")
