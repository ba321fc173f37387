from cruddemo.dao.student_dao import StudentDAO
from cruddemo.dao.student_dao_impl import StudentDAOImpl

__all__ = ["StudentDAO", "StudentDAOImpl"]
