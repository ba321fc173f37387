from sqlalchemy import Column, Integer, String
from cruddemo.core.database import Base


class Student(Base):
    __tablename__ = "student"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)

    def __repr__(self) -> str:
        return (
            f"Student(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, email={self.email!r})"
        )
