from abc import ABC, abstractmethod
from typing import List, Optional

from cruddemo.models.student import Student


class StudentDAO(ABC):
    """Data access contract for Student entities."""

    @abstractmethod
    def save(self, student: Student) -> None:
        """Persist a student. The generated id is written back onto it."""
        ...

    @abstractmethod
    def find_by_id(self, student_id: int) -> Optional[Student]:
        """Student with the given id, or None."""
        ...

    @abstractmethod
    def find_all(self) -> List[Student]:
        ...

    @abstractmethod
    def find_all_order_by_last_name(self) -> List[Student]:
        ...

    @abstractmethod
    def find_by_last_name(self, last_name: str) -> List[Student]:
        ...

    @abstractmethod
    def update(self, student: Student) -> None:
        """Write the in-memory fields of a persisted student to its row."""
        ...
