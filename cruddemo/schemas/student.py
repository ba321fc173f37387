from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from cruddemo.models.student import Student as StudentModel


class StudentBase(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr


class StudentCreate(StudentBase):
    def to_model(self) -> StudentModel:
        """Build a transient Student, ready to be saved."""
        return StudentModel(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email
        )


class StudentUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None

    def apply_to(self, student: StudentModel) -> StudentModel:
        """Copy the fields that were explicitly set onto the student."""
        for field, value in self.model_dump(exclude_unset=True).items():
            setattr(student, field, value)
        return student


class StudentRead(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
