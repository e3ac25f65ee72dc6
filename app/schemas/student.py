from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# Range of the 32-bit INTEGER column backing age
AGE_MIN = -2**31
AGE_MAX = 2**31 - 1


class StudentBase(BaseModel):
    name: str
    age: int = Field(ge=AGE_MIN, le=AGE_MAX)
    class_: str = Field(alias="class")

    model_config = ConfigDict(populate_by_name=True)


class StudentCreate(StudentBase):
    pass


class StudentUpdate(BaseModel):
    """Partial update: only the fields sent are applied."""
    name: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=AGE_MIN, le=AGE_MAX)
    class_: Optional[str] = Field(default=None, alias="class")

    model_config = ConfigDict(populate_by_name=True)


class StudentInDB(StudentBase):
    id: str

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class Student(StudentInDB):
    pass


# ============= RESPONSE ENVELOPES =============

class StudentCreatedResponse(BaseModel):
    message: str
    new_student: Student = Field(alias="newStudent")

    model_config = ConfigDict(populate_by_name=True)


class StudentResponse(BaseModel):
    message: str
    existing_student: Student = Field(alias="existingStudent")

    model_config = ConfigDict(populate_by_name=True)


class StudentListResponse(BaseModel):
    message: str
    student_data: List[Student] = Field(alias="studentData")

    model_config = ConfigDict(populate_by_name=True)


class StudentDeletedResponse(BaseModel):
    message: str
    delete_student: Student = Field(alias="deleteStudent")

    model_config = ConfigDict(populate_by_name=True)
