import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.api.deps import get_db
from app.core.exceptions import StudentCreationError
from app.services.student import student as crud_student
from app.schemas.student import (
    Student,
    StudentCreate,
    StudentUpdate,
    StudentCreatedResponse,
    StudentResponse,
    StudentListResponse,
    StudentDeletedResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=StudentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    name="create_student"
)
def create_student(
    student: StudentCreate,
    db: Session = Depends(get_db)
):
    """
    Create a student

    Required:
    - **name**: student name
    - **age**: age in years
    - **class**: enrolled class / grade

    Any failure answers 400 with the same generic message.
    """
    try:
        new_student = crud_student.create_student(db=db, student=student)
    except StudentCreationError:
        raise
    except Exception as e:
        logger.error(f"Student creation failed: {e}", exc_info=True)
        raise StudentCreationError(details={"cause": str(e)}) from e

    return StudentCreatedResponse(
        message="Student has been created successfully",
        new_student=Student.model_validate(new_student)
    )


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: str,
    student: StudentUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a student. Only the fields present in the body change.
    """
    existing_student = crud_student.update_student(db=db, student_id=student_id, student=student)
    return StudentResponse(
        message="Student has been successfully updated",
        existing_student=Student.model_validate(existing_student)
    )


@router.get("", response_model=StudentListResponse)
def get_students(db: Session = Depends(get_db)):
    """
    List every student. Answers 404 when there are none.
    """
    student_data = crud_student.get_students(db)
    return StudentListResponse(
        message="All students data found successfully",
        student_data=[Student.model_validate(s) for s in student_data]
    )


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(
    student_id: str,
    db: Session = Depends(get_db)
):
    existing_student = crud_student.get_student(db, student_id=student_id)
    return StudentResponse(
        message="Student found successfully",
        existing_student=Student.model_validate(existing_student)
    )


@router.delete("/{student_id}", response_model=StudentDeletedResponse)
def delete_student(
    student_id: str,
    db: Session = Depends(get_db)
):
    """
    Delete a student and return the deleted record.
    """
    deleted_student = crud_student.delete_student(db=db, student_id=student_id)
    return StudentDeletedResponse(
        message="Student deleted successfully",
        delete_student=Student.model_validate(deleted_student)
    )
