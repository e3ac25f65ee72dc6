import logging

from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundException, StudentCreationError
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate
from typing import List

logger = logging.getLogger(__name__)


def _not_found(student_id: str) -> NotFoundException:
    logger.warning(f"Student #{student_id} not found")
    return NotFoundException(f"Student #{student_id} not found")


def create_student(db: Session, student: StudentCreate) -> Student:
    """Insert a new student, the id is assigned on flush."""
    db_student = Student(
        name=student.name,
        age=student.age,
        class_=student.class_
    )
    try:
        db.add(db_student)
        db.commit()
        db.refresh(db_student)
    except Exception as e:
        db.rollback()
        logger.error(f"Student insert failed: {e}")
        raise StudentCreationError(details={"cause": str(e)}) from e

    logger.info(f"Student #{db_student.id} created")
    return db_student


def update_student(db: Session, student_id: str, student: StudentUpdate) -> Student:
    """
    Apply the fields sent in ``student`` to an existing row.

    The row is locked for the rest of the transaction so the returned
    record is the committed post-update state. Fields left out, or sent
    as null, keep their stored values.
    """
    db_student = (
        db.query(Student)
        .filter(Student.id == student_id)
        .with_for_update()
        .first()
    )
    if db_student is None:
        db.rollback()
        raise _not_found(student_id)

    changes = student.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(db_student, field, value)

    try:
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Student #{student_id} update failed: {e}")
        raise
    db.refresh(db_student)
    logger.info(f"Student #{student_id} updated: {sorted(changes)}")
    return db_student


def get_students(db: Session) -> List[Student]:
    """Every stored student. An empty table is reported as NotFound."""
    students = db.query(Student).all()
    if not students:
        logger.warning("Students data not found")
        raise NotFoundException("Students data not found!")
    return students


def get_student(db: Session, student_id: str) -> Student:
    db_student = db.query(Student).filter(Student.id == student_id).first()
    if db_student is None:
        raise _not_found(student_id)
    return db_student


def delete_student(db: Session, student_id: str) -> Student:
    """Delete a student and return the row as it was before deletion."""
    db_student = get_student(db, student_id)
    db.delete(db_student)
    db.commit()
    logger.info(f"Student #{student_id} deleted")
    return db_student
