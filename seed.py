import logging
from app.core.database import SessionLocal
from app.models.student import Student
from app.schemas.student import StudentCreate
from app.services.student import student as crud_student

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"name": "Asha", "age": 20, "class": "CS101"},
    {"name": "Tran Thi B", "age": 21, "class": "MATH201"},
    {"name": "Le Van C", "age": 22, "class": "PHYS110"},
]


def seed_data():
    """
    Insert the sample students unless the table already has rows.
    """
    db = SessionLocal()
    try:
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")
        for payload in SAMPLE_STUDENTS:
            crud_student.create_student(db, StudentCreate(**payload))

        logger.info(f"Seeded {len(SAMPLE_STUDENTS)} students")
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
