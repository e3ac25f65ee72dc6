import uuid

from sqlalchemy import Column, Integer, String
from app.core.database import Base


def generate_student_id() -> str:
    return uuid.uuid4().hex


class Student(Base):
    __tablename__ = "students"

    id = Column(String(32), primary_key=True, index=True, default=generate_student_id)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    # "class" is a keyword, the column keeps the public name
    class_ = Column("class", String, nullable=False)

    def __repr__(self) -> str:
        return f"<Student id={self.id} name={self.name!r}>"
