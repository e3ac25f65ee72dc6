import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import NotFoundException, StudentCreationError
from app.schemas.student import StudentCreate, StudentUpdate
from app.services.student import student as crud_student


def make_student(db, name="Asha", age=20, class_="CS101"):
    return crud_student.create_student(db, StudentCreate(name=name, age=age, class_=class_))


def test_create_assigns_unique_ids(db):
    first = make_student(db)
    second = make_student(db, name="Binh")

    assert first.id and second.id
    assert first.id != second.id
    assert (first.name, first.age, first.class_) == ("Asha", 20, "CS101")


def test_create_then_get_round_trip(db):
    created = make_student(db)

    fetched = crud_student.get_student(db, created.id)

    assert fetched.id == created.id
    assert (fetched.name, fetched.age, fetched.class_) == ("Asha", 20, "CS101")


def test_create_wraps_store_failure(db, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT INTO students", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", broken_commit)

    with pytest.raises(StudentCreationError) as exc_info:
        make_student(db)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Error: student not created!"
    assert isinstance(exc_info.value.__cause__, OperationalError)


def test_update_applies_only_sent_fields(db):
    created = make_student(db)

    updated = crud_student.update_student(db, created.id, StudentUpdate(age=21))

    assert updated.age == 21
    assert updated.name == "Asha"
    assert updated.class_ == "CS101"

    fetched = crud_student.get_student(db, created.id)
    assert (fetched.name, fetched.age, fetched.class_) == ("Asha", 21, "CS101")


def test_update_ignores_explicit_nulls(db):
    created = make_student(db)

    updated = crud_student.update_student(
        db, created.id, StudentUpdate(name=None, class_="CS102")
    )

    assert updated.name == "Asha"
    assert updated.class_ == "CS102"


def test_delete_returns_record_and_removes_it(db):
    created = make_student(db)

    deleted = crud_student.delete_student(db, created.id)

    assert deleted.id == created.id
    assert deleted.name == "Asha"
    with pytest.raises(NotFoundException):
        crud_student.get_student(db, created.id)


@pytest.mark.parametrize("operation", [
    lambda db, student_id: crud_student.get_student(db, student_id),
    lambda db, student_id: crud_student.update_student(db, student_id, StudentUpdate(age=30)),
    lambda db, student_id: crud_student.delete_student(db, student_id),
])
def test_missing_id_is_not_found(db, operation):
    make_student(db)

    with pytest.raises(NotFoundException) as exc_info:
        operation(db, "does-not-exist")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Student #does-not-exist not found"


def test_get_students_returns_all(db):
    make_student(db)
    make_student(db, name="Binh", age=19, class_="MATH201")

    students = crud_student.get_students(db)

    assert sorted(s.name for s in students) == ["Asha", "Binh"]


def test_get_students_empty_table_is_not_found(db):
    with pytest.raises(NotFoundException) as exc_info:
        crud_student.get_students(db)

    assert exc_info.value.message == "Students data not found!"


def test_update_store_failure_rolls_back_and_reraises(db, monkeypatch):
    created = make_student(db)
    rollbacks = []
    real_rollback = db.rollback

    def broken_commit():
        raise OperationalError("UPDATE students", {}, Exception("database is locked"))

    def tracking_rollback():
        rollbacks.append(True)
        real_rollback()

    monkeypatch.setattr(db, "commit", broken_commit)
    monkeypatch.setattr(db, "rollback", tracking_rollback)

    with pytest.raises(OperationalError):
        crud_student.update_student(db, created.id, StudentUpdate(age=21))

    assert rollbacks == [True]
    monkeypatch.undo()
    assert crud_student.get_student(db, created.id).age == 20
