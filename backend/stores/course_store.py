"""Course store: CRUD for Course records."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from backend.core.errors import StoreConstraintFailure
from backend.models.course import Course

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("user_id", "title", "description", "estimated_time", "materials_needed")


def list_courses_with_owner(db: Session) -> list[Course]:
    return db.query(Course).options(joinedload(Course.owner)).order_by(Course.id.asc()).all()


def find_course(db: Session, course_id: int) -> Course | None:
    return db.get(Course, course_id)


def create_course(db: Session, **fields) -> Course:
    course = Course(**_known_fields(fields))
    db.add(course)
    _commit(db, "Course insert")
    db.refresh(course)
    return course


def update_course(db: Session, course: Course, fields: dict) -> Course:
    for name, value in _known_fields(fields).items():
        setattr(course, name, value)
    _commit(db, "Course update")
    db.refresh(course)
    return course


def delete_course(db: Session, course: Course) -> None:
    db.delete(course)
    db.commit()


def _known_fields(fields: dict) -> dict:
    return {name: value for name, value in fields.items() if name in UPDATABLE_FIELDS}


def _commit(db: Session, operation: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("%s rejected by the store: %s", operation, exc.orig)
        raise StoreConstraintFailure(str(exc.orig)) from exc
