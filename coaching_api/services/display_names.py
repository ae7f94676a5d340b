"""
Best-effort display-name lookups.

Names are denormalized onto results for reporting. A failed or empty lookup
yields ``None`` and is never an error: callers default to an empty string.
"""
import logging
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from coaching_api.crud.course import course as crud_course
from coaching_api.crud.student import student as crud_student
from coaching_api.crud.test import test as crud_test
from coaching_api.models.test import Test

logger = logging.getLogger(__name__)


def _lookup(db: Session, crud, id: Optional[str], attribute: str) -> Optional[str]:
    if not id:
        return None
    try:
        obj = crud.get(db, id=id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f"{crud.model.__tablename__} lookup failed for {id}: {e}")
        return None
    return getattr(obj, attribute, None) if obj else None


def lookup_student_name(db: Session, student_id: Optional[str]) -> Optional[str]:
    return _lookup(db, crud_student, student_id, "name")


def lookup_course_name(db: Session, course_id: Optional[str]) -> Optional[str]:
    return _lookup(db, crud_course, course_id, "title")


def lookup_test_name(db: Session, test_id: Optional[str]) -> Optional[str]:
    return _lookup(db, crud_test, test_id, "name")


def course_name_for_test(db: Session, test: Test) -> Optional[str]:
    """A test's cached course name wins over looking the course up."""
    return test.course_name or lookup_course_name(db, test.course_id)
