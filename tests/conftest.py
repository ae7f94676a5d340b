import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
import uuid
from fastapi.testclient import TestClient
from coaching_api.core.database import Base, engine, SessionLocal
from coaching_api.crud.course import course as crud_course
from coaching_api.crud.question import question as crud_question
from coaching_api.crud.student import student as crud_student
from coaching_api.crud.test import test as crud_test
from coaching_api.utils import deps as deps_utils
import main


@pytest.fixture(scope="session")
def database_engine():
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if engine.url.drivername.startswith("sqlite") and os.path.exists("./test.db"):
        os.remove("./test.db")

@pytest.fixture(scope="function")
def db_session(database_engine):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        # services commit, so clear every table between tests
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()

@pytest.fixture(scope="function")
def client(db_session):
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()


@pytest.fixture
def course_factory(db_session):
    def _course_factory(title="NEET Class 11 Recorded Batch", **extra):
        return crud_course.create(db_session, obj_in={"title": title, **extra})
    return _course_factory

@pytest.fixture
def student_factory(db_session):
    def _student_factory(name="Rahul Kumar", **extra):
        return crud_student.create(db_session, obj_in={"name": name, **extra})
    return _student_factory

@pytest.fixture
def make_test(db_session):
    """Create a test plus its questions. ``questions`` is a list of dicts merged over defaults."""
    def _make_test(questions=(), name=None, **extra):
        test_data = {
            "name": name or f"Physics Unit Test {uuid.uuid4().hex[:6]}",
            "marks_per_question": 4,
            "negative_marking": 0,
            **extra,
        }
        created = crud_test.create(db_session, obj_in=test_data)
        for i, question in enumerate(questions):
            crud_question.create(db_session, obj_in={
                "test_id": created.id,
                "question": f"Question {i + 1}?",
                "option_a": "A", "option_b": "B", "option_c": "C", "option_d": "D",
                "correct_answer": "A",
                "order": i + 1,
                **question,
            })
        return created
    return _make_test
