from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from coaching_api.crud.question import question as crud_question
from coaching_api.crud.test import test as crud_test
from coaching_api.schemas.question import Question
from coaching_api.schemas.test import Test, TestWithQuestions
from coaching_api.services.resource import ResourceService


class TestService(ResourceService):

    def get_with_questions(self, db: Session, test_id: str) -> TestWithQuestions:
        test = self.get(db, test_id)
        try:
            questions = crud_question.get_by_test(db, test_id=test.id)
        except SQLAlchemyError as e:
            raise self._storage_error(db, "fetch", e)
        return TestWithQuestions(
            **Test.model_validate(test).model_dump(),
            questions=[Question.model_validate(q) for q in questions],
        )


test_service = TestService(crud_test, Test, "Test")
