from typing import List, Optional
from sqlalchemy.orm import Session

from coaching_api.crud.base import CRUDBase
from coaching_api.models.question import Question
from coaching_api.schemas.question import QuestionCreate, QuestionUpdate

class CRUDQuestion(CRUDBase[Question, QuestionCreate, QuestionUpdate]):
    def get_by_test(self, db: Session, *, test_id: str) -> List[Question]:
        return (
            db.query(self.model)
            .filter(self.model.test_id == test_id)
            .order_by(self.model.order, self.model.id)
            .all()
        )

    def get_multi_filtered(
        self,
        db: Session,
        *,
        test_id: Optional[str] = None,
        course_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[Question]:
        query = db.query(self.model)
        if test_id:
            query = query.filter(self.model.test_id == test_id)
        if course_id:
            query = query.filter(self.model.course_id == course_id)
        return query.order_by(self.model.order, self.model.id).offset(skip).limit(limit).all()

question = CRUDQuestion(Question)
