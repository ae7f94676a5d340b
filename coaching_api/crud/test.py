from typing import List, Optional
from sqlalchemy.orm import Session

from coaching_api.crud.base import CRUDBase
from coaching_api.models.test import Test
from coaching_api.schemas.test import TestCreate, TestUpdate

class CRUDTest(CRUDBase[Test, TestCreate, TestUpdate]):
    def get_multi_filtered(
        self, db: Session, *, course_id: Optional[str] = None, skip: int = 0, limit: int = 100
    ) -> List[Test]:
        query = db.query(self.model)
        if course_id:
            query = query.filter(self.model.course_id == course_id)
        return query.order_by(self.model.created_at.desc()).offset(skip).limit(limit).all()

test = CRUDTest(Test)
