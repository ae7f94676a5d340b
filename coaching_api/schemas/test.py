from pydantic import ConfigDict, Field
from typing import Optional, List
from datetime import datetime

from coaching_api.schemas.base import CamelModel
from coaching_api.schemas.question import Question

class TestBase(CamelModel):
    name: str
    course_id: Optional[str] = None
    course_name: Optional[str] = None
    duration: Optional[int] = None
    total_marks: Optional[float] = None
    passing_marks: Optional[float] = None
    number_of_questions: Optional[int] = None
    marks_per_question: Optional[float] = Field(default=4, ge=0)
    negative_marking: Optional[float] = Field(default=0, ge=0)
    is_free: bool = False
    status: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Physics Unit Test - Mechanics",
            "courseId": "neet-11-recorded-batch",
            "duration": 30,
            "totalMarks": 40,
            "passingMarks": 16,
            "numberOfQuestions": 10,
            "marksPerQuestion": 4,
            "negativeMarking": 1,
            "isFree": True,
            "status": "active"
        }
    })

class TestCreate(TestBase):
    id: Optional[str] = None

class TestUpdate(TestBase):
    name: Optional[str] = None
    is_free: Optional[bool] = None
    marks_per_question: Optional[float] = Field(default=None, ge=0)
    negative_marking: Optional[float] = Field(default=None, ge=0)

class Test(TestBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class TestWithQuestions(Test):
    questions: List[Question] = []
