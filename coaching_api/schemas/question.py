from pydantic import ConfigDict, Field
from typing import Optional
from datetime import datetime

from coaching_api.schemas.base import CamelModel

class QuestionBase(CamelModel):
    test_id: Optional[str] = None
    course_id: Optional[str] = None
    question: str
    option_a: Optional[str] = None
    option_b: Optional[str] = None
    option_c: Optional[str] = None
    option_d: Optional[str] = None
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None
    marks: Optional[float] = Field(default=None, ge=0) # falls back to the test's marksPerQuestion
    negative_marks: Optional[float] = Field(default=None, ge=0) # falls back to the test's negativeMarking
    order: int = 0

class QuestionCreate(QuestionBase):
    id: Optional[str] = None

class QuestionUpdate(QuestionBase):
    question: Optional[str] = None
    order: Optional[int] = None

class Question(QuestionBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
