from sqlalchemy import Column, String, Integer, DateTime, Float, Text
from sqlalchemy.sql import func
from coaching_api.core.database import Base

class Question(Base):
    __tablename__ = "questions"

    id = Column(String, primary_key=True, index=True)
    # Loose references, a question may outlive its test or course
    test_id = Column(String, nullable=True, index=True)
    course_id = Column(String, nullable=True, index=True)
    question = Column(Text, nullable=False)
    option_a = Column(String, nullable=True)
    option_b = Column(String, nullable=True)
    option_c = Column(String, nullable=True)
    option_d = Column(String, nullable=True)
    correct_answer = Column(String, nullable=True)
    explanation = Column(Text, nullable=True)
    marks = Column(Float, nullable=True)
    negative_marks = Column(Float, nullable=True)
    order = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
