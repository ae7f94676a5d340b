from sqlalchemy import Column, String, Integer, Boolean, DateTime, Float
from sqlalchemy.sql import func
from coaching_api.core.database import Base

class Test(Base):
    __tablename__ = "tests"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    course_id = Column(String, nullable=True, index=True) # loose reference, kept when the course is deleted
    course_name = Column(String, nullable=True) # Cached display name, wins over the course lookup
    duration = Column(Integer, nullable=True) # minutes
    total_marks = Column(Float, nullable=True)
    passing_marks = Column(Float, nullable=True)
    number_of_questions = Column(Integer, nullable=True)
    marks_per_question = Column(Float, nullable=True, default=4)
    negative_marking = Column(Float, nullable=True, default=0)
    is_free = Column(Boolean, default=False)
    status = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
