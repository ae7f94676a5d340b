from sqlalchemy import Column, String, DateTime, Float
from sqlalchemy.sql import func
from coaching_api.core.database import Base

class Course(Base):
    __tablename__ = "courses"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, index=True, nullable=False)
    subtitle = Column(String, nullable=True)
    instructor = Column(String, nullable=True)
    category = Column(String, nullable=True)
    type = Column(String, nullable=True)
    price = Column(Float, nullable=True)
    mrp = Column(Float, nullable=True)
    status = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
