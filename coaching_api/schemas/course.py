from pydantic import ConfigDict
from typing import Optional
from datetime import datetime

from coaching_api.core.constants import CourseTypeEnum
from coaching_api.schemas.base import CamelModel

class CourseBase(CamelModel):
    title: str
    subtitle: Optional[str] = None
    instructor: Optional[str] = None
    category: Optional[str] = None
    type: Optional[CourseTypeEnum] = None
    price: Optional[float] = None
    mrp: Optional[float] = None
    status: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)

class CourseCreate(CourseBase):
    id: Optional[str] = None

class CourseUpdate(CourseBase):
    title: Optional[str] = None

class Course(CourseBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
