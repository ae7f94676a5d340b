from pydantic import ConfigDict, EmailStr
from typing import Optional
from datetime import datetime

from coaching_api.schemas.base import CamelModel

class StudentBase(CamelModel):
    name: str
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    status: Optional[str] = None

class StudentCreate(StudentBase):
    id: Optional[str] = None

class StudentUpdate(StudentBase):
    name: Optional[str] = None

class Student(StudentBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
