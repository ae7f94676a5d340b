from coaching_api.crud.base import CRUDBase
from coaching_api.models.student import Student
from coaching_api.schemas.student import StudentCreate, StudentUpdate

class CRUDStudent(CRUDBase[Student, StudentCreate, StudentUpdate]):
    pass

student = CRUDStudent(Student)
