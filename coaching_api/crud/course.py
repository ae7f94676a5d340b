from coaching_api.crud.base import CRUDBase
from coaching_api.models.course import Course
from coaching_api.schemas.course import CourseCreate, CourseUpdate

class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):
    pass

course = CRUDCourse(Course)
