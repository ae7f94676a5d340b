from coaching_api.crud.course import course as crud_course
from coaching_api.schemas.course import Course
from coaching_api.services.resource import ResourceService

course_service = ResourceService(crud_course, Course, "Course")
