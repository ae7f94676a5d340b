from coaching_api.crud.student import student as crud_student
from coaching_api.schemas.student import Student
from coaching_api.services.resource import ResourceService

student_service = ResourceService(crud_student, Student, "Student")
