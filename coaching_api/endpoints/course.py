from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from coaching_api.schemas.response import APIResponse
from coaching_api.schemas.course import Course, CourseCreate, CourseUpdate
from coaching_api.services.course import course_service
from coaching_api.utils import deps

router = APIRouter()

@router.get("/", response_model=APIResponse[List[Course]])
def get_courses(
    db: Session = Depends(deps.get_db),
    skip: int = 0,
    limit: int = 100
):
    courses = course_service.get_multi(db, skip=skip, limit=limit)
    return APIResponse(message="Courses retrieved successfully", data=[Course.model_validate(c) for c in courses])


@router.post("/", response_model=APIResponse[Course], status_code=status.HTTP_201_CREATED)
def create_course(
    *,
    db: Session = Depends(deps.get_db),
    course_in: CourseCreate
):
    course = course_service.create(db, course_in)
    return APIResponse(message="Course created successfully", data=Course.model_validate(course))


@router.get("/{course_id}", response_model=APIResponse[Course])
def get_course(
    *,
    db: Session = Depends(deps.get_db),
    course_id: str
):
    course = course_service.get(db, course_id)
    return APIResponse(message="Course retrieved successfully", data=Course.model_validate(course))


@router.put("/{course_id}", response_model=APIResponse[Course])
def update_course(
    *,
    db: Session = Depends(deps.get_db),
    course_id: str,
    course_in: CourseUpdate
):
    course = course_service.update(db, course_id, course_in)
    return APIResponse(message="Course updated successfully", data=Course.model_validate(course))


@router.delete("/{course_id}", response_model=APIResponse[Course])
def delete_course(
    *,
    db: Session = Depends(deps.get_db),
    course_id: str
):
    deleted = course_service.delete(db, course_id)
    return APIResponse(message="Course deleted successfully", data=deleted)
