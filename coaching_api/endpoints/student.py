from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from coaching_api.schemas.response import APIResponse
from coaching_api.schemas.student import Student, StudentCreate, StudentUpdate
from coaching_api.services.student import student_service
from coaching_api.utils import deps

router = APIRouter()

@router.get("/", response_model=APIResponse[List[Student]])
def get_students(
    db: Session = Depends(deps.get_db),
    skip: int = 0,
    limit: int = 100
):
    students = student_service.get_multi(db, skip=skip, limit=limit)
    return APIResponse(message="Students retrieved successfully", data=[Student.model_validate(s) for s in students])


@router.post("/", response_model=APIResponse[Student], status_code=status.HTTP_201_CREATED)
def create_student(
    *,
    db: Session = Depends(deps.get_db),
    student_in: StudentCreate
):
    student = student_service.create(db, student_in)
    return APIResponse(message="Student created successfully", data=Student.model_validate(student))


@router.get("/{student_id}", response_model=APIResponse[Student])
def get_student(
    *,
    db: Session = Depends(deps.get_db),
    student_id: str
):
    student = student_service.get(db, student_id)
    return APIResponse(message="Student retrieved successfully", data=Student.model_validate(student))


@router.put("/{student_id}", response_model=APIResponse[Student])
def update_student(
    *,
    db: Session = Depends(deps.get_db),
    student_id: str,
    student_in: StudentUpdate
):
    student = student_service.update(db, student_id, student_in)
    return APIResponse(message="Student updated successfully", data=Student.model_validate(student))


@router.delete("/{student_id}", response_model=APIResponse[Student])
def delete_student(
    *,
    db: Session = Depends(deps.get_db),
    student_id: str
):
    deleted = student_service.delete(db, student_id)
    return APIResponse(message="Student deleted successfully", data=deleted)

