from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from coaching_api.schemas.response import APIResponse
from coaching_api.schemas.test import Test, TestCreate, TestUpdate, TestWithQuestions
from coaching_api.services.test import test_service
from coaching_api.utils import deps

router = APIRouter()

@router.get("/", response_model=APIResponse[List[Test]])
def get_tests(
    db: Session = Depends(deps.get_db),
    course_id: Optional[str] = Query(None, alias="courseId"),
    skip: int = 0,
    limit: int = 100
):
    tests = test_service.get_multi(db, skip=skip, limit=limit, course_id=course_id)
    return APIResponse(message="Tests retrieved successfully", data=[Test.model_validate(t) for t in tests])


@router.post("/", response_model=APIResponse[Test], status_code=status.HTTP_201_CREATED)
def create_test(
    *,
    db: Session = Depends(deps.get_db),
    test_in: TestCreate
):
    test = test_service.create(db, test_in)
    return APIResponse(message="Test created successfully", data=Test.model_validate(test))


@router.get("/{test_id}", response_model=APIResponse[TestWithQuestions])
def get_test(
    *,
    db: Session = Depends(deps.get_db),
    test_id: str
):
    test = test_service.get_with_questions(db, test_id)
    return APIResponse(message="Test retrieved successfully", data=test)


@router.put("/{test_id}", response_model=APIResponse[Test])
def update_test(
    *,
    db: Session = Depends(deps.get_db),
    test_id: str,
    test_in: TestUpdate
):
    test = test_service.update(db, test_id, test_in)
    return APIResponse(message="Test updated successfully", data=Test.model_validate(test))


@router.delete("/{test_id}", response_model=APIResponse[Test])
def delete_test(
    *,
    db: Session = Depends(deps.get_db),
    test_id: str
):
    deleted = test_service.delete(db, test_id)
    return APIResponse(message="Test deleted successfully", data=deleted)

