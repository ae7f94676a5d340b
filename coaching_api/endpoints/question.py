from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from coaching_api.schemas.response import APIResponse
from coaching_api.schemas.question import Question, QuestionCreate, QuestionUpdate
from coaching_api.services.question import question_service
from coaching_api.utils import deps

router = APIRouter()

@router.get("/", response_model=APIResponse[List[Question]])
def get_questions(
    db: Session = Depends(deps.get_db),
    test_id: Optional[str] = Query(None, alias="testId"),
    course_id: Optional[str] = Query(None, alias="courseId"),
    skip: int = 0,
    limit: int = 100
):
    questions = question_service.get_multi(db, skip=skip, limit=limit, test_id=test_id, course_id=course_id)
    return APIResponse(message="Questions retrieved successfully", data=[Question.model_validate(q) for q in questions])


@router.post("/", response_model=APIResponse[Question], status_code=status.HTTP_201_CREATED)
def create_question(
    *,
    db: Session = Depends(deps.get_db),
    question_in: QuestionCreate
):
    question = question_service.create(db, question_in)
    return APIResponse(message="Question created successfully", data=Question.model_validate(question))


@router.get("/{question_id}", response_model=APIResponse[Question])
def get_question(
    *,
    db: Session = Depends(deps.get_db),
    question_id: str
):
    question = question_service.get(db, question_id)
    return APIResponse(message="Question retrieved successfully", data=Question.model_validate(question))


@router.put("/{question_id}", response_model=APIResponse[Question])
def update_question(
    *,
    db: Session = Depends(deps.get_db),
    question_id: str,
    question_in: QuestionUpdate
):
    question = question_service.update(db, question_id, question_in)
    return APIResponse(message="Question updated successfully", data=Question.model_validate(question))


@router.delete("/{question_id}", response_model=APIResponse[Question])
def delete_question(
    *,
    db: Session = Depends(deps.get_db),
    question_id: str
):
    deleted = question_service.delete(db, question_id)
    return APIResponse(message="Question deleted successfully", data=deleted)
