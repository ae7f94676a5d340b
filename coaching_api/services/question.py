from coaching_api.crud.question import question as crud_question
from coaching_api.schemas.question import Question
from coaching_api.services.resource import ResourceService

question_service = ResourceService(crud_question, Question, "Question")
