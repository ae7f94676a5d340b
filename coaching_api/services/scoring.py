"""
Scoring engine.

Grades a set of submitted answers against a test's questions. Pure: no
database access, no clock, no logging, so the same inputs always produce the
same score sheet.
"""
import math
from typing import Any, Iterable, Mapping, Optional, Protocol

from coaching_api.core.config import settings
from coaching_api.schemas.test_result import QuestionBreakdown, ScoreSheet


class GradableQuestion(Protocol):
    id: str
    correct_answer: Optional[str]
    marks: Optional[float]
    negative_marks: Optional[float]


def is_answered(value: Any) -> bool:
    """Missing, null, empty string, zero and False all count as no answer."""
    return bool(value)


def resolve_marks(question: GradableQuestion, marks_per_question: Optional[float]) -> float:
    return question.marks or marks_per_question or settings.DEFAULT_MARKS_PER_QUESTION


def resolve_negative_marks(question: GradableQuestion, negative_marking: Optional[float]) -> float:
    return question.negative_marks or negative_marking or settings.DEFAULT_NEGATIVE_MARKING


def calculate_percentage(obtained_marks: float, total_marks: float) -> int:
    if total_marks <= 0:
        return 0
    # round half up, matching how clients display the score
    return int(math.floor(max(0, obtained_marks) / total_marks * 100 + 0.5))


def grade_answers(
    questions: Iterable[GradableQuestion],
    answers: Mapping[str, Any],
    marks_per_question: Optional[float] = None,
    negative_marking: Optional[float] = None,
) -> ScoreSheet:
    """
    Grade ``answers`` (question id -> selected option) against ``questions``.

    Every question contributes its marks to the total whether or not it was
    answered. A wrong answer costs the question's negative marks; a blank one
    costs nothing. Obtained marks are clamped at zero.

    Answers keyed by ids that are not among ``questions`` are ignored, so
    ``unanswered`` is always ``total_questions - correct - wrong``.
    """
    breakdown = []
    total_marks = 0.0
    obtained_marks = 0.0
    negative_marks_total = 0.0
    correct_count = 0
    wrong_count = 0

    for question in questions:
        marks = resolve_marks(question, marks_per_question)
        neg_marks = resolve_negative_marks(question, negative_marking)
        total_marks += marks

        submitted = answers.get(question.id)
        item = QuestionBreakdown(
            question_id=question.id,
            student_answer=submitted if is_answered(submitted) else None,
            correct_answer=question.correct_answer,
        )

        if is_answered(submitted):
            if submitted == question.correct_answer:
                correct_count += 1
                obtained_marks += marks
                item.is_correct = True
                item.marks_awarded = marks
            else:
                wrong_count += 1
                negative_marks_total += neg_marks
                obtained_marks -= neg_marks
                item.negative_marks_applied = neg_marks

        breakdown.append(item)

    total_questions = len(breakdown)
    question_ids = {item.question_id for item in breakdown}
    answered_count = sum(
        1 for question_id, value in answers.items()
        if question_id in question_ids and is_answered(value)
    )
    obtained_marks = max(0.0, obtained_marks)

    return ScoreSheet(
        answers=breakdown,
        total_questions=total_questions,
        correct_answers=correct_count,
        wrong_answers=wrong_count,
        unanswered=total_questions - answered_count,
        total_marks=total_marks,
        obtained_marks=obtained_marks,
        negative_marks_total=negative_marks_total,
        percentage=calculate_percentage(obtained_marks, total_marks),
    )
