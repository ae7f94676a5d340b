import pytest
from types import SimpleNamespace

from coaching_api.services.scoring import (
    calculate_percentage, grade_answers, resolve_marks, resolve_negative_marks
)


def make_question(id, correct_answer="A", marks=None, negative_marks=None):
    return SimpleNamespace(id=id, correct_answer=correct_answer, marks=marks, negative_marks=negative_marks)


def test_one_correct_one_wrong_with_negative_marking():
    questions = [make_question("q1", "A"), make_question("q2", "B")]

    score = grade_answers(questions, {"q1": "A", "q2": "C"}, marks_per_question=4, negative_marking=1)

    assert score.correct_answers == 1
    assert score.wrong_answers == 1
    assert score.unanswered == 0
    assert score.total_marks == 8
    assert score.obtained_marks == 3
    assert score.negative_marks_total == 1
    assert score.percentage == 38


def test_nothing_answered():
    questions = [make_question("q1", "A"), make_question("q2", "B")]

    score = grade_answers(questions, {}, marks_per_question=4, negative_marking=1)

    assert score.correct_answers == 0
    assert score.wrong_answers == 0
    assert score.unanswered == 2
    assert score.total_marks == 8
    assert score.obtained_marks == 0
    assert score.negative_marks_total == 0
    assert score.percentage == 0


def test_wrong_answer_without_negative_marking_costs_nothing():
    questions = [make_question("q1", "A"), make_question("q2", "B")]

    score = grade_answers(questions, {"q1": "A", "q2": "D"}, marks_per_question=4, negative_marking=0)

    assert score.wrong_answers == 1
    assert score.negative_marks_total == 0
    assert score.obtained_marks == 4
    assert score.percentage == 50


def test_obtained_marks_never_negative():
    questions = [make_question("q1", "A"), make_question("q2", "B"), make_question("q3", "C")]

    score = grade_answers(questions, {"q1": "D", "q2": "D", "q3": "D"}, marks_per_question=4, negative_marking=1)

    assert score.negative_marks_total == 3
    assert score.obtained_marks == 0
    assert score.percentage == 0


def test_negative_marks_are_clamped_after_summing():
    questions = [make_question("q1", "A"), make_question("q2", "B"), make_question("q3", "C")]

    score = grade_answers(questions, {"q1": "A", "q2": "D", "q3": "D"}, marks_per_question=1, negative_marking=1)

    # 1 - 1 - 1 = -1, clamped
    assert score.obtained_marks == 0


def test_no_questions_has_zero_percentage():
    score = grade_answers([], {"q1": "A"}, marks_per_question=4, negative_marking=1)

    assert score.total_questions == 0
    assert score.total_marks == 0
    assert score.percentage == 0
    assert score.unanswered == 0


def test_total_marks_counts_every_question_regardless_of_answering():
    questions = [
        make_question("q1", marks=2),
        make_question("q2", marks=5),
        make_question("q3"),
    ]

    unanswered = grade_answers(questions, {}, marks_per_question=4)
    all_answered = grade_answers(questions, {"q1": "A", "q2": "B", "q3": "A"}, marks_per_question=4)

    assert unanswered.total_marks == 11
    assert all_answered.total_marks == 11


def test_question_overrides_win_over_test_marking_scheme():
    questions = [make_question("q1", "A", marks=2, negative_marks=0.5), make_question("q2", "B")]

    score = grade_answers(questions, {"q1": "B", "q2": "B"}, marks_per_question=4, negative_marking=1)

    assert score.total_marks == 6
    assert score.negative_marks_total == 0.5
    assert score.obtained_marks == 3.5
    assert score.percentage == 58


def test_falsy_answers_count_as_unanswered():
    questions = [make_question("q1"), make_question("q2"), make_question("q3"), make_question("q4")]

    score = grade_answers(questions, {"q1": None, "q2": "", "q3": "A"}, marks_per_question=4, negative_marking=1)

    assert score.correct_answers == 1
    assert score.wrong_answers == 0
    assert score.unanswered == 3


def test_answers_for_foreign_questions_are_ignored():
    questions = [make_question("q1"), make_question("q2")]

    score = grade_answers(questions, {"q1": "A", "other-test-q": "B"}, marks_per_question=4)

    assert score.correct_answers == 1
    assert score.unanswered == 1
    assert score.correct_answers + score.wrong_answers + score.unanswered == score.total_questions


def test_comparison_is_strict():
    questions = [make_question("q1", "A"), make_question("q2", "1")]

    score = grade_answers(questions, {"q1": "a", "q2": 1}, marks_per_question=4)

    assert score.correct_answers == 0
    assert score.wrong_answers == 2


def test_breakdown_records_each_question():
    questions = [make_question("q1", "A"), make_question("q2", "B"), make_question("q3", "C")]

    score = grade_answers(questions, {"q1": "A", "q2": "C"}, marks_per_question=4, negative_marking=1)

    by_id = {item.question_id: item for item in score.answers}
    assert by_id["q1"].is_correct and by_id["q1"].marks_awarded == 4
    assert not by_id["q2"].is_correct
    assert by_id["q2"].student_answer == "C"
    assert by_id["q2"].correct_answer == "B"
    assert by_id["q2"].negative_marks_applied == 1
    assert by_id["q3"].student_answer is None
    assert by_id["q3"].marks_awarded == 0
    assert by_id["q3"].negative_marks_applied == 0


def test_defaults_apply_when_test_has_no_scheme():
    question = make_question("q1")

    assert resolve_marks(question, None) == 4
    assert resolve_negative_marks(question, None) == 0


@pytest.mark.parametrize("obtained,total,expected", [
    (3, 8, 38),
    (1, 8, 13),
    (0, 8, 0),
    (-5, 8, 0),
    (8, 8, 100),
    (10, 0, 0),
])
def test_calculate_percentage(obtained, total, expected):
    assert calculate_percentage(obtained, total) == expected
