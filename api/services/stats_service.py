"""Service layer for attempt statistics."""
from api.models.analysis import RunnerQuestionPayload
from models import QuestionType


def is_answered(question: RunnerQuestionPayload) -> bool:
    """A question counts as answered once it holds a non-empty answer."""
    answer = question.userAnswer
    if answer is None:
        return False
    if isinstance(answer, list):
        return len(answer) > 0
    return True


def _time_entry(question: RunnerQuestionPayload | None) -> dict[str, int] | None:
    if question is None:
        return None
    return {"id": question.id, "timeSpent": question.timeSpent}


def build_type_breakdown(
    questions: list[RunnerQuestionPayload],
) -> dict[str, dict[str, int]]:
    """Question and answered counts per section."""
    breakdown = {
        question_type: {"total": 0, "answered": 0}
        for question_type in QuestionType.values()
    }
    for question in questions:
        bucket = breakdown.get(question.type)
        if bucket is None:
            continue
        bucket["total"] += 1
        if is_answered(question):
            bucket["answered"] += 1
    return breakdown


def build_time_stats(
    questions: list[RunnerQuestionPayload],
    total_test_time: int,
    answered_count: int,
    time_limit_seconds: int | None = None,
) -> dict[str, object]:
    """Time spent overall and per question."""
    total_questions = len(questions)

    longest = None
    for question in questions:
        if longest is None or question.timeSpent > longest.timeSpent:
            longest = question

    shortest_answered = None
    for question in questions:
        if not is_answered(question):
            continue
        if shortest_answered is None or question.timeSpent < shortest_answered.timeSpent:
            shortest_answered = question

    stats: dict[str, object] = {
        "totalTimeSpent": total_test_time,
        "averagePerQuestion": (
            total_test_time / total_questions if total_questions else 0
        ),
        "averagePerAnsweredQuestion": (
            total_test_time / answered_count if answered_count else 0
        ),
        "longestQuestion": _time_entry(longest),
        "shortestAnsweredQuestion": _time_entry(shortest_answered),
    }
    if time_limit_seconds:
        stats["percentOfAllotted"] = round(total_test_time / time_limit_seconds * 100)
    return stats


def build_attempt_summary(
    questions: list[RunnerQuestionPayload],
    total_test_time: int,
    time_limit_seconds: int | None = None,
) -> dict[str, object]:
    """Summarise a submitted attempt independently of any answer key."""
    answered = sum(1 for question in questions if is_answered(question))
    return {
        "totalQuestions": len(questions),
        "answeredQuestions": answered,
        "notAnswered": len(questions) - answered,
        "markedForReview": sum(
            1 for question in questions if question.isMarkedForReview
        ),
        "byType": build_type_breakdown(questions),
        "time": build_time_stats(
            questions, total_test_time, answered, time_limit_seconds
        ),
    }
