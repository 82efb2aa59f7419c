from __future__ import annotations

from typing import Any

from api.utils.time_utils import format_time
from models import ScoreResult

SECTION_LABELS = {
    "singleCorrect": "Single Correct",
    "multipleCorrect": "Multiple Correct",
    "numerical": "Numerical",
}


def serialize_score_result(result: ScoreResult) -> dict[str, Any]:
    """JSON payload for a score result, question scores ordered by id."""
    payload = result.to_dict()
    payload["questionScores"] = {
        str(question_id): payload["questionScores"][question_id]
        for question_id in sorted(payload["questionScores"])
    }
    return payload


def score_percentage(result: ScoreResult) -> float:
    if result.total_max_score <= 0:
        return 0.0
    return round(result.total_score / result.total_max_score * 100, 2)


def _format_answer(answer: object) -> str:
    if answer is None:
        return "-"
    if isinstance(answer, list):
        return ", ".join(sorted(str(item) for item in answer)) or "-"
    return str(answer)


def _section_line(name: str, section: dict[str, Any]) -> str:
    label = SECTION_LABELS[name]
    if name == "multipleCorrect":
        partial = section["partialCorrect"]
        partial_count = sum(partial.values())
        outcome = (
            f"full {section['allCorrect']}, partial {partial_count}, "
            f"incorrect {section['anyIncorrect']}, unanswered {section['unanswered']}"
        )
    else:
        outcome = (
            f"correct {section['correct']}, incorrect {section['incorrect']}, "
            f"unanswered {section['unanswered']}"
        )
    return f"  {label}: {section['score']} / {section['maxScore']} ({outcome})"


def format_score_report(
    result: ScoreResult,
    summary: dict[str, Any] | None = None,
) -> str:
    """Plain-text report for terminal output."""
    payload = serialize_score_result(result)
    lines = [
        f"Score: {result.total_score} / {result.total_max_score} "
        f"({score_percentage(result)}%)",
        "Sections:",
    ]
    for name, section in payload["sectionScores"].items():
        lines.append(_section_line(name, section))

    if summary:
        time_stats = summary["time"]
        lines.append(
            f"Answered {summary['answeredQuestions']} of {summary['totalQuestions']}, "
            f"marked for review {summary['markedForReview']}"
        )
        lines.append(
            f"Time spent: {format_time(time_stats['totalTimeSpent'])} "
            f"(avg {format_time(time_stats['averagePerQuestion'])} per question)"
        )

    lines.append("Questions:")
    for question_id, item in payload["questionScores"].items():
        mark = "+" if item["isCorrect"] else " "
        lines.append(
            f"  {mark} Q{question_id}: {item['score']} / {item['maxScore']} "
            f"(yours: {_format_answer(item['userAnswer'])}, "
            f"key: {_format_answer(item['correctAnswer'])})"
        )
    return "\n".join(lines)
