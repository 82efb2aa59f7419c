from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from api.models import RunnerQuestionPayload, TestConfig
from api.models.db.progress import TestProgress
from api.services import cleanup_service, progress_service, stats_service
from api.services import test_service as setup_service
from api.database import SessionLocal


def _runner(id: int, type: str, answer=None, time_spent: int = 0, review: bool = False):
    return RunnerQuestionPayload(
        id=id,
        type=type,
        userAnswer=answer,
        timeSpent=time_spent,
        isMarkedForReview=review,
    )


def test_generate_questions_basic_cycles_enabled_types() -> None:
    config = TestConfig(
        numQuestions=5,
        timeInMinutes=30,
        questionTypes={"singleCorrect": True, "multipleCorrect": False, "numerical": True},
    )

    questions = setup_service.generate_questions(config)

    assert [q.type for q in questions] == [
        "singleCorrect",
        "numerical",
        "singleCorrect",
        "numerical",
        "singleCorrect",
    ]
    assert [q.id for q in questions] == [1, 2, 3, 4, 5]
    assert questions[0].is_visited and questions[0].visit_count == 1
    assert not questions[1].is_visited and questions[1].visit_count == 0


def test_generate_questions_advanced_and_screenshots() -> None:
    config = TestConfig(
        numQuestions=3,
        timeInMinutes=5,
        configType="advanced",
        specificQuestionTypes=["multipleCorrect", "numerical", "multipleCorrect"],
        isScreenshotMode=True,
        screenshots=["q1.png", None],
    )

    questions = setup_service.generate_questions(config)

    assert [q.user_answer for q in questions] == [[], None, []]
    assert [q.screenshot for q in questions] == ["q1.png", None, None]


@pytest.mark.parametrize(
    ("config", "message"),
    [
        ({"numQuestions": 0}, "Number of questions must be greater than 0"),
        ({"timeInMinutes": 0}, "Time must be greater than 0 minutes"),
        (
            {"questionTypes": {"singleCorrect": False, "multipleCorrect": False, "numerical": False}},
            "Please select at least one question type",
        ),
        ({"isScreenshotMode": True, "screenshots": [None]}, "Please upload at least one screenshot"),
        (
            {"numQuestions": 2, "configType": "advanced", "specificQuestionTypes": ["numerical"]},
            "Specify a question type for every question",
        ),
    ],
)
def test_test_config_validation(config, message) -> None:
    with pytest.raises(ValidationError) as excinfo:
        TestConfig(**config)
    assert message in str(excinfo.value)


def test_start_progress_snapshot() -> None:
    progress = setup_service.start_progress(TestConfig(numQuestions=2, timeInMinutes=3))

    assert progress["currentQuestionIndex"] == 0
    assert progress["timeRemaining"] == 180
    assert progress["testConfig"]["numQuestions"] == 2
    assert progress["testStartTime"] == progress["lastSaved"]
    assert progress["questions"][1]["userAnswer"] == []


def test_attempt_summary_counts_and_times() -> None:
    questions = [
        _runner(1, "singleCorrect", "A", time_spent=40, review=True),
        _runner(2, "multipleCorrect", [], time_spent=90),
        _runner(3, "multipleCorrect", ["B"], time_spent=10),
        _runner(4, "numerical", None, time_spent=0),
    ]

    summary = stats_service.build_attempt_summary(questions, 140, time_limit_seconds=280)

    assert summary["totalQuestions"] == 4
    assert summary["answeredQuestions"] == 2
    assert summary["notAnswered"] == 2
    assert summary["markedForReview"] == 1
    assert summary["byType"]["multipleCorrect"] == {"total": 2, "answered": 1}
    assert summary["byType"]["numerical"] == {"total": 1, "answered": 0}
    assert summary["time"]["averagePerQuestion"] == 35
    assert summary["time"]["averagePerAnsweredQuestion"] == 70
    assert summary["time"]["longestQuestion"] == {"id": 2, "timeSpent": 90}
    assert summary["time"]["shortestAnsweredQuestion"] == {"id": 3, "timeSpent": 10}
    assert summary["time"]["percentOfAllotted"] == 50


def test_attempt_summary_handles_empty_attempt() -> None:
    summary = stats_service.build_attempt_summary([], 0)

    assert summary["time"]["averagePerQuestion"] == 0
    assert summary["time"]["longestQuestion"] is None
    assert summary["time"]["shortestAnsweredQuestion"] is None
    assert "percentOfAllotted" not in summary["time"]


def test_progress_service_round_trip(db_session) -> None:
    assert progress_service.load_progress(db_session, "c1") is None

    progress_service.save_progress(db_session, "c1", {"timeRemaining": 10})
    progress_service.save_progress(db_session, "c1", {"timeRemaining": 5})

    assert progress_service.load_progress(db_session, "c1") == {"timeRemaining": 5}
    assert db_session.query(TestProgress).count() == 1
    assert progress_service.clear_progress(db_session, "c1") is True
    assert progress_service.clear_progress(db_session, "c1") is False


def test_progress_service_ignores_unreadable_snapshot(db_session) -> None:
    db_session.add(TestProgress(client_id="broken", data_json="{oops"))
    db_session.commit()

    assert progress_service.load_progress(db_session, "broken") is None


def test_cleanup_removes_stale_progress(db_session) -> None:
    progress_service.save_progress(db_session, "fresh", {"a": 1})
    stale = progress_service.save_progress(db_session, "stale", {"a": 2})
    stale.updated_at = datetime.now(timezone.utc) - timedelta(days=45)
    db_session.commit()

    deleted = cleanup_service.cleanup_stale_progress(
        retention_days=30, session_factory=SessionLocal
    )

    db_session.expire_all()
    assert deleted == 1
    assert progress_service.load_progress(db_session, "stale") is None
    assert progress_service.load_progress(db_session, "fresh") == {"a": 1}
    assert cleanup_service.cleanup_stale_progress(retention_days=0) == 0
