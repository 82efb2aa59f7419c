import json

from answer_key import SAMPLE_ANSWER_KEY


def _questions() -> list[dict[str, object]]:
    return [
        {"id": 1, "type": "singleCorrect", "userAnswer": "A", "timeSpent": 30},
        {"id": 2, "type": "singleCorrect", "userAnswer": None},
        {"id": 3, "type": "multipleCorrect", "userAnswer": ["A", "C"]},
        {"id": 5, "type": "numerical", "userAnswer": "9.80"},
    ]


def test_template_matches_sample(client) -> None:
    response = client.get("/api/answer-keys/template")
    assert response.status_code == 200
    assert response.json() == SAMPLE_ANSWER_KEY


def test_validate_reports_issues(client) -> None:
    response = client.post(
        "/api/answer-keys/validate",
        json={"1": {"type": "multipleCorrect", "correctAnswer": "A"}},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert body["errors"][0]["questionId"] == "1"
    assert body["errors"][0]["field"] == "correctAnswer"

    response = client.post("/api/answer-keys/validate", json=SAMPLE_ANSWER_KEY)
    assert response.json() == {"valid": True, "errors": []}


def test_upload_answer_key(client) -> None:
    content = json.dumps(SAMPLE_ANSWER_KEY).encode("utf-8")
    response = client.post(
        "/api/answer-keys/upload",
        files={"file": ("key.json", content, "application/json")},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["questionCount"] == 5
    assert body["answerKey"]["3"]["correctAnswer"] == ["A", "C", "D"]


def test_upload_rejects_bad_json_and_invalid_key(client) -> None:
    response = client.post(
        "/api/answer-keys/upload",
        files={"file": ("key.json", b"{not json", "application/json")},
    )
    assert response.status_code == 400

    response = client.post(
        "/api/answer-keys/upload",
        files={"file": ("key.json", b"{}", "application/json")},
    )
    assert response.status_code == 400
    assert response.json()["detail"]["errors"][0]["message"] == "Answer key has no questions"


def test_default_marking_scheme(client) -> None:
    body = client.get("/api/marking-scheme/default").json()
    assert body["singleCorrect"] == {
        "global": True,
        "default": {"correct": 4, "incorrect": -1, "unanswered": 0},
    }
    assert body["multipleCorrect"]["anyIncorrect"] == -2
    assert body["numerical"] == {"correct": 4, "incorrect": 0, "unanswered": 0}


def test_score_with_default_scheme(client) -> None:
    response = client.post(
        "/api/score",
        json={"questions": _questions(), "answerKey": SAMPLE_ANSWER_KEY},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["totalScore"] == 4 + 0 + 2 + 0
    assert body["totalMaxScore"] == 16
    assert body["sectionScores"]["numerical"]["incorrect"] == 1
    assert list(body["questionScores"]) == ["1", "2", "3", "5"]
    assert body["questionScores"]["3"]["userAnswer"] == ["A", "C"]


def test_score_with_question_marks_and_custom_scheme(client) -> None:
    scheme = client.get("/api/marking-scheme/default").json()
    scheme["singleCorrect"]["global"] = False
    response = client.post(
        "/api/score",
        json={
            "questions": _questions(),
            "answerKey": SAMPLE_ANSWER_KEY,
            "markingScheme": scheme,
            "questionMarks": {"2": {"correct": 5, "incorrect": -2, "unanswered": -1}},
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["questionScores"]["2"] == {
        "score": -1,
        "maxScore": 5,
        "isCorrect": False,
        "correctAnswer": "B",
        "userAnswer": None,
    }


def test_score_rejects_invalid_key_and_partial_scheme(client) -> None:
    response = client.post(
        "/api/score",
        json={"questions": _questions(), "answerKey": {"1": {"type": "essay", "correctAnswer": "A"}}},
    )
    assert response.status_code == 400

    response = client.post(
        "/api/score",
        json={
            "questions": _questions(),
            "answerKey": SAMPLE_ANSWER_KEY,
            "markingScheme": {"numerical": {"correct": 1, "incorrect": 0, "unanswered": 0}},
        },
    )
    assert response.status_code == 422


def test_configure_saves_progress_when_requested(client) -> None:
    config = {"numQuestions": 4, "timeInMinutes": 10, "useServerStorage": True}
    response = client.post("/api/tests/configure?clientId=abc", json=config)
    assert response.status_code == 200
    progress = response.json()
    assert [q["type"] for q in progress["questions"]] == [
        "singleCorrect",
        "multipleCorrect",
        "numerical",
        "singleCorrect",
    ]
    assert progress["timeRemaining"] == 600

    saved = client.get("/api/progress/abc")
    assert saved.status_code == 200
    assert saved.json()["questions"] == progress["questions"]


def test_configure_validation_errors(client) -> None:
    response = client.post("/api/tests/configure", json={"numQuestions": 0})
    assert response.status_code == 422

    response = client.post(
        "/api/tests/configure", json={"numQuestions": 2, "useServerStorage": True}
    )
    assert response.status_code == 400


def test_progress_round_trip(client) -> None:
    assert client.get("/api/progress/client-1").status_code == 404

    snapshot = {"currentQuestionIndex": 2, "timeRemaining": 120, "questions": []}
    response = client.put("/api/progress/client-1", json=snapshot)
    assert response.status_code == 200
    assert response.json()["status"] == "saved"
    assert client.get("/api/progress/client-1").json() == snapshot

    assert client.delete("/api/progress/client-1").json() == {"status": "cleared"}
    assert client.delete("/api/progress/client-1").json() == {"status": "empty"}


def test_progress_rejects_bad_client_id(client) -> None:
    assert client.get("/api/progress/..").status_code in (400, 404)
    assert client.get("/api/progress/%20").status_code == 400


def test_analysis_summary(client) -> None:
    response = client.post(
        "/api/analysis/summary",
        json={
            "questions": _questions(),
            "totalTestTime": 300,
            "testConfig": {"numQuestions": 4, "timeInMinutes": 10, "configType": "basic"},
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["answeredQuestions"] == 3
    assert body["time"]["percentOfAllotted"] == 50


def test_analysis_summary_without_test_config(client) -> None:
    response = client.post(
        "/api/analysis/summary", json={"questions": _questions(), "totalTestTime": 300}
    )
    assert response.status_code == 200
    assert "percentOfAllotted" not in response.json()["time"]


def test_analysis_summary_rejects_bad_time_limit(client) -> None:
    response = client.post(
        "/api/analysis/summary",
        json={"questions": _questions(), "testConfig": {"timeInMinutes": 0}},
    )
    assert response.status_code == 422
