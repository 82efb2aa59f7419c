import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from answer_key import SAMPLE_ANSWER_KEY, InvalidAnswerKeyError, answer_key_errors, parse_answer_key
from api.models.analysis import RunnerQuestionPayload
from api.models.scoring import MarkingSchemeModel
from api.services.stats_service import build_attempt_summary
from api.utils import json_dump, read_json_file, write_json_file
from core.logging_setup import setup_console_logging
from models import Question
from score_calculator import calculate_score, default_marking_scheme
from serialization import format_score_report, serialize_score_result

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score mock test attempts")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    commands = parser.add_subparsers(dest="command", required=True)

    validate = commands.add_parser("validate", help="Check an answer key file")
    validate.add_argument("answer_key", type=Path)

    template = commands.add_parser("template", help="Write a sample answer key")
    template.add_argument(
        "--output",
        type=Path,
        default=Path("answer-key-template.json"),
        help="Where to write the template",
    )

    score = commands.add_parser("score", help="Score saved test results")
    score.add_argument("results", type=Path, help="Saved test results JSON")
    score.add_argument("answer_key", type=Path, help="Answer key JSON")
    score.add_argument(
        "--marking-scheme",
        type=Path,
        help="Marking scheme JSON (defaults to the standard scheme)",
    )
    score.add_argument("--json", action="store_true", help="Print JSON instead of text")
    score.add_argument("--output", type=Path, help="Also write the JSON result here")
    return parser.parse_args(argv)


def _load_results(path: Path) -> tuple[list[dict], dict]:
    payload = read_json_file(path, None)
    if payload is None:
        raise SystemExit(f"Results file not found: {path}")
    if isinstance(payload, list):
        return payload, {}
    if isinstance(payload, dict) and isinstance(payload.get("questions"), list):
        return payload["questions"], payload
    raise SystemExit(f"Results file has no question list: {path}")


def run_validate(args: argparse.Namespace) -> int:
    issues = answer_key_errors(read_json_file(args.answer_key, None))
    if not issues:
        print(f"{args.answer_key}: valid")
        return 0
    for issue in issues:
        where = f"question {issue.question_id}" if issue.question_id else "document"
        print(f"{args.answer_key}: {where}: {issue.message}")
    return 1


def run_template(args: argparse.Namespace) -> int:
    write_json_file(args.output, SAMPLE_ANSWER_KEY)
    print(f"Saved answer key template to {args.output}")
    return 0


def run_score(args: argparse.Namespace) -> int:
    raw_questions, results = _load_results(args.results)
    try:
        answer_key = parse_answer_key(read_json_file(args.answer_key, None))
    except InvalidAnswerKeyError as exc:
        logger.error(f"Invalid answer key {args.answer_key}: {exc}")
        return 1

    marking_scheme = default_marking_scheme()
    if args.marking_scheme:
        try:
            marking_scheme = MarkingSchemeModel.model_validate(
                read_json_file(args.marking_scheme, None)
            ).to_scheme()
        except ValidationError as exc:
            logger.error(f"Invalid marking scheme {args.marking_scheme}: {exc}")
            return 1

    questions = [Question.from_dict(item) for item in raw_questions]
    result = calculate_score(questions, answer_key, marking_scheme)

    payload = serialize_score_result(result)
    if args.output:
        write_json_file(args.output, payload)

    if args.json:
        print(json_dump(payload))
        return 0

    time_limit = (results.get("testConfig") or {}).get("timeInMinutes")
    summary = build_attempt_summary(
        [RunnerQuestionPayload.model_validate(item) for item in raw_questions],
        int(results.get("totalTestTime") or 0),
        time_limit * 60 if time_limit else None,
    )
    print(format_score_report(result, summary))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_console_logging(logging.DEBUG if args.verbose else logging.WARNING)
    handlers = {
        "validate": run_validate,
        "template": run_template,
        "score": run_score,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
