from __future__ import annotations

import math
import re
from dataclasses import dataclass

from gradeboard.domain.logic.grading import CAT_MAX, EXAM_MAX
from gradeboard.domain.models.entities import ErrorKind, FieldError

NAME = "name"
REGISTRATION_NUMBER = "registration_number"
CAT_SCORE = "cat_score"
EXAM_SCORE = "exam_score"

# Longest numeric prefix after leading whitespace, the way browser float parsing reads it.
_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


@dataclass(frozen=True)
class ValidatedSubmission:
    name: str
    registration_number: str
    cat_score: float
    exam_score: float


def parse_score(raw: str | None) -> float | None:
    if raw is None:
        return None
    match = _NUMBER_PREFIX.match(str(raw))
    if not match:
        return None
    text = match.group(1)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def _require_text(field: str, raw: str | None, message: str) -> FieldError | None:
    if raw is None or not str(raw).strip():
        return FieldError(field, ErrorKind.REQUIRED_FIELD, message)
    return None


def _check_score(field: str, label: str, raw: str | None, maximum: float) -> FieldError | None:
    value = parse_score(raw)
    if value is None:
        return FieldError(field, ErrorKind.NOT_A_NUMBER, f"{label} marks must be a number")
    if value < 0 or value > maximum:
        return FieldError(field, ErrorKind.OUT_OF_RANGE, f"{label} marks must be between 0 and {maximum:g}")
    return None


def validate_name(raw: str | None) -> FieldError | None:
    return _require_text(NAME, raw, "Full name is required")


def validate_registration_number(raw: str | None) -> FieldError | None:
    return _require_text(REGISTRATION_NUMBER, raw, "Registration number is required")


def validate_cat_score(raw: str | None) -> FieldError | None:
    return _check_score(CAT_SCORE, "CAT", raw, CAT_MAX)


def validate_exam_score(raw: str | None) -> FieldError | None:
    return _check_score(EXAM_SCORE, "Exam", raw, EXAM_MAX)


def validate_submission(
    raw_name: str | None,
    raw_reg_no: str | None,
    raw_cat: str | None,
    raw_exam: str | None,
) -> tuple[ValidatedSubmission | None, list[FieldError]]:
    """Run every field rule and collect all failures.

    No rule short-circuits another, so a form with several bad fields reports
    each of them. The cleaned submission is only returned when the list of
    errors is empty.
    """
    checks = [
        validate_name(raw_name),
        validate_registration_number(raw_reg_no),
        validate_cat_score(raw_cat),
        validate_exam_score(raw_exam),
    ]
    errors = [err for err in checks if err is not None]
    if errors:
        return None, errors

    return (
        ValidatedSubmission(
            name=str(raw_name).strip(),
            registration_number=str(raw_reg_no).strip(),
            cat_score=parse_score(raw_cat),
            exam_score=parse_score(raw_exam),
        ),
        [],
    )
