from __future__ import annotations

from gradeboard.domain.models.entities import Grade, StudentRecord

# (lower bound inclusive, letter), checked highest first
GRADE_BANDS: list[tuple[float, Grade]] = [
    (70, Grade.A),
    (60, Grade.B),
    (50, Grade.C),
    (40, Grade.D),
]

CAT_MAX = 30.0
EXAM_MAX = 70.0


def derive_grade(total: float) -> Grade:
    for low, letter in GRADE_BANDS:
        if total >= low:
            return letter
    return Grade.FAIL


def calc_total(cat_score: float, exam_score: float) -> float:
    return cat_score + exam_score


def build_record(name: str, registration_number: str, cat_score: float, exam_score: float) -> StudentRecord:
    total = calc_total(cat_score, exam_score)
    return StudentRecord(
        name=name.strip(),
        registration_number=registration_number.strip(),
        cat_score=cat_score,
        exam_score=exam_score,
        total=total,
        grade=derive_grade(total),
    )
