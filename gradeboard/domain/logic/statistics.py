from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from gradeboard.domain.models.entities import EmptyCollectionError, Grade, PassFailStats, StudentRecord


def round_half_up(value: float) -> float:
    """Round to one decimal place, halves away from zero, on the shortest decimal repr."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _require_records(records: Sequence[StudentRecord], what: str) -> None:
    if not records:
        raise EmptyCollectionError(f"Cannot calculate {what} with no student records")


def sort_by_total_descending(records: Sequence[StudentRecord]) -> list[StudentRecord]:
    # sorted() is stable with reverse=True too, so equal totals keep insertion order
    return sorted(records, key=lambda r: r.total, reverse=True)


def class_average(records: Sequence[StudentRecord]) -> float:
    _require_records(records, "class average")
    return sum(r.total for r in records) / len(records)


def top_performer(records: Sequence[StudentRecord]) -> StudentRecord:
    _require_records(records, "top performer")
    best = records[0]
    for record in records[1:]:
        if record.total > best.total:
            best = record
    return best


def top_performer_indices(records: Sequence[StudentRecord]) -> set[int]:
    """Every position whose total equals the maximum, for highlighting rows."""
    if not records:
        return set()
    max_total = max(r.total for r in records)
    return {idx for idx, r in enumerate(records) if r.total == max_total}


def pass_fail_counts(records: Sequence[StudentRecord], *, complement_fail_pct: bool = True) -> PassFailStats:
    """Partition records into pass and fail.

    ``pass_pct`` is rounded to one decimal place. With ``complement_fail_pct``
    the fail percentage is ``100 - pass_pct`` taken after that rounding, which
    is what the dashboard has always shown; without it the fail percentage is
    rounded from ``fail_count`` on its own.
    """
    _require_records(records, "pass/fail ratio")
    size = len(records)
    pass_count = sum(1 for r in records if r.grade != Grade.FAIL)
    fail_count = size - pass_count

    pass_pct = round_half_up(pass_count / size * 100)
    if complement_fail_pct:
        fail_pct = round_half_up(100 - pass_pct)
    else:
        fail_pct = round_half_up(fail_count / size * 100)

    return PassFailStats(pass_count=pass_count, fail_count=fail_count, pass_pct=pass_pct, fail_pct=fail_pct)
