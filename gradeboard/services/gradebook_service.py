from __future__ import annotations

import logging
from typing import Iterable

from gradeboard.config.settings import settings
from gradeboard.domain.logic import statistics
from gradeboard.domain.logic.grading import build_record
from gradeboard.domain.logic.samples import SAMPLE_STUDENTS
from gradeboard.domain.logic.validation import validate_submission
from gradeboard.domain.models.entities import (
    EmptyCollectionError,
    ErrorKind,
    PassFailStats,
    Result,
    StudentRecord,
)
from gradeboard.services.record_store import RecordStore

logger = logging.getLogger(__name__)


class GradebookService:
    """The calls the dashboard makes into the record store and statistics.

    Every user-facing problem comes back as a failed ``Result``; nothing here
    raises for bad input or an empty gradebook.
    """

    def __init__(self, store: RecordStore | None = None, *, complement_fail_pct: bool = True) -> None:
        self.store = store if store is not None else RecordStore()
        self.complement_fail_pct = complement_fail_pct

    @classmethod
    def from_settings(cls) -> "GradebookService":
        service = cls(complement_fail_pct=settings.complement_fail_pct)
        if settings.seed_samples:
            service.seed_sample_data()
        return service

    def seed_sample_data(self, samples: Iterable[tuple[str, str, float, float]] = SAMPLE_STUDENTS) -> int:
        added = 0
        for name, reg_no, cat, exam in samples:
            self.store.append(build_record(name, reg_no, float(cat), float(exam)))
            added += 1
        logger.info("Seeded %d sample records", added)
        return added

    def submit(self, raw_name: str | None, raw_reg_no: str | None, raw_cat: str | None, raw_exam: str | None) -> Result[StudentRecord]:
        submission, errors = validate_submission(raw_name, raw_reg_no, raw_cat, raw_exam)
        if submission is None:
            logger.info("Rejected submission: %s", ", ".join(f"{e.field}={e.kind.value}" for e in errors))
            return Result.failure(errors=errors)

        record = build_record(
            submission.name,
            submission.registration_number,
            submission.cat_score,
            submission.exam_score,
        )
        self.store.append(record)
        logger.info("Student added: %s (%s) total=%.1f grade=%s", record.name, record.registration_number, record.total, record.grade.value)
        return Result.success(record)

    def get_all(self) -> list[StudentRecord]:
        return self.store.to_list()

    def delete_at(self, index: int) -> bool:
        deleted = self.store.delete_at(index)
        if deleted:
            logger.info("Deleted student at position %d", index)
        else:
            logger.info("Delete ignored, no student at position %d", index)
        return deleted

    def delete_record(self, record_id: str) -> bool:
        deleted = self.store.delete_by_id(record_id)
        if deleted:
            logger.info("Deleted student %s", record_id)
        else:
            logger.info("Delete ignored, no student with id %s", record_id)
        return deleted

    def sort_descending(self) -> list[StudentRecord]:
        ordered = statistics.sort_by_total_descending(self.store.to_list())
        self.store.replace_all(ordered)
        logger.info("Sorted %d students by total", len(ordered))
        return ordered

    def average(self) -> Result[float]:
        try:
            return Result.success(statistics.class_average(self.store.to_list()))
        except EmptyCollectionError:
            return Result.failure(ErrorKind.EMPTY_COLLECTION)

    def top_performer(self) -> Result[StudentRecord]:
        try:
            return Result.success(statistics.top_performer(self.store.to_list()))
        except EmptyCollectionError:
            return Result.failure(ErrorKind.EMPTY_COLLECTION)

    def pass_fail_stats(self) -> Result[PassFailStats]:
        try:
            stats = statistics.pass_fail_counts(
                self.store.to_list(),
                complement_fail_pct=self.complement_fail_pct,
            )
        except EmptyCollectionError:
            return Result.failure(ErrorKind.EMPTY_COLLECTION)
        return Result.success(stats)

    def highlight_set(self) -> set[int]:
        return statistics.top_performer_indices(self.store.to_list())
