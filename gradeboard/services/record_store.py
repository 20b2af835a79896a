from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from gradeboard.domain.models.entities import StudentRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """Ordered, session-owned collection of student records.

    Insertion order is the default order. The only mutations are append,
    deletion and a wholesale reorder; records themselves are never edited.
    """

    def __init__(self, records: Iterable[StudentRecord] | None = None) -> None:
        self._records: list[StudentRecord] = list(records or [])

    def append(self, record: StudentRecord) -> None:
        self._records.append(record)
        logger.debug("Appended record %s at position %d", record.record_id, len(self._records) - 1)

    def delete_at(self, index: int) -> bool:
        if index < 0 or index >= len(self._records):
            logger.debug("No record at position %d (size %d)", index, len(self._records))
            return False
        removed = self._records.pop(index)
        logger.debug("Deleted record %s from position %d", removed.record_id, index)
        return True

    def delete_by_id(self, record_id: str) -> bool:
        idx = self.index_of(record_id)
        if idx is None:
            logger.debug("No record with id %s", record_id)
            return False
        return self.delete_at(idx)

    def index_of(self, record_id: str) -> int | None:
        for idx, record in enumerate(self._records):
            if record.record_id == record_id:
                return idx
        return None

    def replace_all(self, new_order: Iterable[StudentRecord]) -> None:
        reordered = list(new_order)
        if Counter(r.record_id for r in reordered) != Counter(r.record_id for r in self._records):
            raise ValueError("replace_all expects a reordering of the records already in the store")
        self._records = reordered

    def is_empty(self) -> bool:
        return not self._records

    def size(self) -> int:
        return len(self._records)

    def to_list(self) -> list[StudentRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)
