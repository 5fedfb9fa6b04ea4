from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Union

from recordbook.domain.models.entities import ALL_DIVISIONS, Division, StudentRecord

logger = logging.getLogger(__name__)

DivisionFilter = Union[Division, str]


class FilteredRow(NamedTuple):
    record: StudentRecord
    index: int


def matches(record: StudentRecord, name_pattern: str, division: DivisionFilter) -> bool:
    name_match = name_pattern.lower() in record.name.lower()
    division_match = division == ALL_DIVISIONS or record.division == division
    return name_match and division_match


def filter_records(
    records: Iterable[StudentRecord],
    name_pattern: str = "",
    division: DivisionFilter = ALL_DIVISIONS,
) -> list[FilteredRow]:
    return [
        FilteredRow(record, index)
        for index, record in enumerate(records)
        if matches(record, name_pattern, division)
    ]


@dataclass(frozen=True)
class RecordStore:
    """
    Ordered, immutable sequence of submitted records.

    add/replace_at/remove_at return a new store and leave this one untouched.
    Indices passed to replace_at and remove_at must be in range; anything else
    raises IndexError.
    """

    records: tuple[StudentRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(self.records)

    def __getitem__(self, index: int) -> StudentRecord:
        return self.records[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.records):
            raise IndexError(f"Record index {index} out of range (size {len(self.records)})")

    def add(self, record: StudentRecord) -> "RecordStore":
        logger.debug("Adding record %r at %d", record.name, len(self.records))
        return RecordStore(self.records + (record,))

    def replace_at(self, index: int, record: StudentRecord) -> "RecordStore":
        self._check_index(index)
        logger.debug("Replacing record %d with %r", index, record.name)
        return RecordStore(self.records[:index] + (record,) + self.records[index + 1 :])

    def remove_at(self, index: int) -> "RecordStore":
        self._check_index(index)
        logger.debug("Removing record %d (%r)", index, self.records[index].name)
        return RecordStore(self.records[:index] + self.records[index + 1 :])

    def filter(self, name_pattern: str = "", division: DivisionFilter = ALL_DIVISIONS) -> list[FilteredRow]:
        return filter_records(self.records, name_pattern, division)
