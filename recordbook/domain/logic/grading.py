from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Iterable, Union

Mark = Union[int, float]

MARK_COUNT = 5
MAX_MARK = 100
MAX_TOTAL = MARK_COUNT * MAX_MARK


class Division(str, Enum):
    FIRST = "First Division"
    SECOND = "Second Division"
    THIRD = "Third Division"
    FAIL = "Fail"


@dataclass(frozen=True)
class GradeResult:
    percentage: float
    division: Division


DIVISION_BANDS: list[tuple[int, Division]] = [
    (60, Division.FIRST),
    (45, Division.SECOND),
    (33, Division.THIRD),
]


def round_half_up(value: Decimal, places: int = 2) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def calc_percentage(marks: Iterable[Mark]) -> float:
    total = sum(Decimal(str(m)) for m in marks)
    return round_half_up(total / MAX_TOTAL * 100)


def division_from_percentage(percentage: float) -> Division:
    for threshold, division in DIVISION_BANDS:
        if percentage >= threshold:
            return division
    return Division.FAIL


def compute(marks: Iterable[Mark]) -> GradeResult:
    # division is read from the rounded percentage
    percentage = calc_percentage(marks)
    return GradeResult(percentage=percentage, division=division_from_percentage(percentage))


def format_percentage(percentage: float) -> str:
    return f"{percentage:.2f}"
