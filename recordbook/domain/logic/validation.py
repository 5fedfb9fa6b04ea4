from __future__ import annotations

import logging
import math
import re
from typing import Optional, Sequence

from recordbook.domain.logic.grading import MARK_COUNT, MAX_MARK
from recordbook.domain.models.entities import Mark, ValidatedInput

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[A-Za-z ]+$")
NUMBER_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
MIN_AGE = 1
MAX_AGE = 100


class ValidationError(Exception):
    message = "Invalid input."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)

    def __str__(self) -> str:
        return self.args[0]


class InvalidName(ValidationError):
    message = "Name should only contain letters and spaces."


class InvalidAge(ValidationError):
    message = "Age should be a positive integer between 1 and 100."


class InvalidMarks(ValidationError):
    message = "All marks must be between 0 and 100."


def parse_number(raw: object) -> Optional[float]:
    """Best-effort numeric parse. Returns None for blank, non-numeric, NaN or infinite input."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip() if raw is not None else ""
        # blank text is unparsable, never coerced to 0
        if not NUMBER_PATTERN.match(text):
            return None
        value = float(text)
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _as_mark(value: float) -> Mark:
    return int(value) if value.is_integer() else value


def parse_mark(raw: object) -> Optional[Mark]:
    value = parse_number(raw)
    if value is None or not 0 <= value <= MAX_MARK:
        return None
    return _as_mark(value)


def validate_name(raw_name: object) -> str:
    name = str(raw_name or "").strip()
    if not NAME_PATTERN.match(name):
        raise InvalidName()
    return name


def validate_age(raw_age: object) -> int:
    value = parse_number(raw_age)
    if value is None or not value.is_integer() or not MIN_AGE <= value <= MAX_AGE:
        raise InvalidAge()
    return int(value)


def validate_marks(raw_marks: Sequence[object]) -> tuple[Mark, ...]:
    if len(raw_marks) != MARK_COUNT:
        raise InvalidMarks()
    marks = [parse_mark(raw) for raw in raw_marks]
    if any(mark is None for mark in marks):
        raise InvalidMarks()
    return tuple(marks)


def validate(raw_name: object, raw_age: object, raw_marks: Sequence[object]) -> ValidatedInput:
    """
    Check a candidate record. Rules run name, age, marks; the first failure is raised
    as the matching ValidationError subclass.
    """
    try:
        name = validate_name(raw_name)
        age = validate_age(raw_age)
        marks = validate_marks(raw_marks)
    except ValidationError as exc:
        logger.debug("Rejected submission (%s): %s", type(exc).__name__, exc)
        raise
    return ValidatedInput(name=name, age=age, marks=marks)
