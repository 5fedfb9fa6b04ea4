from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from recordbook.domain.logic.grading import MARK_COUNT, compute
from recordbook.domain.logic.records import DivisionFilter, FilteredRow, RecordStore
from recordbook.domain.logic.validation import ValidationError, parse_mark, validate
from recordbook.domain.models.entities import ALL_DIVISIONS, GradeResult, StudentRecord

logger = logging.getLogger(__name__)

EMPTY_MARKS: tuple[str, ...] = ("",) * MARK_COUNT


@dataclass(frozen=True)
class FormState:
    name: str = ""
    age: str = ""
    marks: tuple[str, ...] = EMPTY_MARKS
    edit_index: Optional[int] = None
    error: str = ""

    @property
    def is_editing(self) -> bool:
        return self.edit_index is not None


@dataclass(frozen=True)
class AppState:
    records: RecordStore = field(default_factory=RecordStore)
    form: FormState = field(default_factory=FormState)
    filter_name: str = ""
    filter_division: DivisionFilter = ALL_DIVISIONS


def _with_form(state: AppState, **changes) -> AppState:
    return replace(state, form=replace(state.form, **changes))


def set_name(state: AppState, value: str) -> AppState:
    return _with_form(state, name=value)


def set_age(state: AppState, value: str) -> AppState:
    return _with_form(state, age=value)


def set_mark(state: AppState, index: int, value: str) -> AppState:
    marks = list(state.form.marks)
    marks[index] = value
    return _with_form(state, marks=tuple(marks))


def set_filter_name(state: AppState, value: str) -> AppState:
    return replace(state, filter_name=value)


def set_filter_division(state: AppState, value: DivisionFilter) -> AppState:
    return replace(state, filter_division=value)


def submit(state: AppState) -> AppState:
    """Validate the form and append the record, or replace it when editing."""
    form = state.form
    try:
        validated = validate(form.name, form.age, form.marks)
    except ValidationError as exc:
        return _with_form(state, error=str(exc))

    record = StudentRecord.from_input(validated)
    if form.is_editing:
        records = state.records.replace_at(form.edit_index, record)
        logger.info("Updated record %d: %s (%s)", form.edit_index, record.name, record.division.value)
    else:
        records = state.records.add(record)
        logger.info("Added record %d: %s (%s)", len(records) - 1, record.name, record.division.value)
    return replace(state, records=records, form=FormState())


def edit(state: AppState, index: int) -> AppState:
    record = state.records[index]
    form = FormState(
        name=record.name,
        age=str(record.age),
        marks=tuple(str(m) for m in record.marks),
        edit_index=index,
    )
    return replace(state, form=form)


def clear(state: AppState) -> AppState:
    return replace(state, form=FormState())


def delete(state: AppState, index: int) -> AppState:
    records = state.records.remove_at(index)
    form = state.form
    if form.edit_index == index:
        form = FormState()
    elif form.edit_index is not None and form.edit_index > index:
        form = replace(form, edit_index=form.edit_index - 1)
    logger.info("Deleted record %d", index)
    return replace(state, records=records, form=form)


def preview(form: FormState) -> Optional[GradeResult]:
    marks = [parse_mark(raw) for raw in form.marks]
    if any(mark is None for mark in marks):
        return None
    return compute(marks)


def visible_rows(state: AppState) -> list[FilteredRow]:
    return state.records.filter(state.filter_name, state.filter_division)


def submit_label(form: FormState) -> str:
    return "Update" if form.is_editing else "Submit"
