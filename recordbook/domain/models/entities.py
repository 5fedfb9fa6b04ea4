from __future__ import annotations

from dataclasses import dataclass, field

from recordbook.domain.logic.grading import Division, GradeResult, Mark, compute

__all__ = ["ALL_DIVISIONS", "Division", "GradeResult", "Mark", "StudentRecord", "ValidatedInput"]

ALL_DIVISIONS = "All"


@dataclass(frozen=True)
class ValidatedInput:
    name: str
    age: int
    marks: tuple[Mark, ...]


@dataclass(frozen=True)
class StudentRecord:
    """
    One submitted student. percentage and division are derived from marks
    on construction and cannot be passed in.
    """

    name: str
    age: int
    marks: tuple[Mark, ...]
    percentage: float = field(init=False)
    division: Division = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "marks", tuple(self.marks))
        result = compute(self.marks)
        object.__setattr__(self, "percentage", result.percentage)
        object.__setattr__(self, "division", result.division)

    @classmethod
    def from_input(cls, validated: ValidatedInput) -> "StudentRecord":
        return cls(name=validated.name, age=validated.age, marks=validated.marks)
