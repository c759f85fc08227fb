"""Validation models: constraint kinds, constraint declarations, violations and reports.

All validation is deterministic: same record + same constraints -> same violations.
"""

from enum import Enum
from typing import Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fieldcheck.errors import ConstraintDefinitionError

# Upper bound used when a size constraint declares no maximum
MAX_SIZE = 2**31 - 1


class ConstraintKind(str, Enum):
    """Built-in constraint kinds."""

    NOT_NULL = "not_null"    # Value must be present
    NOT_BLANK = "not_blank"  # Present and at least one non-whitespace character
    SIZE = "size"            # Length within [min, max]; absent values pass
    EMAIL = "email"          # Shaped like an email address; absent/empty values pass


class Constraint(BaseModel):
    """A rule bound to one field, with a fixed failure message."""

    model_config = ConfigDict(frozen=True)

    kind: ConstraintKind
    message: str
    min: int = 0
    max: int = MAX_SIZE

    @model_validator(mode="after")
    def _check_bounds(self) -> "Constraint":
        if self.kind == ConstraintKind.SIZE:
            if self.min < 0 or self.max < 0:
                raise ConstraintDefinitionError(
                    f"Size bounds must be non-negative (min={self.min}, max={self.max})"
                )
            if self.max < self.min:
                raise ConstraintDefinitionError(
                    f"Size max ({self.max}) is lower than min ({self.min})"
                )
        return self

    # ── Factories ──

    @classmethod
    def not_null(cls, message: str) -> "Constraint":
        return cls(kind=ConstraintKind.NOT_NULL, message=message)

    @classmethod
    def not_blank(cls, message: str) -> "Constraint":
        return cls(kind=ConstraintKind.NOT_BLANK, message=message)

    @classmethod
    def size(cls, message: str, min: int = 0, max: int = MAX_SIZE) -> "Constraint":
        return cls(kind=ConstraintKind.SIZE, message=message, min=min, max=max)

    @classmethod
    def email(cls, message: str) -> "Constraint":
        return cls(kind=ConstraintKind.EMAIL, message=message)


# Field name -> ordered constraints for that field
ConstraintSet = Mapping[str, Sequence[Constraint]]


class Violation(BaseModel):
    """A single failed constraint for one field.

    Identity is the (field, message) pair: two constraints on one field that
    share a message are reported once. ``constraint`` records the kind of the
    first constraint that produced it.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    constraint: ConstraintKind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Violation):
            return NotImplemented
        return (self.field, self.message) == (other.field, other.message)

    def __hash__(self) -> int:
        return hash((self.field, self.message))

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationReport(BaseModel):
    """Summary of a validation run."""

    valid: bool = Field(description="True if no constraint was violated")
    violation_count: int = 0
    by_field: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Violation messages grouped by field, sorted",
    )
    violations: list[Violation] = Field(default_factory=list)

    @classmethod
    def build(cls, violations: Iterable[Violation]) -> "ValidationReport":
        """Build a report from violations; ordering is by field, then message."""
        ordered = sorted(set(violations), key=lambda v: (v.field, v.message))

        by_field: dict[str, list[str]] = {}
        for violation in ordered:
            by_field.setdefault(violation.field, []).append(violation.message)

        return cls(
            valid=not ordered,
            violation_count=len(ordered),
            by_field=by_field,
            violations=ordered,
        )

    def messages(self) -> set[str]:
        return {v.message for v in self.violations}
