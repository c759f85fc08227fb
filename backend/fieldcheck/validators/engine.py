"""Validation Engine: evaluates declared constraints against a record.

This is the main entry point for field validation. Every constraint of every
field is evaluated; there is no short-circuiting, so a field can contribute
several violations.

Usage:
    engine = ValidationEngine()
    violations = engine.validate(record, STUDENT_CONSTRAINTS)
    if violations:
        # Reject the record, report each violation's message
"""

import time
from typing import Any, Mapping, Optional, Sequence, Union

import structlog
from pydantic import BaseModel

from fieldcheck.errors import UnknownConstraintError
from fieldcheck.validators.base import BaseConstraintCheck
from fieldcheck.validators.models import (
    Constraint,
    ConstraintKind,
    ConstraintSet,
    ValidationReport,
    Violation,
)

# Import all checks
from fieldcheck.validators.not_null_validator import NotNullCheck
from fieldcheck.validators.not_blank_validator import NotBlankCheck
from fieldcheck.validators.size_validator import SizeCheck
from fieldcheck.validators.email_validator import EmailCheck

logger = structlog.get_logger()

Record = Union[Mapping[str, Any], BaseModel]


class ValidationEngine:
    """Dispatches each declared constraint to the check registered for its kind.

    Design principles:
        - Deterministic: same record + constraints -> same violation set
        - Side-effect free: records and constraint sets are never mutated
        - Extensible: register checks without modifying the engine
    """

    def __init__(self, checks: Optional[list[BaseConstraintCheck]] = None):
        """Initialize with the built-in checks or a custom list.

        Args:
            checks: Optional list of checks. If None, uses all built-ins.
        """
        self._checks: dict[ConstraintKind, BaseConstraintCheck] = {}
        for check in checks if checks is not None else self._default_checks():
            self._checks[check.kind] = check

    @staticmethod
    def _default_checks() -> list[BaseConstraintCheck]:
        return [
            NotNullCheck(),
            NotBlankCheck(),
            SizeCheck(),
            EmailCheck(),
        ]

    @property
    def kinds(self) -> set[ConstraintKind]:
        """Constraint kinds this engine can evaluate."""
        return set(self._checks)

    def validate(self, record: Record, constraints: ConstraintSet) -> set[Violation]:
        """Evaluate every constraint against the record.

        Args:
            record: Mapping of field name to value, or a pydantic model
            constraints: Field name -> ordered constraints

        Returns:
            Set of Violations (empty if the record is valid)
        """
        start_time = time.perf_counter()
        values = self._as_mapping(record)

        violations: set[Violation] = set()
        for field, field_constraints in constraints.items():
            violations |= self._evaluate(field, values.get(field), field_constraints)

        duration = (time.perf_counter() - start_time) * 1000
        logger.info(
            "validation_complete",
            fields=len(constraints),
            violations=len(violations),
            duration_ms=round(duration, 3),
        )
        return violations

    def validate_property(
        self,
        record: Record,
        constraints: ConstraintSet,
        field: str,
    ) -> set[Violation]:
        """Evaluate only the constraints declared for one field of the record."""
        values = self._as_mapping(record)
        return self._evaluate(field, values.get(field), constraints.get(field, ()))

    def validate_value(self, field: str, value: Any, constraints: ConstraintSet) -> set[Violation]:
        """Evaluate a candidate value for a field without building a record."""
        return self._evaluate(field, value, constraints.get(field, ()))

    def report(self, record: Record, constraints: ConstraintSet) -> ValidationReport:
        """Validate and wrap the result in a ValidationReport."""
        return ValidationReport.build(self.validate(record, constraints))

    def add_check(self, check: BaseConstraintCheck) -> None:
        """Register a check, replacing any existing check for the same kind."""
        self._checks[check.kind] = check
        logger.debug("check_registered", check=check.name, kind=check.kind.value)

    def remove_check(self, kind: ConstraintKind) -> None:
        """Unregister the check for a constraint kind (no-op if none is registered)."""
        removed = self._checks.pop(kind, None)
        if removed is not None:
            logger.debug("check_removed", check=removed.name, kind=kind.value)

    # ── Internals ──

    def _evaluate(
        self,
        field: str,
        value: Any,
        field_constraints: Sequence[Constraint],
    ) -> set[Violation]:
        violations: set[Violation] = set()
        for constraint in field_constraints:
            violation = self._check_for(constraint).check(field, value, constraint)
            if violation is not None:
                violations.add(violation)
        return violations

    def _check_for(self, constraint: Constraint) -> BaseConstraintCheck:
        try:
            return self._checks[constraint.kind]
        except KeyError:
            raise UnknownConstraintError(constraint.kind.value) from None

    @staticmethod
    def _as_mapping(record: Record) -> Mapping[str, Any]:
        if isinstance(record, BaseModel):
            return record.model_dump()
        if isinstance(record, Mapping):
            return record
        raise TypeError(f"Cannot validate record of type {type(record).__name__}")


# Module-level singleton
validation_engine = ValidationEngine()
