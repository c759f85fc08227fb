"""Field Validator - declarative, deterministic validation of record fields.

Usage:
    from fieldcheck.validators import validation_engine

    violations = validation_engine.validate(record, constraints)
    if violations:
        # Reject the record with each violation's message
"""

from fieldcheck.validators.engine import ValidationEngine, validation_engine
from fieldcheck.validators.models import (
    Constraint,
    ConstraintKind,
    ConstraintSet,
    ValidationReport,
    Violation,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "Constraint",
    "ConstraintKind",
    "ConstraintSet",
    "ValidationReport",
    "Violation",
]
