"""Base check: abstract class implementing the Strategy Pattern.

Each constraint kind has one check. New kinds are added by registering a
check with the engine, without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from fieldcheck.errors import ConstraintDefinitionError
from fieldcheck.validators.models import Constraint, ConstraintKind, Violation


class BaseConstraintCheck(ABC):
    """Abstract base for all constraint checks.

    Contract:
        - is_valid() is deterministic and side-effect free
        - is_valid() returns False for a failed constraint, never raises for bad data
        - is_valid() raises ConstraintDefinitionError if the constraint cannot
          apply to the value's type at all
    """

    @property
    @abstractmethod
    def kind(self) -> ConstraintKind:
        """Constraint kind this check implements."""
        ...

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    @abstractmethod
    def is_valid(self, value: Any, constraint: Constraint) -> bool:
        """Return True if ``value`` satisfies ``constraint``."""
        ...

    def check(self, field: str, value: Any, constraint: Constraint) -> Optional[Violation]:
        """Evaluate the constraint and return a Violation, or None if it holds."""
        if self.is_valid(value, constraint):
            return None
        return self._violation(field, constraint)

    # ── Helper Methods ──

    def _violation(self, field: str, constraint: Constraint) -> Violation:
        return Violation(field=field, message=constraint.message, constraint=constraint.kind)

    def _require_text(self, value: Any) -> str:
        """Reject non-string values: the constraint was declared on the wrong field."""
        if not isinstance(value, str):
            raise ConstraintDefinitionError(
                f"{self.name} applies to text, got {type(value).__name__}"
            )
        return value
