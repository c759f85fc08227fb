"""Size check: the field's length must fall within [min, max], both inclusive."""

from collections.abc import Sized
from typing import Any

from fieldcheck.errors import ConstraintDefinitionError
from fieldcheck.validators.base import BaseConstraintCheck
from fieldcheck.validators.models import Constraint, ConstraintKind


class SizeCheck(BaseConstraintCheck):
    """Applies to strings and collections. Absent values pass; pair with NotNull/NotBlank."""

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.SIZE

    def is_valid(self, value: Any, constraint: Constraint) -> bool:
        if value is None:
            return True
        if not isinstance(value, Sized):
            raise ConstraintDefinitionError(
                f"{self.name} applies to sized values, got {type(value).__name__}"
            )
        return constraint.min <= len(value) <= constraint.max
