"""NotNull check: the field must be present."""

from typing import Any

from fieldcheck.validators.base import BaseConstraintCheck
from fieldcheck.validators.models import Constraint, ConstraintKind


class NotNullCheck(BaseConstraintCheck):
    """Fails for absent values (``None``). Any present value passes, including 0 and ""."""

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.NOT_NULL

    def is_valid(self, value: Any, constraint: Constraint) -> bool:
        return value is not None
