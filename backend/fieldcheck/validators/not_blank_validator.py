"""NotBlank check: the field must contain at least one non-whitespace character."""

from typing import Any

from fieldcheck.validators.base import BaseConstraintCheck
from fieldcheck.validators.models import Constraint, ConstraintKind


class NotBlankCheck(BaseConstraintCheck):

    @property
    def kind(self) -> ConstraintKind:
        return ConstraintKind.NOT_BLANK

    def is_valid(self, value: Any, constraint: Constraint) -> bool:
        if value is None:
            return False
        return bool(self._require_text(value).strip())
