"""Student record, its constraint declaration, and the stored student entity."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from fieldcheck.validators.engine import ValidationEngine, validation_engine
from fieldcheck.validators.models import Constraint, ConstraintSet, Violation

# Declared once for the StudentDTO type; passed explicitly to the engine
STUDENT_CONSTRAINTS: ConstraintSet = {
    "name": (
        Constraint.not_blank("Name cannot be blank"),
        Constraint.size("Name must be between 2 and 50 characters", min=2, max=50),
    ),
    "age": (
        Constraint.not_null("Age is required"),
    ),
    "email": (
        Constraint.not_blank("Email cannot be blank"),
        Constraint.email("Email must be valid"),
    ),
}


class StudentDTO(BaseModel):
    """Incoming student data.

    Fields are optional at the type level so that missing or malformed input can
    be represented and then reported by the validation engine.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    age: Optional[int] = None
    email: Optional[str] = None

    def validate_constraints(self, engine: Optional[ValidationEngine] = None) -> set[Violation]:
        """Validate this record against STUDENT_CONSTRAINTS."""
        return (engine or validation_engine).validate(self, STUDENT_CONSTRAINTS)


class Student(BaseModel):
    """Stored student. ``id`` is assigned by the storage layer."""

    id: Optional[int] = None
    name: Optional[str] = None

    @classmethod
    def from_dto(cls, dto: StudentDTO) -> "Student":
        """Build an unsaved entity from incoming data."""
        return cls(name=dto.name)
