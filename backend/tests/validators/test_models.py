"""Tests for constraint, violation and report models."""

import pydantic
import pytest

from fieldcheck.errors import ConstraintDefinitionError
from fieldcheck.validators import Constraint, ConstraintKind, ValidationReport, Violation
from fieldcheck.validators.models import MAX_SIZE


class TestConstraint:
    def test_factories_set_kind(self):
        assert Constraint.not_null("m").kind == ConstraintKind.NOT_NULL
        assert Constraint.not_blank("m").kind == ConstraintKind.NOT_BLANK
        assert Constraint.email("m").kind == ConstraintKind.EMAIL

    def test_size_defaults(self):
        constraint = Constraint.size("m")
        assert (constraint.min, constraint.max) == (0, MAX_SIZE)

    def test_size_max_below_min(self):
        with pytest.raises(ConstraintDefinitionError):
            Constraint.size("m", min=5, max=2)

    def test_size_negative_bound(self):
        with pytest.raises(ConstraintDefinitionError):
            Constraint(kind=ConstraintKind.SIZE, message="m", min=-1)

    def test_constraints_are_immutable(self):
        constraint = Constraint.not_null("m")
        with pytest.raises(pydantic.ValidationError):
            constraint.message = "changed"

    def test_unknown_kind_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Constraint(kind="pattern", message="m")


class TestViolation:
    def test_equal_violations_collapse_in_a_set(self):
        a = Violation(field="age", message="Age is required", constraint=ConstraintKind.NOT_NULL)
        b = Violation(field="age", message="Age is required", constraint=ConstraintKind.NOT_NULL)
        assert a == b
        assert len({a, b}) == 1

    def test_identity_is_field_and_message(self):
        blank = Violation(field="name", message="Name is invalid", constraint=ConstraintKind.NOT_BLANK)
        size = Violation(field="name", message="Name is invalid", constraint=ConstraintKind.SIZE)
        other_field = Violation(field="email", message="Name is invalid", constraint=ConstraintKind.SIZE)
        assert blank == size
        assert hash(blank) == hash(size)
        assert len({blank, size, other_field}) == 2

    def test_str(self):
        violation = Violation(field="age", message="Age is required", constraint=ConstraintKind.NOT_NULL)
        assert str(violation) == "age: Age is required"


class TestValidationReport:
    def test_empty(self):
        report = ValidationReport.build([])
        assert report.valid
        assert report.violation_count == 0
        assert report.messages() == set()

    def test_order_is_by_field_then_message(self):
        violations = [
            Violation(field="name", message="b", constraint=ConstraintKind.SIZE),
            Violation(field="age", message="z", constraint=ConstraintKind.NOT_NULL),
            Violation(field="name", message="a", constraint=ConstraintKind.NOT_BLANK),
            Violation(field="name", message="a", constraint=ConstraintKind.SIZE),
        ]

        report = ValidationReport.build(violations)

        assert [(v.field, v.message) for v in report.violations] == [("age", "z"), ("name", "a"), ("name", "b")]

    def test_duplicates_are_reported_once(self):
        violation = Violation(field="name", message="Name cannot be blank", constraint=ConstraintKind.NOT_BLANK)
        report = ValidationReport.build([violation, violation])
        assert report.violation_count == 1
        assert report.by_field == {"name": ["Name cannot be blank"]}
