"""Shared fixtures."""

import pytest
import structlog

from fieldcheck.models import StudentDTO
from fieldcheck.validators import ValidationEngine


@pytest.fixture
def engine():
    """Fresh engine with the built-in checks."""
    return ValidationEngine()


@pytest.fixture
def valid_student():
    return StudentDTO(name="John Doe", age=20, email="johndoe@mail.com")


@pytest.fixture
def invalid_student():
    return StudentDTO(name="", age=None, email="invalid-email")


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
