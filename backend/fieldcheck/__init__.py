"""fieldcheck - declarative field validation for student records."""

__version__ = "1.0.0"
