from fieldcheck.models.student import STUDENT_CONSTRAINTS, Student, StudentDTO

__all__ = ["STUDENT_CONSTRAINTS", "Student", "StudentDTO"]
