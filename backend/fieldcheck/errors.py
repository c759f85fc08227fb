"""Exception types.

Failed constraints are reported as ``Violation`` data, never raised. These
exceptions signal programming errors: a badly declared constraint, or a
constraint kind the engine has no check for.
"""


class FieldCheckError(Exception):
    """Base class for all fieldcheck errors."""


class ConstraintDefinitionError(FieldCheckError):
    """A constraint was declared with invalid parameters or applied to an unsupported type."""


class UnknownConstraintError(FieldCheckError):
    """No check is registered for a constraint kind."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"No check registered for constraint kind '{kind}'")
