"""
Domain errors raised by the user service.

Every error carries a user-facing message. The API layer renders all of
them as HTTP 400 with the message as a plain-text body.
"""


class UserError(Exception):
    """Base class for user lifecycle failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(UserError):
    """Input failed field-level validation, or passwords do not match"""

    @classmethod
    def from_violations(cls, violations: list[str]) -> "ValidationError":
        """Join every violation into one message: "Validation errors: a; b; " """
        return cls("Validation errors: " + "".join(f"{v}; " for v in violations))


class ConflictError(UserError):
    """Duplicate email, or new password equal to the current one"""


class NotFoundError(UserError):
    """No user with the requested id"""
