"""
Domain-specific errors for the users bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserValidationError(UserDomainError):
    """Raised when input violates a business rule."""


class UnderageUserError(UserValidationError):
    """Raised when a new user is younger than the configured minimum age."""

    def __init__(self, min_age: int) -> None:
        super().__init__(f"User must be at least {min_age} years old.")
        self.min_age = min_age


class InvalidFieldError(UserValidationError):
    """Raised when a partial update names a field that cannot be patched."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid field: {field}")
        self.field = field


class InvalidFieldValueError(UserValidationError):
    """Raised when a partial update carries a value of the wrong type."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid value for field: {field}")
        self.field = field


class InvalidDateRangeError(UserValidationError):
    """Raised when a search range starts after it ends."""

    def __init__(self) -> None:
        super().__init__("From date must be before To date.")


class UserNotFoundError(UserDomainError):
    """Raised when no user exists with the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found with id: {user_id}")
        self.user_id = user_id


class ConstraintViolationError(UserDomainError):
    """Raised when storage rejects a write on an integrity constraint."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
