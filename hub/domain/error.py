"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Form validation error.

    Raised before any network call when caller-side validation fails, and
    for server-side field errors on forms that map them back to inputs.
    """

    def __init__(self, message: str, field_errors: dict[str, str] | None = None):
        self.field_errors = field_errors or {}
        super().__init__(message)


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class ReplyLoadError(DomainError):
    """Raised when the replies of a comment could not be loaded."""

    def __init__(self, comment_id: str, message: str = "Failed to load replies"):
        self.comment_id = comment_id
        super().__init__(message)
