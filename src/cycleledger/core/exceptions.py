"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class ConfigurationError(AppError):
    """Raised when an account or instrument carries an unusable setting."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


class InvariantViolationError(AppError):
    """Raised when a computed result breaks a ledger invariant."""

    def __init__(self, message: str):
        super().__init__(message, code="INVARIANT_VIOLATION")
