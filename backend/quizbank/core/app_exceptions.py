"""Application-specific exceptions for consistent error handling."""

from typing import Any

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Application error with standardized error code."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | list[Any] | None = None,
    ):
        """Initialize application error."""
        super().__init__(
            status_code=status_code,
            detail={
                "code": code,
                "message": message,
                "details": details,
            },
        )
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class NotFoundOrUnauthorizedError(AppError):
    """Entity is absent or the caller is not its transitive owner.

    The two cases are deliberately indistinguishable so that non-owners
    cannot probe for the existence of other users' data.
    """

    def __init__(self, message: str = "Resource not found", details: Any = None):
        super().__init__(status.HTTP_404_NOT_FOUND, "NOT_FOUND", message, details)


class ValidationError(AppError):
    """Missing or malformed input."""

    def __init__(self, message: str = "Invalid request data", details: Any = None):
        super().__init__(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", message, details)


class ConflictError(AppError):
    """Unique value already taken (username, email)."""

    def __init__(self, message: str = "Resource already exists", details: Any = None):
        super().__init__(status.HTTP_409_CONFLICT, "CONFLICT", message, details)


class AuthenticationError(AppError):
    """Bad credentials or missing/invalid token."""

    def __init__(self, message: str = "Authentication failed", details: Any = None):
        super().__init__(status.HTTP_401_UNAUTHORIZED, "UNAUTHORIZED", message, details)


class TransactionAbortedError(AppError):
    """A multi-statement write failed and was rolled back."""

    def __init__(self, message: str = "Transaction aborted", details: Any = None):
        super().__init__(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "TRANSACTION_ABORTED", message, details
        )


class AIProviderError(AppError):
    """Upstream AI provider or transport failure."""

    def __init__(self, message: str = "AI request failed", details: Any = None):
        super().__init__(status.HTTP_502_BAD_GATEWAY, "AI_PROVIDER_ERROR", message, details)
