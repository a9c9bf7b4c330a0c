"""Exception hierarchy for building credential requests.

Builder methods raise these synchronously at the call site. Nothing is
retried or deferred to ``build()``.
"""

from typing import Optional

from src.credhub.config import ErrorCode


class CredHubError(Exception):
    """Base exception for credential request errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.field = field


class InvalidArgumentError(CredHubError, ValueError):
    """Raised when a required builder argument is missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT, field)


class InvalidStateError(CredHubError, RuntimeError):
    """Raised when a builder call conflicts with state already set."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.INVALID_STATE)
