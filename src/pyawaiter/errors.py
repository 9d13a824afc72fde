from typing import Any


class AwaiterError(Exception):
    """Base class for awaiter errors."""

    def __init__(self, message: str | None = None) -> None:
        self._message = message

        args = (message,) if message else ()
        super().__init__(*args)

    @property
    def message(self) -> str | None:
        return self._message


class OperationCancelledError(AwaiterError):
    """Raised when a wait is aborted by a cancellation request."""

    def __init__(self, token: Any, reason: Any = None) -> None:
        message = "Operation was cancelled."
        if reason is not None:
            message = f"Operation was cancelled: {reason}."

        super().__init__(message)
        self._token = token
        self._reason = reason

    @property
    def token(self) -> Any:
        return self._token

    @property
    def reason(self) -> Any:
        return self._reason


class InvalidTimeoutError(AwaiterError):
    """Raised when a timeout is invalid."""

    def __init__(self, timeout: Any) -> None:
        super().__init__(f"Invalid timeout: {timeout}.")
        self._timeout = timeout

    @property
    def timeout(self) -> Any:
        return self._timeout
