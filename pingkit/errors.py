"""Client errors carrying a numeric status code."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Codes that classify a ClientError."""

    NETWORK_EXCEPTION = 0
    DELETE_ACTIVE_USER_EXCEPTION = 1


class ClientError(Exception):
    """An error raised by the user-management client."""

    def __init__(self, status_code: ErrorCode, err: BaseException) -> None:
        self.status_code = status_code
        self.err = err
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"status: {int(self.status_code)}, err: {self.err}"


def network_error(cause: BaseException) -> ClientError:
    """Wrap a transport failure."""
    error = ClientError(ErrorCode.NETWORK_EXCEPTION, cause)
    error.__cause__ = cause
    return error


def attempt_delete_active_user_error(user: str) -> ClientError:
    """Report that active users cannot be deleted."""
    return ClientError(
        ErrorCode.DELETE_ACTIVE_USER_EXCEPTION,
        Exception(f"deleting active user {user} is not supported"),
    )