"""Error codes and the exception raised for them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes reported by the library."""

    NONE = 0
    UNKNOWN = 1
    INVALID_ARGUMENT = 2
    INVALID_STATE = 3
    NOT_IMPLEMENTED = 4
    NOT_SUPPORTED = 5
    OUT_OF_MEMORY = 6
    OUT_OF_RANGE = 7
    PERMISSION_DENIED = 8
    RESOURCE_BUSY = 9
    RESOURCE_EXHAUSTED = 10
    RESOURCE_UNAVAILABLE = 11
    TIMED_OUT = 12
    TOO_MANY_REQUESTS = 13
    UNAVAILABLE = 14
    UNAUTHORIZED = 15
    UNSUPPORTED_MEDIA_TYPE = 16
    ALREADY_EXISTS = 17
    NOT_FOUND = 18
    NOT_INITIALIZED = 19
    ALREADY_INITIALIZED = 20
    ENUM_SCREEN_SOURCE_INFO_FAILED = 21
    COUNT = 22


class TraaError(Exception):
    """An operation failed with one of the library's error codes."""

    def __init__(self, code: ErrorCode | int, message: str = "") -> None:
        self.code = ErrorCode(code)
        self.message = message
        super().__init__(f"{self.code.name}: {message}" if message else self.code.name)