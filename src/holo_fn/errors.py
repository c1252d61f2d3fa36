"""Standardized errors for holo-fn.

Failures carried by containers are plain data. The types here cover the
two places exceptions do appear: contract misuse (unwrapping the wrong
variant) and exceptions caught by the adapters.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from typing import Self

from pydantic import BaseModel


class ErrorCode(StrEnum):
    """Standard error codes."""
    UNWRAP_FAILED = "UNWRAP_FAILED"
    CAUGHT_EXCEPTION = "CAUGHT_EXCEPTION"
    UNKNOWN = "UNKNOWN"


class HoloError(BaseModel):
    """Structured error payload.

    Usable directly as an ``on_error`` handler for the adapters:

        >>> from holo_fn.result import from_throwable
        >>> from_throwable(lambda: 1 / 0, HoloError.from_exception).unwrap_err().exc_type
        'ZeroDivisionError'
    """

    model_config = {"frozen": True}

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    exc_type: str | None = None
    details: str | None = None

    @classmethod
    def create(cls, message: str, code: ErrorCode = ErrorCode.UNKNOWN, *, details: str | None = None) -> Self:
        """Factory method for construction."""
        return cls(message=message, code=code, details=details)

    @classmethod
    def from_exception(cls, exc: BaseException, context: str = "", *, include_trace: bool = False) -> Self:
        """Build from a caught exception."""
        return cls(
            message=f"{context}: {exc}" if context else str(exc),
            code=ErrorCode.CAUGHT_EXCEPTION,
            exc_type=type(exc).__name__,
            details="".join(traceback.format_exception(exc)) if include_trace else None,
        )

    def render(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.exc_type:
            parts.append(f" ({self.exc_type})")
        if self.details:
            parts.append(f"\nDetails:\n{self.details}")
        return "".join(parts)

    __str__ = render


class HoloException(RuntimeError):
    """Exception wrapping a HoloError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: HoloError) -> None:
        self.error = error
        super().__init__(error.message)

    @classmethod
    def create(cls, message: str, code: ErrorCode = ErrorCode.UNKNOWN) -> Self:
        return cls(HoloError(message=message, code=code))


class UnwrapError(HoloException):
    """Raised when a container is unwrapped as the variant it is not."""

    @classmethod
    def wrong_variant(cls, call: str, actual: object) -> Self:
        return cls.create(f"{call} on {actual!r}", ErrorCode.UNWRAP_FAILED)


__all__ = ["ErrorCode", "HoloError", "HoloException", "UnwrapError"]
