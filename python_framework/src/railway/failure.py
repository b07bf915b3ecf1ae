"""
What travels on the failure track.

Adapters produce a FailureDescription (ErrorCode + message + the exception
that caused it). Domain code may instead put its own tagged error values on
the track; anything with a `code` enum member and a `message` satisfies
Describable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Optional, Protocol, runtime_checkable


@unique
class ErrorCode(Enum):
    """Error codes for infrastructure failures raised at adapter boundaries."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input that cannot be turned into text (bad encoding)."""

    NOT_FOUND = "NOT_FOUND"
    """The requested file does not exist."""

    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """I/O or decoding failure, or an exception escaping an execution context."""


@runtime_checkable
class Describable(Protocol):
    @property
    def code(self) -> Enum: ...

    @property
    def message(self) -> str: ...


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    An infrastructure failure: code, message, and the exception behind it.

    Two descriptions are equal when code and message match; the exception
    is kept for diagnostics only.

    >>> str(FailureDescription(ErrorCode.NOT_FOUND, "ads.txt file not found: /srv/ads.txt"))
    'NOT_FOUND: ads.txt file not found: /srv/ads.txt'
    """

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
