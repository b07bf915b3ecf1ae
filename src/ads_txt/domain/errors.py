"""
Parse errors — one tagged value type per way a line can be malformed.

Errors are data, not exceptions: parsers return them on the failure track of
a railway Result, and the lenient document parser collects them in a list.
Each variant keeps the offending token or line verbatim and renders its
human-readable message on demand, so callers can inspect the structure
(`err.code`, `err.line`) or just print `str(err)`.

    InvalidAccountRelation ─┐
    InvalidDataRecord ──────┼─→ InvalidLine  (record attempt failed, then variable attempt failed)
    InvalidVariable ────────┘
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import ClassVar


@unique
class ParseErrorKind(Enum):
    """Error codes for the ads.txt failure track."""

    INVALID_ACCOUNT_RELATION = "INVALID_ACCOUNT_RELATION"
    """Relation token is neither DIRECT nor RESELLER (case-insensitive)."""

    INVALID_DATA_RECORD = "INVALID_DATA_RECORD"
    """Comma-split field count other than 3 or 4."""

    INVALID_VARIABLE = "INVALID_VARIABLE"
    """Equals-split field count other than 2."""

    INVALID_LINE = "INVALID_LINE"
    """Line matched neither the record nor the variable grammar."""


class ParseError:
    """Common base for every ads.txt parse error."""

    __slots__ = ()

    code: ClassVar[ParseErrorKind]

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class InvalidAccountRelation(ParseError):
    """`token` is the raw relation field, untrimmed and in its original case."""

    token: str

    code: ClassVar[ParseErrorKind] = ParseErrorKind.INVALID_ACCOUNT_RELATION

    @property
    def message(self) -> str:
        return f"Invalid account relation: {self.token}"


@dataclass(frozen=True, slots=True)
class InvalidDataRecord(ParseError):
    line: str

    code: ClassVar[ParseErrorKind] = ParseErrorKind.INVALID_DATA_RECORD

    @property
    def message(self) -> str:
        return f"Invalid data record: {self.line}"


@dataclass(frozen=True, slots=True)
class InvalidVariable(ParseError):
    line: str

    code: ClassVar[ParseErrorKind] = ParseErrorKind.INVALID_VARIABLE

    @property
    def message(self) -> str:
        return f"Invalid variable record: {self.line}"


@dataclass(frozen=True, slots=True)
class InvalidLine(ParseError):
    """
    A line that is neither a data record nor a variable.

    `line` is the text after leading whitespace was stripped. The two
    underlying failures are kept so a report can explain *why* each grammar
    rejected the line; they do not appear in the message.
    """

    line: str
    record_error: InvalidDataRecord | InvalidAccountRelation | None = None
    variable_error: InvalidVariable | None = None

    code: ClassVar[ParseErrorKind] = ParseErrorKind.INVALID_LINE

    @property
    def message(self) -> str:
        return f"Invalid ads.txt line: {self.line}"
