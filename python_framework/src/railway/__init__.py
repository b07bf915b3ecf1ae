"""
Railway-Oriented Programming (ROP) Framework for Python.

Explicit, composable, functional error handling — no exceptions in business logic.

    from railway import Result, ErrorCode

    def parse_port(text: str) -> Result[int]:
        if not text.isdigit():
            return Result.failure(ErrorCode.VALIDATION_ERROR, f"Not a port: {text}")
        return Result.success(int(text))

    result = (
        parse_port("8080")
        .or_else(lambda _: Result.success(80))
        .map(lambda port: f"listening on {port}")
    )
"""

from railway.result import Result, Success, Failure
from railway.failure import Describable, ErrorCode, FailureDescription
from railway.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
)
from railway.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "Describable",
    "ErrorCode",
    "FailureDescription",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ResultAssertions",
]

__version__ = "1.1.0"
