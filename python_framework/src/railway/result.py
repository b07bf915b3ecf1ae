"""
Result monad — the core of Railway-Oriented Programming.

A Result[T] is either Success(value: T) or Failure(error). Parsers return a
Result instead of raising: .flat_map() chains steps and short-circuits on the
first failure, .or_else() tries alternatives in order, and .map_failure()
re-tags whatever error is left.

    ┌───────────┐   or_else     ┌───────────┐   map_failure
    │ attempt A │──Failure──────│ attempt B │──Failure──────→ Result[T]
    └─────┬─────┘               └─────┬─────┘
          │ Success                   │ Success
          └───────────────────────────┴──────────────────────→ Result[T]

The error carried by a Failure is any Describable value: the generic
FailureDescription, or a caller's own tagged error type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from railway.failure import Describable, ErrorCode, FailureDescription

T = TypeVar("T")
U = TypeVar("U")


class Result(Generic[T]):
    """
    Success(value) on the happy track, Failure(error) on the error track.

        >>> Result.success("DIRECT").map(str.lower).value()
        'direct'

        >>> Result.failure(ErrorCode.NOT_FOUND, "no ads.txt").map(str.lower).is_failure()
        True
    """

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> T:
        """The success value. Raises ValueError on a Failure; match/case is the safe route."""
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err.message}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> Any:
        """The failure value. Raises ValueError on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Transformations ────────────────────────

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_failure(self, mapper: Callable[[Any], Describable]) -> Result[T]:
        """
        Replace the failure value; a success passes through untouched.

            parse_line(line).map_failure(lambda err: InvalidLine(line, err))
        """
        match self:
            case Success(_):
                return self
            case Failure(err):
                return Failure(mapper(err))
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """Feed the success value into the next Result-returning step."""
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def or_else(self, alternative: Callable[[Any], Result[T]]) -> Result[T]:
        """
        Hand a failure to the next attempt; a success is returned as is.

        Chained calls give a "first attempt that succeeds" dispatch:

            parse_as_record(line).or_else(lambda _: parse_as_variable(line))
        """
        match self:
            case Success(_):
                return self
            case Failure(err):
                return alternative(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T]:
        return Success(value)

    @staticmethod
    def failure_from(error: Describable) -> Result[T]:
        """Fail with a caller-defined error value."""
        return Failure(error)

    @staticmethod
    def failure(
        code: ErrorCode,
        message: str,
        exception: Optional[BaseException] = None,
    ) -> Result[T]:
        """Fail with a generic FailureDescription."""
        return Failure(FailureDescription(code=code, message=message, exception=exception))

    @staticmethod
    def from_computation(
        computation: Callable[[], T],
        error_code: ErrorCode,
        error_message: str,
    ) -> Result[T]:
        """
        Run code that may raise and put the outcome on the railway.

        The exception text is appended to `error_message`:

            Result.from_computation(path.read_bytes, ErrorCode.TECHNICAL_ERROR, "Failed to read")
            # Failure(TECHNICAL_ERROR: 'Failed to read: [Errno 13] Permission denied ...')
        """
        try:
            return Result.success(computation())
        except Exception as e:
            return Result.failure(error_code, f"{error_message}: {e}", e)


@dataclass(frozen=True, slots=True)
class Success(Result[T]):
    _value: T

    def __init__(self, value: T) -> None:
        if value is None:
            raise TypeError("Success value must not be None")
        object.__setattr__(self, "_value", value)

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self._value == other._value
        if isinstance(other, Failure):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Success", self._value))


Success.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True)
class Failure(Result[T]):
    _error: Describable

    def __init__(self, error: Describable) -> None:
        if error is None:
            raise TypeError("Failure error must not be None")
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Failure({self._error.code.value}: {self._error.message!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self._error == other._error
        if isinstance(other, Success):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", self._error))


Failure.__match_args__ = ("_error",)
