"""
In-memory adapter — decodes ads.txt bytes already held by the caller
(an HTTP request body, a cache entry).

Implements the AdsTxtSource port; decoding errors become failures.
"""

from __future__ import annotations

from railway import ErrorCode
from railway.result import Result

from ads_txt.adapters.file_source import BOM


class BytesAdsTxtSource:
    """Decode a byte payload into ads.txt text, dropping a leading BOM."""

    def __init__(self, data: bytes, encoding: str = "utf-8") -> None:
        self._data = data
        self._encoding = encoding

    def read(self) -> Result[str]:
        """
        Returns Result[str] on success, or
        Result.failure(VALIDATION_ERROR, ...) when the bytes don't decode.
        """
        return Result.from_computation(
            lambda: self._data.decode(self._encoding).removeprefix(BOM),
            ErrorCode.VALIDATION_ERROR,
            f"ads.txt content is not valid {self._encoding}",
        )
