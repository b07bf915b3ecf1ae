"""
File adapter — reads an ads.txt / app-ads.txt file from local disk.

Adapter layer — implements the AdsTxtSource port. Every OS or decoding
exception is captured into a Result failure at this boundary; nothing leaks
into the parser.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from railway import ErrorCode
from railway.result import Result

log = structlog.get_logger()

BOM = "\ufeff"


class FileAdsTxtSource:
    """
    Read the full text of an ads.txt file.

    Implements the AdsTxtSource port. A leading byte-order mark is dropped.
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Result[str]:
        """
        Returns Result[str] with the decoded file contents on success,
        Result.failure(NOT_FOUND, ...) when there is no such file, or
        Result.failure(TECHNICAL_ERROR, ...) on any other read/decode failure.
        """
        if not self._path.is_file():
            return Result.failure(ErrorCode.NOT_FOUND, f"ads.txt file not found: {self._path}")

        return Result.from_computation(
            self._do_read,
            ErrorCode.TECHNICAL_ERROR,
            f"Failed to read {self._path}",
        )

    def _do_read(self) -> str:
        """
        May raise OSError / UnicodeDecodeError, caught by from_computation.

        Decoded from raw bytes: no newline translation, so a lone `\\r` reaches
        the parser exactly as it would through BytesAdsTxtSource.
        """
        text = self._path.read_bytes().decode(self._encoding)
        log.info("source.read", path=str(self._path), size_chars=len(text))
        return text.removeprefix(BOM)
