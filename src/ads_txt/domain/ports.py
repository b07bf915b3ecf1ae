"""
Ports — Protocol-based interfaces for infrastructure adapters.

The parser never fetches text itself. Whoever supplies the raw ads.txt
contents (a file on disk, an HTTP request body, a cache) does so through
this contract:

  Parser ← AdsTxtSource (protocol) ← Adapters (implementations)

Adapters satisfy the contract simply by implementing the method — no
inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from railway.result import Result


@runtime_checkable
class AdsTxtSource(Protocol):
    """
    Port: supply the full text of an ads.txt / app-ads.txt file.

    Returns Result[str]; I/O problems are failures, never exceptions.
    """

    def read(self) -> Result[str]: ...
