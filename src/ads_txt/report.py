"""
Parse reports — the lenient parse result plus JSON-ready views of it.

The CLI and the HTTP service both render the same shape:

    {
      "valid": false,
      "records": [{"domain": ..., "publisher_id": ..., "account_relation": "DIRECT", "cert_authority": null}],
      "variables": [{"name": "contact", "value": "ads@example.com"}],
      "errors": [{"code": "INVALID_LINE", "message": "Invalid ads.txt line: ...", "line": "..."}]
    }

An HTTP request that yields no report gets a flat failure body instead:

    {"error_code": "INVALID_LINE", "message": "Invalid ads.txt line: ...", "line": "..."}
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ads_txt.domain.errors import ParseError
from ads_txt.domain.models import AdsTxt, DataRecord, Variable


@dataclass(frozen=True, slots=True)
class ParseReport:
    """
    A document together with the lines that could not be classified.

    Unpacks like the lenient parser's tuple: `document, errors = report`.
    """

    document: AdsTxt
    errors: tuple[ParseError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def __iter__(self) -> Iterator[Any]:
        yield self.document
        yield self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            **document_to_dict(self.document),
            "errors": [error_to_dict(error) for error in self.errors],
        }


def record_to_dict(record: DataRecord) -> dict[str, Any]:
    return {
        "domain": record.domain,
        "publisher_id": record.publisher_id,
        "account_relation": record.account_relation.value,
        "cert_authority": record.cert_authority,
    }


def variable_to_dict(variable: Variable) -> dict[str, str]:
    return {"name": variable.name, "value": variable.value}


def document_to_dict(document: AdsTxt) -> dict[str, Any]:
    return {
        "records": [record_to_dict(record) for record in document.records],
        "variables": [variable_to_dict(variable) for variable in document.variables],
    }


def error_to_dict(error: Any) -> dict[str, Any]:
    """
    Render any failure-track value: parse errors expose the line they came
    from, infrastructure failures only a code and message.
    """
    rendered: dict[str, Any] = {"code": error.code.value, "message": error.message}
    line = getattr(error, "line", None)
    if line is not None:
        rendered["line"] = line
    return rendered


def failure_to_dict(error: Any) -> dict[str, Any]:
    """Flat body for a request that produced no report at all."""
    rendered: dict[str, Any] = {"error_code": error.code.value, "message": error.message}
    line = getattr(error, "line", None)
    if line is not None:
        rendered["line"] = line
    return rendered
