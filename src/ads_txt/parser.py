"""
ads.txt parser — line classification and document assembly.

Every parser returns a railway Result; nothing in here raises for bad input.

Grammar (per non-comment, non-blank line):
  data record:  DOMAIN , PUBLISHER_ID , RELATION [, CERT_AUTHORITY]
  variable:     NAME = VALUE

Classification is an ordered chain of attempts:

  parse_data_record(line)
    → or_else parse_variable(line)
      → map_failure InvalidLine(line, record_error, variable_error)

so a line that satisfies the record grammar is always a record.

Two document parsers share that classification:
  - parse():         fail-fast, Result[AdsTxt] carrying the first InvalidLine
  - parse_lenient(): collect-all, (AdsTxt, [InvalidLine, ...]), never fails
"""

from __future__ import annotations

from collections.abc import Iterator

import structlog
from railway.result import Failure, Result, Success

from ads_txt.domain.errors import (
    InvalidAccountRelation,
    InvalidDataRecord,
    InvalidLine,
    InvalidVariable,
    ParseError,
)
from ads_txt.domain.models import AccountRelation, AdsTxt, DataRecord, Variable
from ads_txt.report import ParseReport

log = structlog.get_logger()

COMMENT_PREFIX = "#"
FIELD_SEPARATOR = ","
VARIABLE_SEPARATOR = "="


# ─────────────────────── Single-line parsers ───────────────────────


def parse_account_relation(token: str) -> Result[AccountRelation]:
    """
    Parse a relation field, ignoring surrounding whitespace and case.

    Only the full words DIRECT and RESELLER are accepted; the failure keeps
    the token exactly as it was given.
    """
    match token.strip().lower():
        case "direct":
            return Result.success(AccountRelation.DIRECT)
        case "reseller":
            return Result.success(AccountRelation.RESELLER)
        case _:
            return Result.failure_from(InvalidAccountRelation(token))


def parse_data_record(line: str) -> Result[DataRecord]:
    """
    Parse `domain, publisher_id, relation[, cert_authority]`.

    Exactly three or four comma-separated fields are accepted. Fields are
    trimmed but otherwise not validated (an empty publisher id is allowed).
    A bad relation fails the whole record with InvalidAccountRelation.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) not in (3, 4):
        return Result.failure_from(InvalidDataRecord(line))

    domain, publisher_id, relation, *rest = fields
    cert_authority = rest[0].strip() if rest else None

    return parse_account_relation(relation).map(
        lambda account_relation: DataRecord(
            domain=domain.strip(),
            publisher_id=publisher_id.strip(),
            account_relation=account_relation,
            cert_authority=cert_authority,
        )
    )


def parse_variable(line: str) -> Result[Variable]:
    """
    Parse `name=value`.

    The line must split into exactly two parts, so a value that itself
    contains `=` is rejected rather than cut at the first separator.
    """
    fields = line.split(VARIABLE_SEPARATOR)
    if len(fields) != 2:
        return Result.failure_from(InvalidVariable(line))

    name, value = fields
    return Result.success(Variable(name=name.strip(), value=value.strip()))


def classify_line(line: str) -> Result[DataRecord | Variable]:
    """Try the record grammar, then the variable grammar; InvalidLine if neither fits."""
    return parse_data_record(line).or_else(
        lambda record_error: parse_variable(line).map_failure(
            lambda variable_error: InvalidLine(line, record_error, variable_error)
        )
    )


# ─────────────────────── Document parsers ───────────────────────


def _content_lines(text: str) -> Iterator[str]:
    """
    Yield the lines worth classifying, left-stripped.

    Lines are `\\n`-separated; a trailing `\\r` is dropped so CRLF files parse
    the same as LF files. Blank lines and `#` comments are skipped.
    """
    for raw_line in text.split("\n"):
        line = raw_line.removesuffix("\r").lstrip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        yield line


def _append(entry: DataRecord | Variable, records: list[DataRecord], variables: list[Variable]) -> None:
    match entry:
        case DataRecord():
            records.append(entry)
        case Variable():
            variables.append(entry)


def parse(text: str) -> Result[AdsTxt]:
    """
    Strict parse: a complete AdsTxt, or the first line that fits no grammar.

    Stops at the first InvalidLine; nothing after it is examined.
    """
    records: list[DataRecord] = []
    variables: list[Variable] = []

    for line in _content_lines(text):
        match classify_line(line):
            case Success(entry):
                _append(entry, records, variables)
            case Failure(error):
                log.debug("parser.line_rejected", mode="strict", line=line, code=error.code.value)
                return Result.failure_from(error)

    log.debug("parser.complete", mode="strict", records=len(records), variables=len(variables))
    return Result.success(AdsTxt(records=tuple(records), variables=tuple(variables)))


def parse_lenient(text: str) -> tuple[AdsTxt, list[ParseError]]:
    """
    Lenient parse: every line that classifies, plus every line that doesn't.

    Errors are returned in the order their lines appear. This never fails;
    an empty error list means strict parsing would have succeeded with the
    same document.
    """
    records: list[DataRecord] = []
    variables: list[Variable] = []
    errors: list[ParseError] = []

    for line in _content_lines(text):
        match classify_line(line):
            case Success(entry):
                _append(entry, records, variables)
            case Failure(error):
                log.debug("parser.line_rejected", mode="lenient", line=line, code=error.code.value)
                errors.append(error)

    log.debug(
        "parser.complete",
        mode="lenient",
        records=len(records),
        variables=len(variables),
        errors=len(errors),
    )
    return AdsTxt(records=tuple(records), variables=tuple(variables)), errors


def parse_report(text: str) -> ParseReport:
    """Lenient parse packaged as a ParseReport."""
    document, errors = parse_lenient(text)
    return ParseReport(document=document, errors=tuple(errors))
