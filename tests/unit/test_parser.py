"""
Unit tests for the ads.txt parser — single-line parsers and document assembly.

Test categories:
  - Account relation: case/whitespace folding, rejected tokens
  - Data record: 3 and 4 field lines, bad field counts, bad relations
  - Variable: name=value lines, missing or repeated separators
  - Classification: record-first dispatch, InvalidLine with both causes
  - Strict document parse: fail-fast on the first bad line
  - Lenient document parse: collect every bad line, never fail
"""

from __future__ import annotations

import pytest
from railway import ResultAssertions

from ads_txt.domain.errors import (
    InvalidAccountRelation,
    InvalidDataRecord,
    InvalidLine,
    InvalidVariable,
    ParseErrorKind,
)
from ads_txt.domain.models import AccountRelation, AdsTxt, DataRecord, Variable
from ads_txt.parser import (
    classify_line,
    parse,
    parse_account_relation,
    parse_data_record,
    parse_lenient,
    parse_report,
    parse_variable,
)

# ─────────────────────── Account relation ───────────────────────


class TestParseAccountRelation:
    """
    GIVEN a relation token
    WHEN parsed
    THEN DIRECT / RESELLER match regardless of case and surrounding whitespace.
    """

    @pytest.mark.parametrize("token", ["direct", "DIRECT", "DIrecT", "  Direct\t"])
    def test_direct_variants(self, token: str) -> None:
        ResultAssertions.assert_success_value(parse_account_relation(token), AccountRelation.DIRECT)

    @pytest.mark.parametrize("token", ["reseller", "RESELLER", "REsellER", " reseller "])
    def test_reseller_variants(self, token: str) -> None:
        ResultAssertions.assert_success_value(parse_account_relation(token), AccountRelation.RESELLER)

    @pytest.mark.parametrize("token", ["", "dir", "resell", "DIRECTLY", "direct reseller", "PARTNER"])
    def test_rejects_other_tokens(self, token: str) -> None:
        """
        GIVEN a token that is not exactly direct/reseller after folding
        WHEN parsed
        THEN the result is an InvalidAccountRelation failure.
        """
        error = ResultAssertions.assert_failure(
            parse_account_relation(token), ParseErrorKind.INVALID_ACCOUNT_RELATION
        )
        assert isinstance(error, InvalidAccountRelation)

    def test_failure_keeps_original_token(self) -> None:
        """
        GIVEN a padded, mixed-case invalid token
        WHEN parsed
        THEN the error carries the token untrimmed and in its original case.
        """
        error = ResultAssertions.assert_failure(parse_account_relation("  Partner "))
        assert error.token == "  Partner "
        assert error.message == "Invalid account relation:   Partner "


# ─────────────────────── Data record ───────────────────────


class TestParseDataRecord:
    """Verify comma-separated seller records."""

    def test_four_fields_sets_cert_authority(self) -> None:
        """
        GIVEN a line with four fields
        WHEN parsed
        THEN every field is trimmed and the fourth becomes the cert authority.
        """
        record = ResultAssertions.assert_success(
            parse_data_record("greenadexchange.com, 12345, DIRECT, d75815a79")
        )
        assert record == DataRecord("greenadexchange.com", "12345", AccountRelation.DIRECT, "d75815a79")

    def test_three_fields_has_no_cert_authority(self) -> None:
        record = ResultAssertions.assert_success(parse_data_record("blueadexchange.com, XF436, DIRECT"))
        assert record == DataRecord("blueadexchange.com", "XF436", AccountRelation.DIRECT, None)
        assert record.cert_authority is None

    def test_fields_are_trimmed(self) -> None:
        record = ResultAssertions.assert_success(
            parse_data_record("  silverssp.com\t,  9675 , reseller ,  f496211  ")
        )
        assert record.domain == "silverssp.com"
        assert record.publisher_id == "9675"
        assert record.account_relation is AccountRelation.RESELLER
        assert record.cert_authority == "f496211"

    def test_empty_fields_are_accepted(self) -> None:
        """
        GIVEN a line whose domain and publisher id are blank
        WHEN parsed
        THEN the record is still accepted with empty strings.
        """
        record = ResultAssertions.assert_success(parse_data_record(" , , DIRECT, "))
        assert record.domain == ""
        assert record.publisher_id == ""
        assert record.cert_authority == ""

    @pytest.mark.parametrize(
        "line",
        ["", "silverssp.com", "silverssp.com, 5569", "a.com, 1, DIRECT, tag, extra"],
    )
    def test_wrong_field_count(self, line: str) -> None:
        """
        GIVEN a line with other than 3 or 4 comma-separated fields
        WHEN parsed
        THEN an InvalidDataRecord failure quotes the full line.
        """
        error = ResultAssertions.assert_failure(parse_data_record(line), ParseErrorKind.INVALID_DATA_RECORD)
        assert error == InvalidDataRecord(line)
        assert error.message == f"Invalid data record: {line}"

    def test_bad_relation_fails_whole_record(self) -> None:
        """
        GIVEN a line with a valid field count but an unknown relation
        WHEN parsed
        THEN the InvalidAccountRelation error propagates unchanged.
        """
        result = parse_data_record("blueadexchange.com, XF436, PARTNER")
        error = ResultAssertions.assert_failure(result, ParseErrorKind.INVALID_ACCOUNT_RELATION)
        assert error == InvalidAccountRelation(" PARTNER")


# ─────────────────────── Variable ───────────────────────


class TestParseVariable:
    """Verify name=value directives."""

    def test_simple_variable(self) -> None:
        ResultAssertions.assert_success_value(
            parse_variable("subdomain=divisionone.example.com"),
            Variable("subdomain", "divisionone.example.com"),
        )

    def test_name_and_value_are_trimmed(self) -> None:
        variable = ResultAssertions.assert_success(parse_variable("  contact =  adops@example.com \t"))
        assert variable == Variable("contact", "adops@example.com")

    def test_empty_value_is_accepted(self) -> None:
        ResultAssertions.assert_success_value(parse_variable("contact="), Variable("contact", ""))

    @pytest.mark.parametrize("line", ["", "contact", "a=b=c", "contact=https://x.com/?a=1"])
    def test_wrong_split_count(self, line: str) -> None:
        """
        GIVEN a line with no '=' or more than one
        WHEN parsed
        THEN an InvalidVariable failure quotes the line.
        """
        error = ResultAssertions.assert_failure(parse_variable(line), ParseErrorKind.INVALID_VARIABLE)
        assert error == InvalidVariable(line)
        assert error.message == f"Invalid variable record: {line}"


# ─────────────────────── Classification ───────────────────────


class TestClassifyLine:
    """Verify record-first dispatch and the combined InvalidLine error."""

    def test_record_line(self) -> None:
        entry = ResultAssertions.assert_success(classify_line("a.com, 1, DIRECT"))
        assert isinstance(entry, DataRecord)

    def test_variable_line(self) -> None:
        entry = ResultAssertions.assert_success(classify_line("contact=ops@example.com"))
        assert isinstance(entry, Variable)

    def test_record_wins_when_both_grammars_fit(self) -> None:
        """
        GIVEN a line that is a valid record and also contains exactly one '='
        WHEN classified
        THEN it is a record.
        """
        entry = ResultAssertions.assert_success(classify_line("a.com, id=7, DIRECT"))
        assert entry == DataRecord("a.com", "id=7", AccountRelation.DIRECT)

    def test_variable_with_commas_in_value(self) -> None:
        entry = ResultAssertions.assert_success(classify_line("contact=Ads, Inc."))
        assert entry == Variable("contact", "Ads, Inc.")

    def test_invalid_line_keeps_both_causes(self) -> None:
        """
        GIVEN a line that fits neither grammar
        WHEN classified
        THEN InvalidLine carries the record and variable failures.
        """
        error = ResultAssertions.assert_failure(
            classify_line("blueadexchange.com, XF436, PARTNER"), ParseErrorKind.INVALID_LINE
        )
        assert error == InvalidLine(
            "blueadexchange.com, XF436, PARTNER",
            record_error=InvalidAccountRelation(" PARTNER"),
            variable_error=InvalidVariable("blueadexchange.com, XF436, PARTNER"),
        )
        assert error.message == "Invalid ads.txt line: blueadexchange.com, XF436, PARTNER"


# ─────────────────────── Strict document parse ───────────────────────


class TestStrictParse:
    """Verify fail-fast document parsing."""

    def test_empty_input(self) -> None:
        ResultAssertions.assert_success_value(parse(""), AdsTxt())

    def test_only_comments_and_blank_lines(self) -> None:
        document = ResultAssertions.assert_success(parse("# header\n\n   \n\t# indented comment\n"))
        assert document.is_empty

    def test_records_and_variables_in_order(self) -> None:
        text = (
            "greenadexchange.com, 12345, DIRECT, d75815a79\n"
            "contact=a@example.com\n"
            "blueadexchange.com, XF436, DIRECT\n"
            "contact=b@example.com\n"
        )
        document = ResultAssertions.assert_success(parse(text))
        assert [r.domain for r in document.records] == ["greenadexchange.com", "blueadexchange.com"]
        assert document.contacts() == ["a@example.com", "b@example.com"]

    def test_leading_whitespace_is_ignored(self) -> None:
        document = ResultAssertions.assert_success(parse("    a.com, 1, RESELLER\n\t  # comment"))
        assert document.records == (DataRecord("a.com", "1", AccountRelation.RESELLER),)

    def test_stops_at_first_invalid_line(self) -> None:
        """
        GIVEN two bad lines
        WHEN parsed strictly
        THEN the failure names the first one, left-stripped.
        """
        result = parse("a.com, 1, DIRECT\n   bad line one\nbad line two\n")
        error = ResultAssertions.assert_failure(result, ParseErrorKind.INVALID_LINE)
        assert error.line == "bad line one"
        ResultAssertions.assert_failure_message_equals(result, "Invalid ads.txt line: bad line one")

    def test_crlf_matches_lf(self) -> None:
        lf = "a.com, 1, DIRECT, tag\ncontact=x@example.com\n"
        assert parse(lf.replace("\n", "\r\n")) == parse(lf)

    def test_inline_trailing_comment_is_not_supported(self) -> None:
        """
        GIVEN a record followed by '# comment' on the same line
        WHEN parsed strictly
        THEN the relation field no longer matches and the line is rejected.
        """
        ResultAssertions.assert_failure(parse("a.com, 1, DIRECT # main"), ParseErrorKind.INVALID_LINE)


# ─────────────────────── Lenient document parse ───────────────────────


class TestLenientParse:
    """Verify collect-all document parsing."""

    def test_empty_input(self) -> None:
        assert parse_lenient("") == (AdsTxt(), [])

    def test_collects_every_bad_line_in_order(self) -> None:
        document, errors = parse_lenient("x\na.com, 1, DIRECT\ny, z\ncontact=c\n")
        assert document.records == (DataRecord("a.com", "1", AccountRelation.DIRECT),)
        assert document.variables == (Variable("contact", "c"),)
        assert [e.line for e in errors] == ["x", "y, z"]
        assert all(e.code is ParseErrorKind.INVALID_LINE for e in errors)

    def test_first_error_equals_strict_failure(self) -> None:
        text = "ok.com, 1, DIRECT\nfirst bad\nsecond bad"
        _, errors = parse_lenient(text)
        assert ResultAssertions.assert_failure(parse(text)) == errors[0]

    def test_document_matches_strict_when_clean(self) -> None:
        text = "a.com, 1, DIRECT\nsubdomain=s.a.com"
        document, errors = parse_lenient(text)
        assert errors == []
        ResultAssertions.assert_success_value(parse(text), document)


class TestParseReport:
    def test_report_unpacks_like_lenient_tuple(self) -> None:
        document, errors = parse_report("a.com, 1, DIRECT\nnope")
        assert len(document.records) == 1
        assert errors == (
            InvalidLine("nope", record_error=InvalidDataRecord("nope"), variable_error=InvalidVariable("nope")),
        )

    def test_is_valid_and_messages(self) -> None:
        assert parse_report("a.com, 1, DIRECT").is_valid
        report = parse_report("nope")
        assert not report.is_valid
        assert report.error_messages == ["Invalid ads.txt line: nope"]
