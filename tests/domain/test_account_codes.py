"""Tests for account code helpers."""

from quantor.domain.services.account_codes import (
    format_child_code,
    parse_code_segment,
    split_code,
)


def test_split_code() -> None:
    assert split_code("2.1.001") == ["2", "1", "001"]
    assert split_code("7") == ["7"]


def test_parse_code_segment_reads_integers() -> None:
    assert parse_code_segment("2.1.001", 0) == 2
    assert parse_code_segment("2.1.001", 1) == 1
    assert parse_code_segment("2.1.001", 2) == 1


def test_parse_code_segment_returns_none_for_bad_segments() -> None:
    """Missing or non-numeric segments are reported as None."""
    assert parse_code_segment("2.1", 2) is None
    assert parse_code_segment("A.1", 0) is None
    assert parse_code_segment("2.-1", 1) is None
    assert parse_code_segment("", 0) is None


def test_format_child_code_pads_leaf_accounts() -> None:
    assert format_child_code("3", 4, 2) == "3.4"
    assert format_child_code("3.4", 7, 3) == "3.4.007"
    assert format_child_code("3.4", 1234, 3) == "3.4.1234"
