"""Tests for the login.defs UID directive parsers."""

import logging

import pytest

from greeter_inventory.directive_result import DirectiveStatus
from greeter_inventory.errors import CorruptPolicyError
from greeter_inventory.parse_login_defs import find_uid_directive, parse_uid_range
from greeter_inventory.uid_range import UidRange

LOGIN_DEFS = """\
# Min/max values for automatic uid selection in useradd
#
UID_MIN\t\t\t 1000
UID_MAX\t\t\t60000
# System accounts
SYS_UID_MIN\t\t  100
SYS_UID_MAX\t\t  999
"""


def test_find_uid_directive_found() -> None:
    """Verify that a well-formed directive yields its integer value."""
    result = find_uid_directive(LOGIN_DEFS, "UID_MIN")
    assert result.status is DirectiveStatus.FOUND
    assert result.value == 1000


def test_find_uid_directive_absent() -> None:
    """Verify that a missing directive is reported as absent."""
    result = find_uid_directive("PASS_MAX_DAYS 99999\n", "UID_MAX")
    assert result.status is DirectiveStatus.ABSENT
    assert result.value is None


def test_find_uid_directive_non_numeric_is_absent() -> None:
    """Verify that a non-numeric value does not count as the directive."""
    result = find_uid_directive("UID_MIN 10a0\n", "UID_MIN")
    assert result.status is DirectiveStatus.ABSENT


def test_find_uid_directive_skips_non_numeric_lines() -> None:
    """Verify that a later numeric line is used after a non-numeric one."""
    text = "UID_MIN abc\nUID_MIN 1200 # local policy\n"
    assert find_uid_directive(text, "UID_MIN").value == 1200


def test_find_uid_directive_overflow_is_invalid() -> None:
    """Verify that a digit string too large for a UID is reported as invalid."""
    result = find_uid_directive("UID_MIN 99999999999\n", "UID_MIN")
    assert result.status is DirectiveStatus.INVALID
    assert result.raw == "99999999999"


def test_find_uid_directive_ignores_comments() -> None:
    """Verify that commented-out directives are not picked up."""
    text = "#UID_MIN 500\n# UID_MIN 600\nUID_MIN 2000\n"
    assert find_uid_directive(text, "UID_MIN").value == 2000
    assert find_uid_directive("#UID_MIN 500\n", "UID_MIN").status is (
        DirectiveStatus.ABSENT
    )


def test_find_uid_directive_ignores_prefixed_keywords() -> None:
    """Verify that SYS_UID_MIN is not mistaken for UID_MIN."""
    text = "SYS_UID_MIN 100\nUID_MIN 1500\n"
    assert find_uid_directive(text, "UID_MIN").value == 1500


def test_find_uid_directive_first_match_wins() -> None:
    """Verify that the first occurrence of a directive is used."""
    text = "UID_MAX 50000\nUID_MAX 70000\n"
    assert find_uid_directive(text, "UID_MAX").value == 50000


def test_parse_uid_range_explicit() -> None:
    """Verify that both bounds are read from the policy text."""
    assert parse_uid_range(LOGIN_DEFS) == UidRange(1000, 60000)


def test_parse_uid_range_defaults_with_warning(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that missing bounds fall back to defaults and log warnings."""
    with caplog.at_level(logging.WARNING):
        uid_range = parse_uid_range("UMASK 022\n", "/etc/login.defs")
    assert uid_range == UidRange(1000, 60000)
    assert "Failed to find UID_MIN in login file: /etc/login.defs" in caplog.text
    assert "Failed to find UID_MAX in login file: /etc/login.defs" in caplog.text


def test_parse_uid_range_partial_default() -> None:
    """Verify that one missing bound does not affect the other."""
    assert parse_uid_range("UID_MIN 500\n") == UidRange(500, 60000)


def test_parse_uid_range_non_numeric_uses_defaults(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that non-numeric bounds fall back to defaults with a warning."""
    with caplog.at_level(logging.WARNING):
        uid_range = parse_uid_range("UID_MIN abc\nUID_MAX 60000\n")
    assert uid_range.min == 1000
    assert uid_range.max == 60000
    assert "Failed to find UID_MIN" in caplog.text


def test_parse_uid_range_overflow_is_fatal() -> None:
    """Verify that a bound too large for a UID raises instead of defaulting."""
    with pytest.raises(CorruptPolicyError, match="UID_MIN"):
        parse_uid_range("UID_MIN 99999999999\nUID_MAX 60000\n")


def test_parse_uid_range_inverted_is_fatal() -> None:
    """Verify that UID_MIN greater than UID_MAX raises."""
    with pytest.raises(CorruptPolicyError, match="Inconsistent"):
        parse_uid_range("UID_MIN 5000\nUID_MAX 1000\n")


def test_uid_range_membership() -> None:
    """Verify that range membership is inclusive at both ends."""
    uid_range = UidRange(1000, 2000)
    assert 1000 in uid_range
    assert 2000 in uid_range
    assert 999 not in uid_range
    assert 2001 not in uid_range


def test_uid_range_rejects_out_of_range_bounds() -> None:
    """Verify that bounds outside the 32-bit UID space are rejected."""
    with pytest.raises(ValueError, match="within"):
        UidRange(-1, 10)
    with pytest.raises(ValueError, match="within"):
        UidRange(1000, 2**32)
    assert UidRange(0, 2**32 - 1).max == 4294967295
