"""Property-based tests using Hypothesis for the IPv4 scanner.

This module contains property tests that verify invariants of the
validator using Hypothesis strategies.
"""

from __future__ import annotations

import ipaddress

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from netter import InvalidAddressError, ScanMode, is_valid_ipv4, valid_ipv4
from tests.strategies import (
    bad_length_string_strategy,
    foreign_char_ipv4_strategy,
    out_of_range_ipv4_strategy,
    short_ipv4_strategy,
    valid_ipv4_strategy,
)

# =============================================================================
# Acceptance Properties
# =============================================================================


class TestAcceptanceProperties:
    """Property tests for addresses that must be accepted."""

    @given(valid_ipv4_strategy())
    @settings(max_examples=200)
    def test_valid_addresses_accepted(self, address: str) -> None:
        """Four octets in [0, 255] joined by dots are always valid."""
        assert valid_ipv4(address) is True

    @given(valid_ipv4_strategy())
    @settings(max_examples=100)
    def test_legacy_accepts_everything_strict_accepts(self, address: str) -> None:
        """LEGACY only removes checks, so it never rejects a STRICT-valid address."""
        assert valid_ipv4(address, ScanMode.LEGACY) is True

    @given(st.ip_addresses(v=4))
    @settings(max_examples=200)
    def test_agrees_with_stdlib_formatting(self, address: ipaddress.IPv4Address) -> None:
        """Canonical string forms produced by ipaddress are accepted."""
        assert is_valid_ipv4(str(address)) is True


# =============================================================================
# Rejection Properties
# =============================================================================


class TestRejectionProperties:
    """Property tests for addresses that must be rejected."""

    @given(bad_length_string_strategy())
    @settings(max_examples=200)
    def test_length_out_of_bounds_rejected(self, address: str) -> None:
        """Strings shorter than 7 or longer than 15 characters fail in any mode."""
        for mode in ScanMode:
            with pytest.raises(InvalidAddressError):
                valid_ipv4(address, mode)

    @given(out_of_range_ipv4_strategy())
    @settings(max_examples=100)
    def test_out_of_range_octet_rejected(self, address: str) -> None:
        """An octet above 255 followed by a separator fails in any mode."""
        for mode in ScanMode:
            assert is_valid_ipv4(address, mode) is False

    @given(foreign_char_ipv4_strategy())
    @settings(max_examples=200)
    def test_foreign_character_rejected(self, address: str) -> None:
        """Any character other than an ASCII digit or a dot fails."""
        for mode in ScanMode:
            assert is_valid_ipv4(address, mode) is False

    @given(short_ipv4_strategy())
    @settings(max_examples=100)
    def test_incomplete_address_rejected(self, address: str) -> None:
        """Fewer than four octets never pass STRICT."""
        assert is_valid_ipv4(address) is False

    @given(valid_ipv4_strategy())
    @settings(max_examples=100)
    def test_extra_separator_rejected(self, address: str) -> None:
        """A fifth separator fails even when the rest is valid."""
        assert is_valid_ipv4(address + ".") is False


# =============================================================================
# General Properties
# =============================================================================


class TestGeneralProperties:
    """Properties that hold for arbitrary input."""

    @given(st.text(max_size=20))
    @settings(max_examples=200)
    def test_never_returns_false(self, address: str) -> None:
        """valid_ipv4 either returns True or raises InvalidAddressError."""
        try:
            result = valid_ipv4(address)
        except InvalidAddressError:
            return
        assert result is True

    @given(st.text(alphabet="0123456789.", max_size=20))
    @settings(max_examples=200)
    def test_idempotent(self, address: str) -> None:
        """Repeated calls on the same input give the same answer."""
        first = is_valid_ipv4(address)
        assert all(is_valid_ipv4(address) is first for _ in range(3))

    @given(st.text(alphabet="0123456789.", min_size=7, max_size=15))
    @settings(max_examples=300)
    def test_strict_matches_reference(self, address: str) -> None:
        """STRICT accepts exactly four 1-3 digit octets each at most 255."""
        parts = address.split(".")
        expected = len(parts) == 4 and all(
            1 <= len(part) <= 3 and int(part) <= 255 for part in parts
        )
        assert is_valid_ipv4(address) is expected

    @given(st.text(alphabet="0123456789.", min_size=7, max_size=15))
    @settings(max_examples=200)
    def test_strict_implies_legacy(self, address: str) -> None:
        """Every STRICT-valid string is also LEGACY-valid."""
        if is_valid_ipv4(address, ScanMode.STRICT):
            assert is_valid_ipv4(address, ScanMode.LEGACY)
