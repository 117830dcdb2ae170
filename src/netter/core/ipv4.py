"""Single-pass IPv4 dotted-decimal validation.

The scanner walks the candidate string once, left to right, holding at most
three digits of the current octet. Octet ranges are enforced by comparing
digit characters, never by parsing integers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from netter.models.errors import InvalidAddressError

# "1.1.1.1" and "255.255.255.255"
MIN_ADDRESS_LENGTH = 7
MAX_ADDRESS_LENGTH = 15

OCTET_COUNT = 4
MAX_OCTET_DIGITS = 3
SEPARATOR = "."
ASCII_DIGITS = frozenset("0123456789")


class ScanMode(str, Enum):
    """How much checking happens once the last character has been read.

    STRICT requires exactly four octets and range-checks the final one.
    LEGACY only applies the per-character checks, so incomplete addresses
    such as "10.10.10" and an out-of-range final octet are accepted.
    """

    STRICT = "strict"
    LEGACY = "legacy"


def _octet_in_range(block: list[str | None]) -> bool:
    """Check that a three-slot block holds a value no greater than 255."""
    first, second, third = block
    if first is None or second is None or third is None:
        # One or two digits can never exceed 99
        return True
    if first > "2":
        return False
    if first == "2":
        if second > "5":
            return False
        if second == "5" and third > "5":
            return False
    return True


def valid_ipv4(address: Any, mode: ScanMode | str = ScanMode.STRICT) -> bool:
    """Validate an RFC 791 dotted-decimal IPv4 address string.

    Args:
        address: Candidate address string.
        mode: ScanMode (or its string value) controlling end-of-scan checks.

    Returns:
        True if the address is valid. False is never returned.

    Raises:
        InvalidAddressError: If the address is invalid for any reason.
    """
    mode = ScanMode(mode)

    if not isinstance(address, str):
        raise InvalidAddressError.create()
    if not MIN_ADDRESS_LENGTH <= len(address) <= MAX_ADDRESS_LENGTH:
        raise InvalidAddressError.create()

    block_count = 1
    block: list[str | None] = [None] * MAX_OCTET_DIGITS
    pos = 0

    for char in address:
        if char not in ASCII_DIGITS and char != SEPARATOR:
            raise InvalidAddressError.create()

        if char == SEPARATOR:
            if block_count == OCTET_COUNT:
                raise InvalidAddressError.create()
            # Leading or doubled separator leaves the block empty
            if block[0] is None:
                raise InvalidAddressError.create()
            if not _octet_in_range(block):
                raise InvalidAddressError.create()

            block_count += 1
            block = [None] * MAX_OCTET_DIGITS
            pos = 0
            continue

        if pos == MAX_OCTET_DIGITS:
            raise InvalidAddressError.create()
        block[pos] = char
        pos += 1

    if mode is ScanMode.STRICT:
        if block_count != OCTET_COUNT:
            raise InvalidAddressError.create()
        # Trailing separator
        if block[0] is None:
            raise InvalidAddressError.create()
        if not _octet_in_range(block):
            raise InvalidAddressError.create()

    return True


def is_valid_ipv4(address: Any, mode: ScanMode | str = ScanMode.STRICT) -> bool:
    """Return True if ``address`` is a valid IPv4 string, False otherwise."""
    try:
        return valid_ipv4(address, mode)
    except InvalidAddressError:
        return False
