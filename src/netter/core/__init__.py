"""netter core - the IPv4 scanner.

Usage:
    from netter.core import ScanMode, is_valid_ipv4, valid_ipv4
"""

from __future__ import annotations

from netter.core.ipv4 import (
    MAX_ADDRESS_LENGTH,
    MIN_ADDRESS_LENGTH,
    ScanMode,
    is_valid_ipv4,
    valid_ipv4,
)

__all__ = [
    "MAX_ADDRESS_LENGTH",
    "MIN_ADDRESS_LENGTH",
    "ScanMode",
    "is_valid_ipv4",
    "valid_ipv4",
]
