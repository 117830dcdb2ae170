"""Result classes for address checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from netter.models.errors import InvalidAddressError


@dataclass
class AddressCheckResult:
    """Result of a non-raising address check.

    Attributes:
        raw_input: The value that was checked.
        is_valid: True if the address is valid.
        error: The rejection error if invalid, None otherwise.
    """

    raw_input: Any
    is_valid: bool
    error: InvalidAddressError | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "address": self.raw_input,
            "is_valid": self.is_valid,
            "error": str(self.error) if self.error is not None else None,
        }
