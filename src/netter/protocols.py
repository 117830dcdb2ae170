from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AddressValidatorProtocol(Protocol):
    """Protocol for address validation implementations.

    Implementations confirm that a string is a valid address or raise
    InvalidAddressError.
    """

    def validate(self, address: Any) -> bool:
        """Validate an address string.

        Args:
            address: Candidate address string.

        Returns:
            True if valid.

        Raises:
            InvalidAddressError: If the address is invalid.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...
