from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from netter.models import AddressCheckResult, InvalidAddressError

logger = logging.getLogger(__name__)


class BaseAddressValidator(ABC):
    """Abstract base class for address validators.

    Provides common error handling, logging, and batch processing logic.
    Subclasses must implement the _validate_impl method.
    """

    def __init__(self) -> None:
        """Initialize the validator."""
        self._check_count = 0
        self._invalid_count = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this validator implementation."""
        ...

    @abstractmethod
    def _validate_impl(self, address: Any) -> bool:
        """Internal implementation of address validation.

        Args:
            address: Candidate address string.

        Returns:
            True if valid.

        Raises:
            InvalidAddressError: If the address is invalid.
        """
        ...

    def validate(self, address: Any) -> bool:
        """Validate an address, raising on failure.

        Args:
            address: Candidate address string.

        Returns:
            True if valid.

        Raises:
            InvalidAddressError: If the address is invalid.
        """
        return self._validate_impl(address)

    def check(self, address: Any) -> AddressCheckResult:
        """Check a single address without raising.

        Args:
            address: Candidate address string.

        Returns:
            AddressCheckResult with the validity and any error.
        """
        self._check_count += 1

        try:
            self._validate_impl(address)
        except InvalidAddressError as e:
            self._invalid_count += 1
            logger.debug("Rejected %s address: %s", self.name, str(address)[:50])
            return AddressCheckResult(raw_input=address, is_valid=False, error=e)

        logger.debug("Accepted %s address: %s", self.name, str(address)[:50])
        return AddressCheckResult(raw_input=address, is_valid=True)

    def check_batch(self, addresses: Sequence[Any]) -> list[AddressCheckResult]:
        """Check multiple addresses.

        Args:
            addresses: Sequence of candidate address strings.

        Returns:
            List of AddressCheckResult objects, one for each input.
        """
        return [self.check(addr) for addr in addresses]

    @property
    def stats(self) -> dict[str, int]:
        """Get check statistics.

        Returns:
            Dict with check_count and invalid_count.
        """
        return {
            "check_count": self._check_count,
            "invalid_count": self._invalid_count,
        }

    def reset_stats(self) -> None:
        """Reset check statistics."""
        self._check_count = 0
        self._invalid_count = 0
