from __future__ import annotations

from typing import Any

from netter.config import get_scan_mode
from netter.core.ipv4 import ScanMode, valid_ipv4
from netter.validation.base import BaseAddressValidator


class IPv4Validator(BaseAddressValidator):
    """Validator for dotted-decimal IPv4 address strings.

    Delegates to the pure valid_ipv4 scanner; the instance only adds
    logging and statistics.

    Example:
        >>> validator = IPv4Validator()
        >>> validator.validate("10.0.0.1")
        True
        >>> validator.check("10.256.0.1").is_valid
        False
    """

    def __init__(self, mode: ScanMode | str | None = None) -> None:
        """Initialize IPv4 validator.

        Args:
            mode: Scan mode. If None, read from NETTER_IPV4_MODE.
        """
        super().__init__()
        self._mode = ScanMode(mode) if mode is not None else get_scan_mode()

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "ipv4"

    @property
    def mode(self) -> ScanMode:
        """Scan mode used by this validator."""
        return self._mode

    def _validate_impl(self, address: Any) -> bool:
        return valid_ipv4(address, self._mode)


# Module-level singleton for convenience
_default_validator: IPv4Validator | None = None


def get_default_validator() -> IPv4Validator:
    """Get the default IPv4Validator singleton.

    Returns:
        Shared IPv4Validator instance configured from the environment.
    """
    global _default_validator
    if _default_validator is None:
        _default_validator = IPv4Validator()
    return _default_validator
