"""Models for IPv4 address validation.

This package contains:
- errors: The InvalidAddressError error kind
- results: AddressCheckResult for non-raising checks
"""

from netter.models.errors import (
    ERROR_TYPE,
    INVALID_ADDRESS_MESSAGE,
    PACKAGE_NAME,
    InvalidAddressError,
)
from netter.models.results import AddressCheckResult

__all__ = [
    "PACKAGE_NAME",
    "ERROR_TYPE",
    "INVALID_ADDRESS_MESSAGE",
    "InvalidAddressError",
    "AddressCheckResult",
]
