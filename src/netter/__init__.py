"""netter: RFC 791 IPv4 address string validation.

This package provides a single-pass validator for dotted-decimal IPv4
addresses with:
- A pure scanner (valid_ipv4 / is_valid_ipv4)
- A validator class with logging, batch checks and statistics
- A Pydantic field type
- Pandas integration

Quick Start:
    >>> from netter import valid_ipv4, is_valid_ipv4
    >>> valid_ipv4("192.168.0.9")
    True
    >>> is_valid_ipv4("10.256.0.1")
    False

    # Raising form
    >>> from netter import InvalidAddressError
    >>> try:
    ...     valid_ipv4("10.358.0.1")
    ... except InvalidAddressError as e:
    ...     print(e)
    invalid ipv4 address string

    # Pydantic models
    >>> from pydantic import BaseModel
    >>> from netter import IPv4AddressStr
    >>> class Host(BaseModel):
    ...     address: IPv4AddressStr
"""

from __future__ import annotations

from netter.core import (
    MAX_ADDRESS_LENGTH,
    MIN_ADDRESS_LENGTH,
    ScanMode,
    is_valid_ipv4,
    valid_ipv4,
)
from netter.models import (
    INVALID_ADDRESS_MESSAGE,
    PACKAGE_NAME,
    AddressCheckResult,
    InvalidAddressError,
)
from netter.pandas_ext import (
    register_accessor,
    validate_ipv4_series,
)
from netter.protocols import AddressValidatorProtocol
from netter.validation import (
    BaseAddressValidator,
    IPv4AddressStr,
    IPv4Validator,
    ValidatorFactory,
    get_default_validator,
)

__version__ = "0.1.0"
__package_name__ = "netter"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "valid_ipv4",
    "is_valid_ipv4",
    "ScanMode",
    "MIN_ADDRESS_LENGTH",
    "MAX_ADDRESS_LENGTH",
    # Errors and results
    "InvalidAddressError",
    "INVALID_ADDRESS_MESSAGE",
    "PACKAGE_NAME",
    "AddressCheckResult",
    # Protocols
    "AddressValidatorProtocol",
    # Validators
    "BaseAddressValidator",
    "IPv4Validator",
    "IPv4AddressStr",
    "ValidatorFactory",
    "get_default_validator",
    # Pandas integration
    "register_accessor",
    "validate_ipv4_series",
]
