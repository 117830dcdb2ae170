"""Address validator implementations.

This module provides the validator classes, factory and Pydantic types
built on top of the core scanner.
"""

from netter.validation.base import BaseAddressValidator
from netter.validation.factory import ValidatorFactory
from netter.validation.types import IPv4AddressStr
from netter.validation.validators import IPv4Validator, get_default_validator

__all__ = [
    "BaseAddressValidator",
    "IPv4Validator",
    "IPv4AddressStr",
    "ValidatorFactory",
    "get_default_validator",
]
