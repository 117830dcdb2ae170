"""Pydantic field types for IPv4 addresses.

Example:
    class Host(BaseModel):
        address: IPv4AddressStr

    Host(address="10.0.0.1")      # ok
    Host(address="10.256.0.1")    # pydantic.ValidationError, type "ipv4_address"
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator

from netter.core.ipv4 import ScanMode, valid_ipv4


def _check_ipv4(value: str) -> str:
    # InvalidAddressError is a PydanticCustomError, so pydantic reports it as-is
    valid_ipv4(value, ScanMode.STRICT)
    return value


IPv4AddressStr = Annotated[str, AfterValidator(_check_ipv4)]
