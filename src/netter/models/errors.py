"""IPv4-specific error classes.

A single error kind covers every rejection. It carries no information
about which rule failed.
"""

from __future__ import annotations

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "netter"

ERROR_TYPE = "ipv4_address"
INVALID_ADDRESS_MESSAGE = "invalid ipv4 address string"


class InvalidAddressError(PydanticCustomError):
    """Raised when a string is not a valid dotted-decimal IPv4 address.

    Inherits from PydanticCustomError (and so from ValueError) so the same
    error can be raised from plain code and from inside Pydantic validators.
    """

    @classmethod
    def create(cls, context: dict | None = None) -> InvalidAddressError:
        """Build an InvalidAddressError with package context.

        Args:
            context: Additional context to include in the error.

        Returns:
            InvalidAddressError instance.
        """
        return cls(
            ERROR_TYPE,
            INVALID_ADDRESS_MESSAGE,
            {"package": PACKAGE_NAME, **(context or {})},
        )

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> InvalidAddressError:
        """Convert a pydantic.ValidationError (or any exception) to an InvalidAddressError.

        The original messages are kept in the context under ``"errors"``; the
        message itself stays fixed.

        Args:
            error: The exception to convert.
            context: Additional context to include in the error.

        Returns:
            InvalidAddressError instance.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            messages = [e.get("msg", str(e)) for e in error.errors()]
        else:
            messages = [str(error)]

        return cls.create({"errors": messages, **(context or {})})
