from __future__ import annotations

from typing import Any, ClassVar

from netter.protocols import AddressValidatorProtocol


class ValidatorFactory:
    """Factory for creating address validator instances.

    Supports registration of custom validator types and creation
    of validators by type name.

    Example:
        >>> validator = ValidatorFactory.create("ipv4", mode="legacy")

        # Register custom validator
        >>> ValidatorFactory.register("ipv4-private", PrivateIPv4Validator)
        >>> validator = ValidatorFactory.create("ipv4-private")
    """

    _registry: ClassVar[dict[str, type[AddressValidatorProtocol]]] = {}
    _default_type: ClassVar[str] = "ipv4"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default validators are registered."""
        if "ipv4" not in cls._registry:
            from netter.validation.validators import IPv4Validator

            cls._registry["ipv4"] = IPv4Validator

    @classmethod
    def register(cls, name: str, impl_class: type[AddressValidatorProtocol]) -> None:
        """Register a validator type.

        Args:
            name: Type name for the validator.
            impl_class: Class implementing AddressValidatorProtocol.
        """
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister a validator type. Unknown names are ignored."""
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, validator_type: str | None = None, **kwargs: Any) -> AddressValidatorProtocol:
        """Create a validator instance.

        Args:
            validator_type: Type of validator to create. Defaults to "ipv4".
            **kwargs: Arguments to pass to the validator constructor.

        Returns:
            Validator instance.

        Raises:
            ValueError: If the validator type is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = validator_type if validator_type is not None else cls._default_type
        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(f"Unknown validator type: {type_name}. Available types: {available}")

        return cls._registry[type_name](**kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        """Get list of available validator types."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())
