from collections.abc import Iterable


class HuemodelsError(Exception):
    """Base exception for all huemodels errors."""


class FatalError(HuemodelsError):
    """Custom exception to indicate a fatal error in the application.

    Exceptions that indicate the process cannot continue with its current configuration should inherit from this
    class.
    """


class InvalidRegistryError(FatalError):
    """Base exception for registries that fail validation at construction time."""

    def __init__(self, registry_name: str, msg: str) -> None:
        super().__init__(f"Registry '{registry_name}' is invalid: {msg}")
        self.registry_name = registry_name


class MissingDefaultVariantError(InvalidRegistryError):
    """Raised when a registry does not declare the 'Unknown' fallback variant."""

    def __init__(self, registry_name: str, default_code: str) -> None:
        """Initialize the error.

        Args:
            registry_name: The name of the registry being built.
            default_code: The code of the fallback variant that was expected.
        """
        super().__init__(registry_name, f"no '{default_code}' variant declared")
        self.default_code = default_code


class MissingConstructorError(InvalidRegistryError):
    """Raised when one or more declared codes have no callable constructor."""

    def __init__(self, registry_name: str, codes: Iterable[str]) -> None:
        """Initialize the error.

        Args:
            registry_name: The name of the registry being built.
            codes: The declared codes without a usable constructor.
        """
        self.codes = tuple(codes)
        super().__init__(registry_name, f"no constructor for {', '.join(repr(c) for c in self.codes)}")


class UndeclaredVariantError(InvalidRegistryError):
    """Raised when a constructor is supplied for a code that is not in the declared code list."""

    def __init__(self, registry_name: str, codes: Iterable[str]) -> None:
        """Initialize the error.

        Args:
            registry_name: The name of the registry being built.
            codes: The constructor keys that are not declared codes.
        """
        self.codes = tuple(codes)
        super().__init__(registry_name, f"constructors for undeclared codes {', '.join(repr(c) for c in self.codes)}")


class DuplicateVariantCodeError(InvalidRegistryError):
    """Raised when the same code is declared more than once."""

    def __init__(self, registry_name: str, codes: Iterable[str]) -> None:
        self.codes = tuple(codes)
        super().__init__(registry_name, f"duplicate codes {', '.join(repr(c) for c in self.codes)}")


class UnsupportedCapabilityError(HuemodelsError):
    """Raised when a variant is asked for a capability it does not have."""

    def __init__(self, variant_name: str, capability: str) -> None:
        super().__init__(f"{variant_name} does not support {capability}")
        self.variant_name = variant_name
        self.capability = capability


class MismatchedVariantPairError(InvalidRegistryError):
    """Raised when a config variant is paired with a state variant of a different type."""

    def __init__(self, registry_name: str, code: str, config_name: str, state_name: str) -> None:
        super().__init__(registry_name, f"'{code}' pairs {config_name} with {state_name}")
        self.code = code
