"""Code-to-variant registries with an 'Unknown' fallback.

A registry maps the short codes reported by a Hue bridge (a light's ``modelid``, a sensor's
``modelid`` or ``type``) to the callable that builds the matching variant. Every registry declares
an ``Unknown`` variant, and any code it does not recognize resolves to it, so new or unexpected
hardware degrades to a generic variant instead of breaking the caller.

Registries are validated when they are built and are read-only afterwards:

```python
LIGHT_MODELS = VariantRegistry("light models", ("LCT001", "Unknown"), {"LCT001": LCT001, "Unknown": Unknown})

LIGHT_MODELS.resolve("LCT001")  # "LCT001"
LIGHT_MODELS.resolve("lct001")  # "Unknown"
LIGHT_MODELS.create("XYZ999")   # Unknown()
```
"""

from collections import Counter
from collections.abc import Callable, Collection, Iterable, Iterator, Mapping
from logging import DEBUG, getLogger
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

import huemodels.exceptions as exc
from huemodels.config import get_config
from huemodels.const import UNKNOWN

LOGGER = getLogger(__name__)

VariantT = TypeVar("VariantT", covariant=True)
"""Represents the type of instance a registry produces, e.g. LightModel or SensorState."""

ConfigT = TypeVar("ConfigT")
StateT = TypeVar("StateT")

VariantConstructor = Callable[..., VariantT]
"""Anything that builds a variant instance, optionally from a raw payload."""


def resolve(code: Any, known_codes: Collection[str]) -> str:
    """Resolve a code to a member of `known_codes`, falling back to 'Unknown'.

    Matching is exact and case-sensitive. Anything that is not a known code, including
    non-string values, resolves to 'Unknown'.

    Args:
        code: The code reported by the bridge.
        known_codes: The codes a registry declares.

    Returns:
        `code` if it is known, otherwise 'Unknown'.
    """
    if isinstance(code, str) and code in known_codes:
        return code
    return UNKNOWN


class VariantRegistry(Mapping[str, VariantConstructor[VariantT]], Generic[VariantT]):
    """Immutable mapping of codes to variant constructors.

    The registry is validated on construction and cannot be modified afterwards.
    """

    name: str
    """Human readable name of the registry, used in errors and logs."""

    codes: frozenset[str]
    """The declared codes, always including 'Unknown'."""

    def __init__(
        self,
        name: str,
        codes: Iterable[str],
        constructors: Mapping[str, VariantConstructor[VariantT]],
    ) -> None:
        """Build and validate a registry.

        Args:
            name: Name of the registry.
            codes: The canonical list of supported codes, including 'Unknown'.
            constructors: The constructor for each declared code.

        Raises:
            DuplicateVariantCodeError: If a code is declared more than once.
            MissingDefaultVariantError: If 'Unknown' is not declared.
            MissingConstructorError: If a declared code has no callable constructor.
            UndeclaredVariantError: If a constructor is given for a code that is not declared.
        """
        declared = tuple(codes)

        duplicates = sorted(code for code, count in Counter(declared).items() if count > 1)
        if duplicates:
            raise exc.DuplicateVariantCodeError(name, duplicates)

        if UNKNOWN not in declared:
            raise exc.MissingDefaultVariantError(name, UNKNOWN)

        missing = [code for code in declared if not callable(constructors.get(code))]
        if missing:
            raise exc.MissingConstructorError(name, missing)

        undeclared = sorted(set(constructors) - set(declared))
        if undeclared:
            raise exc.UndeclaredVariantError(name, undeclared)

        self.name = name
        self.codes = frozenset(declared)
        self._constructors = MappingProxyType({code: constructors[code] for code in declared})

        LOGGER.debug("Built registry '%s' with %d variants", name, len(declared))

    def __getitem__(self, code: str) -> VariantConstructor[VariantT]:
        return self._constructors[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._constructors)

    def __len__(self) -> int:
        return len(self._constructors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, codes={sorted(self.codes)!r})"

    def resolve(self, code: Any) -> str:
        """Resolve `code` against this registry's codes.

        Args:
            code: The code reported by the bridge.

        Returns:
            `code` if this registry declares it, otherwise 'Unknown'.
        """
        return resolve(code, self.codes)

    def create(self, code: Any, *args: Any, **kwargs: Any) -> VariantT:
        """Create a new instance of the variant registered for `code`.

        Arguments after `code` are passed to the constructor unchanged. Errors raised by the
        constructor are not caught.

        Args:
            code: The code reported by the bridge.

        Returns:
            A new instance of the matching variant, or of the 'Unknown' variant.
        """
        resolved = self.resolve(code)
        if resolved != code:
            _log_fallback(self.name, code)
        return self._constructors[resolved](*args, **kwargs)


class PairedVariantRegistry(Generic[ConfigT, StateT]):
    """Two registries, one for config variants and one for state variants, sharing a single code list.

    Both registries are built from the same declared codes and every lookup goes through the same
    `resolve`, so a code always selects a config and a state variant of the same type.
    """

    def __init__(
        self,
        name: str,
        codes: Iterable[str],
        configs: Mapping[str, VariantConstructor[ConfigT]],
        states: Mapping[str, VariantConstructor[StateT]],
    ) -> None:
        """Build and validate both registries.

        Args:
            name: Name of the pair.
            codes: The canonical list of supported codes, including 'Unknown'.
            configs: The config constructor for each declared code.
            states: The state constructor for each declared code.

        Raises:
            InvalidRegistryError: If either registry fails validation.
        """
        declared = tuple(codes)
        self.name = name
        self.configs: VariantRegistry[ConfigT] = VariantRegistry(f"{name} config", declared, configs)
        self.states: VariantRegistry[StateT] = VariantRegistry(f"{name} state", declared, states)
        self.codes = frozenset(declared)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, codes={sorted(self.codes)!r})"

    def resolve(self, code: Any) -> str:
        """Resolve `code` against the shared code list.

        Args:
            code: The type reported by the bridge.

        Returns:
            `code` if it is declared, otherwise 'Unknown'.
        """
        return resolve(code, self.codes)

    def create_config(self, code: Any, config: Any = None) -> ConfigT:
        """Create the config variant for `code` from a raw config payload."""
        return self._create(self.configs, code, config)

    def create_state(self, code: Any, state: Any = None) -> StateT:
        """Create the state variant for `code` from a raw state payload."""
        return self._create(self.states, code, state)

    def create_pair(self, code: Any, config: Any = None, state: Any = None) -> tuple[ConfigT, StateT]:
        """Create the matching config and state variants for `code`.

        Returns:
            A tuple of (config, state).
        """
        return self.create_config(code, config), self.create_state(code, state)

    def _create(self, registry: VariantRegistry[Any], code: Any, payload: Any) -> Any:
        resolved = self.resolve(code)
        if resolved != code:
            _log_fallback(registry.name, code)
        return registry[resolved](payload)


def _fallback_log_level() -> int:
    # an invalid environment must not turn an unknown code into an error
    try:
        return get_config().unknown_code_log_level_int
    except ValidationError:
        LOGGER.warning("Invalid huemodels configuration, logging unknown codes at DEBUG", exc_info=True)
        return DEBUG


def _log_fallback(registry_name: str, code: Any) -> None:
    LOGGER.log(
        _fallback_log_level(),
        "Unrecognized code %r for registry '%s', falling back to '%s'",
        code,
        registry_name,
        UNKNOWN,
    )
