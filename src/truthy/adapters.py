"""
Truthy adapters - Registry and dispatch for host types.

Built-in types such as ``bool`` and ``str`` cannot carry the ``Truthy``
methods, so each gains the capability through a named adapter. Adapters are
enabled independently through ``TruthyConfig.adapters``.
"""

from typing import Dict, Iterable, List, Optional, Protocol, Type
import logging

from .capability import AsStr, Truthy, falsey_from, truey_from
from .config import get_config
from .matcher import TriState, string_is_truthy

logger = logging.getLogger(__name__)


class TruthyAdapter(Protocol):
    """Protocol for an adapter giving one family of types the capability."""

    def supports(self, value: object) -> bool:
        """Whether this adapter can classify ``value``."""
        ...

    def is_truthy(self, value: object) -> TriState:
        """Classify ``value``; only called when ``supports(value)``."""
        ...


class AdapterRegistry:
    """
    Registry for available truthy adapters.

    Adapters register themselves with this class under a name, and callers
    select which of them take part in dispatch by name.
    """

    _adapters: Dict[str, TruthyAdapter] = {}

    @classmethod
    def register(cls, name: str, adapter_class: Type[TruthyAdapter]) -> None:
        """
        Register an adapter implementation.

        Args:
            name: Adapter name (e.g., "bool", "str")
            adapter_class: Class implementing TruthyAdapter
        """
        name = name.lower()
        if name in cls._adapters:
            logger.warning(
                f"Adapter '{name}' already registered. Overwriting with {adapter_class}"
            )

        cls._adapters[name] = adapter_class()
        logger.info(f"Registered truthy adapter: {name} -> {adapter_class.__name__}")

    @classmethod
    def get(cls, name: str) -> TruthyAdapter:
        """
        Look up a registered adapter.

        Raises:
            KeyError: If no adapter is registered under ``name``
        """
        try:
            return cls._adapters[name.lower()]
        except KeyError:
            available = ", ".join(cls._adapters.keys())
            raise KeyError(
                f"Unknown adapter: {name}. Available adapters: {available}"
            ) from None

    @classmethod
    def list_adapters(cls) -> List[str]:
        """List all registered adapter names."""
        return list(cls._adapters.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if an adapter is registered."""
        return name.lower() in cls._adapters

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an adapter (mainly for testing)."""
        name = name.lower()
        if name in cls._adapters:
            del cls._adapters[name]
            logger.info(f"Unregistered truthy adapter: {name}")


def register_adapter(name: str):
    """
    Decorator for registering adapter classes.

    Example:
        @register_adapter("decimal")
        class DecimalAdapter:
            def supports(self, value): ...
            def is_truthy(self, value): ...
    """

    def decorator(cls):
        AdapterRegistry.register(name, cls)
        return cls

    return decorator


@register_adapter("bool")
class BoolAdapter:
    """``True`` is truey, ``False`` is falsey."""

    def supports(self, value: object) -> bool:
        return isinstance(value, bool)

    def is_truthy(self, value: object) -> TriState:
        return value


@register_adapter("optional-bool")
class OptionalBoolAdapter:
    """As ``BoolAdapter``, with ``None`` left unclassified."""

    def supports(self, value: object) -> bool:
        return value is None or isinstance(value, bool)

    def is_truthy(self, value: object) -> TriState:
        return value


@register_adapter("as-str")
class AsStrAdapter:
    """Classifies anything exposing ``as_str()`` by its string view."""

    def supports(self, value: object) -> bool:
        return isinstance(value, AsStr)

    def is_truthy(self, value: object) -> TriState:
        return string_is_truthy(value.as_str())


@register_adapter("str")
class StrAdapter:
    """Classifies ``str`` instances directly."""

    def supports(self, value: object) -> bool:
        return isinstance(value, str)

    def is_truthy(self, value: object) -> TriState:
        return string_is_truthy(value)


def _enabled(adapters: Optional[Iterable[str]]) -> List[str]:
    if adapters is None:
        return list(get_config().adapters)
    return list(adapters)


def is_truthy(value: object, adapters: Optional[Iterable[str]] = None) -> TriState:
    """
    Classify any supported value as truthy.

    Values implementing ``Truthy`` classify themselves. Anything else goes to
    the first enabled adapter that supports it.

    Args:
        value: Value to classify
        adapters: Names of the adapters to consult, in order (defaults to
            the adapters enabled in the active configuration)

    Returns:
        None, False or True

    Raises:
        TypeError: If no enabled adapter supports the value
        KeyError: If an adapter name is not registered
    """
    if isinstance(value, Truthy):
        return value.is_truthy()

    names = _enabled(adapters)
    for name in names:
        adapter = AdapterRegistry.get(name)
        if adapter.supports(value):
            return adapter.is_truthy(value)

    raise TypeError(
        f"No enabled truthy adapter supports {type(value).__name__}. "
        f"Enabled adapters: {names}"
    )


def is_falsey(value: object, adapters: Optional[Iterable[str]] = None) -> bool:
    """Indicates whether the value can be classed as "falsey"."""
    return falsey_from(is_truthy(value, adapters))


def is_truey(value: object, adapters: Optional[Iterable[str]] = None) -> bool:
    """Indicates whether the value can be classed as "truey"."""
    return truey_from(is_truthy(value, adapters))
