"""Generic plugin factory base class.

Provides a reusable factory pattern for creating instances from a registry
of registered types or factory callables. Subclasses specify the registry,
the entity name used in error messages, and how to register defaults.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar

from orchain.core.errors import UnknownValidatorError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses should define:
        - _registry: Class-level dict mapping names to classes or callables
        - _entity_name: Human-readable name for error messages (e.g., "validator")
        - _ensure_defaults_registered(): Method to register default implementations

    Example subclass:
        class ValidatorFactory(PluginFactory[ChainableValidatorProtocol]):
            _registry: ClassVar[dict[str, Callable[..., Any]]] = {}
            _entity_name: ClassVar[str] = "validator"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                if "or_chain" not in cls._registry:
                    from orchain.chain.or_chain import OrChain
                    cls._registry["or_chain"] = OrChain
    """

    _registry: ClassVar[dict[str, Callable[..., Any]]]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default implementations are registered.

        Called before every registry read so that defaults are loaded lazily
        and late imports cannot form a cycle.
        """
        ...

    @classmethod
    def register(cls, name: str, impl: Callable[..., T]) -> None:
        """Register an implementation class or factory callable.

        Args:
            name: Name the implementation is looked up by.
            impl: Class or callable returning a new instance.
        """
        cls._registry[name] = impl

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an implementation. Unknown names are ignored."""
        cls._registry.pop(name, None)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        cls._ensure_defaults_registered()
        return name in cls._registry

    @classmethod
    def create(cls, name: str, /, **kwargs: Any) -> T:
        """Create an instance of the named implementation.

        Args:
            name: Registered name.
            **kwargs: Arguments passed to the class or callable.

        Returns:
            New instance.

        Raises:
            UnknownValidatorError: If the name is not registered.
        """
        cls._ensure_defaults_registered()

        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise UnknownValidatorError.create(
                f"unknown_{cls._entity_name.replace(' ', '_')}",
                "Unknown {entity} type: {name}. Available types: {available}",
                {"entity": cls._entity_name, "name": name, "available": available},
            )

        logger.debug("Creating %s %r with options %s", cls._entity_name, name, sorted(kwargs))
        return cls._registry[name](**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Get the sorted list of registered names."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry (mainly for testing)."""
        cls._registry.clear()
