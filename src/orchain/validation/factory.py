from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from orchain.core.factory import PluginFactory
from orchain.protocols import ChainableValidatorProtocol


class ValidatorFactory(PluginFactory[ChainableValidatorProtocol]):
    """Factory for creating chainable validators by name.

    The OR chains themselves are registered by default so that chains can
    be nested by name.

    Example:
        >>> chain = ValidatorFactory.create("verbose_or_chain", pre_message_template="Either:")

        # Register a custom validator
        >>> ValidatorFactory.register("digits", DigitsValidator)
        >>> validator = ValidatorFactory.create("digits", min_length=3)
    """

    _registry: ClassVar[dict[str, Callable[..., Any]]] = {}
    _entity_name: ClassVar[str] = "validator"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure the chain validators are registered."""
        if "or_chain" not in cls._registry:
            from orchain.chain.or_chain import OrChain

            cls._registry["or_chain"] = OrChain
        if "verbose_or_chain" not in cls._registry:
            from orchain.chain.verbose import VerboseOrChain

            cls._registry["verbose_or_chain"] = VerboseOrChain


class ValidatorPluginManager:
    """Lookup service resolving validator names through a factory.

    This is what chains use for ``attach_by_name`` when no other lookup
    service was supplied.
    """

    def __init__(
        self, factory: type[PluginFactory[ChainableValidatorProtocol]] = ValidatorFactory
    ) -> None:
        self._factory = factory

    def resolve(
        self, name: str, options: Mapping[str, Any] | None = None
    ) -> ChainableValidatorProtocol:
        """Create the validator registered under ``name``.

        Args:
            name: Registered validator name.
            options: Keyword arguments for the validator's constructor.

        Raises:
            UnknownValidatorError: If the name is not registered.
        """
        return self._factory.create(name, **dict(options or {}))

    def has(self, name: str) -> bool:
        return self._factory.is_registered(name)
