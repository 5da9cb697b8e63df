"""Shared OR-chain execution engine.

A chain runs its validators in priority order and is valid as soon as any
one of them is valid. When all fail, the messages of the reporting
validators are handed to the subclass's aggregator and become the chain's
own failure messages.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from abstract_validation_base import ValidationError, ValidationResult

from orchain.chain.registry import EntryRegistry, check_priority
from orchain.core.errors import ChainConfigurationError
from orchain.models.entries import MessageGroup, OverrideLike, ValidatorEntry
from orchain.models.enums import CHAIN_OPTION_KEYS, DEFAULT_PRIORITY, ChainOption
from orchain.protocols import ChainableValidatorProtocol, ValidatorLookupProtocol

logger = logging.getLogger(__name__)


def split_options(options: Mapping[str, Any] | None) -> tuple[dict[str, Any], dict[str, Any]]:
    """Separate chain-level options from validator constructor options.

    Chain-level keys whose value is None count as absent.

    Returns:
        Tuple of (chain_options, validator_options).
    """
    chain_options: dict[str, Any] = {}
    validator_options: dict[str, Any] = {}
    for key, value in (options or {}).items():
        if key in CHAIN_OPTION_KEYS:
            if value is not None:
                chain_options[key] = value
        else:
            validator_options[key] = value
    return chain_options, validator_options


def _invalid_priority_option(value: Any) -> ChainConfigurationError:
    return ChainConfigurationError.create(
        "invalid_priority",
        "Priority option must be an integer, got {value}",
        {"value": str(value)},
    )


def _option_priority(value: Any) -> int:
    if isinstance(value, (bool, int)):
        return check_priority(value)
    # Only integral floats; int() would truncate the rest
    if isinstance(value, float) and not value.is_integer():
        raise _invalid_priority_option(value)
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise _invalid_priority_option(value) from None


class BaseOrChain(ABC):
    """Base class for validators joined by a logical OR.

    Subclasses decide how collected failure messages are aggregated.
    """

    def __init__(self, plugins: ValidatorLookupProtocol | None = None) -> None:
        """Initialize an empty chain.

        Args:
            plugins: Lookup service for ``attach_by_name``. A default
                ValidatorPluginManager is created on first use when omitted.
        """
        self._registry = EntryRegistry()
        self._plugins = plugins
        self._messages: dict[str, str] = {}

    def __len__(self) -> int:
        return self._registry.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self._registry.count()})"

    def count(self) -> int:
        """Number of attached validators."""
        return self._registry.count()

    # ------------------------------------------------------------------
    # Lookup service
    # ------------------------------------------------------------------

    @property
    def plugins(self) -> ValidatorLookupProtocol:
        """Lookup service used to resolve validators by name."""
        if self._plugins is None:
            from orchain.validation.factory import ValidatorPluginManager

            self._plugins = ValidatorPluginManager()
        return self._plugins

    @plugins.setter
    def plugins(self, plugins: ValidatorLookupProtocol) -> None:
        self._plugins = plugins

    def plugin(
        self, name: str, options: Mapping[str, Any] | None = None
    ) -> ChainableValidatorProtocol:
        """Resolve a validator by name through the lookup service."""
        return self.plugins.resolve(name, options or {})

    # ------------------------------------------------------------------
    # Registry access
    # ------------------------------------------------------------------

    def _attach_entry(
        self,
        validator: ChainableValidatorProtocol,
        show_messages: bool,
        priority: int,
        leading: OverrideLike,
        trailing: OverrideLike,
    ) -> ValidatorEntry:
        return self._registry.add(validator, show_messages, priority, leading, trailing)

    def _attach_front_entry(
        self,
        validator: ChainableValidatorProtocol,
        show_messages: bool,
        leading: OverrideLike,
        trailing: OverrideLike,
    ) -> ValidatorEntry:
        return self._registry.add_front(validator, show_messages, leading, trailing)

    def _attach_from_options(
        self,
        name: str,
        options: Mapping[str, Any] | None,
        defaults: dict[str, Any],
        *,
        front: bool,
    ) -> None:
        chain_options, validator_options = split_options(options)
        validator = self.plugin(name, validator_options)

        show_messages = bool(
            chain_options.get(ChainOption.SHOW_MESSAGES.value, defaults["show_messages"])
        )
        leading = defaults.get("leading")
        trailing = defaults.get("trailing")
        if ChainOption.LEADING_MESSAGE_TEMPLATE.value in chain_options:
            leading = str(chain_options[ChainOption.LEADING_MESSAGE_TEMPLATE.value])
        if ChainOption.TRAILING_MESSAGE_TEMPLATE.value in chain_options:
            trailing = str(chain_options[ChainOption.TRAILING_MESSAGE_TEMPLATE.value])

        if front:
            entry = self._attach_front_entry(validator, show_messages, leading, trailing)
        else:
            priority = defaults.get("priority", DEFAULT_PRIORITY)
            if ChainOption.PRIORITY.value in chain_options:
                priority = _option_priority(chain_options[ChainOption.PRIORITY.value])
            entry = self._attach_entry(validator, show_messages, priority, leading, trailing)
        logger.debug("Attached %r by name at priority %d", name, entry.priority)

    def merge(self, other: BaseOrChain) -> BaseOrChain:
        """Attach every validator of ``other``, keeping priorities and settings.

        Returns:
            Self, for chaining.
        """
        self._registry.merge(other._registry)
        return self

    def get_entries(self) -> list[ValidatorEntry]:
        """Get the attached entries in execution order."""
        return self._registry.entries()

    def get_validators(self) -> list[ChainableValidatorProtocol]:
        """Get the attached validators in execution order."""
        return [entry.validator for entry in self._registry]

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, value: Any, context: Any = None) -> ValidationResult:
        """Run the validators until one of them accepts ``value``.

        Args:
            value: Value to validate.
            context: Passed unchanged to every validator.

        Returns:
            A valid result as soon as any validator is valid. Otherwise an
            invalid result with one error per aggregated message, keyed by
            the message's unique key. An empty chain is never valid.
        """
        groups: list[MessageGroup] = []

        for index, entry in enumerate(self._registry.entries()):
            if entry.validator.validate(value, context):
                logger.debug(
                    "%s valid: validator %d of %d passed", type(self).__name__, index + 1, len(self)
                )
                self._messages = {}
                return ValidationResult(is_valid=True)

            if entry.show_messages:
                messages = entry.validator.get_messages()
                if messages:
                    groups.append(
                        MessageGroup(
                            source_index=index,
                            messages=dict(messages),
                            leading=entry.leading,
                            trailing=entry.trailing,
                        )
                    )

        self._messages = self._aggregate(groups, value)
        logger.debug(
            "%s invalid: %d validators failed, %d reported messages",
            type(self).__name__,
            len(self),
            len(groups),
        )
        return ValidationResult(
            is_valid=False,
            errors=[
                ValidationError(field=key, message=message)
                for key, message in self._messages.items()
            ],
        )

    __call__ = execute

    def validate(self, value: Any, context: Any = None) -> bool:
        """Validate ``value``; lets a chain be attached to another chain."""
        return self.execute(value, context).is_valid

    def get_messages(self) -> dict[str, str]:
        """Get the failure messages of the most recent execution."""
        return dict(self._messages)

    @abstractmethod
    def _aggregate(self, groups: list[MessageGroup], value: Any) -> dict[str, str]:
        """Build the final message mapping from the collected groups."""
        ...

    # ------------------------------------------------------------------
    # Copying and pickling
    # ------------------------------------------------------------------

    def __copy__(self) -> BaseOrChain:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._registry = self._registry.copy()
        clone._messages = dict(self._messages)
        return clone

    def copy(self) -> BaseOrChain:
        """Copy the chain; validators stay shared, the registry does not."""
        return copy.copy(self)

    def __getstate__(self) -> dict[str, Any]:
        # The lookup service is re-acquired after unpickling.
        state = self.__dict__.copy()
        state["_plugins"] = None
        return state
