"""OR chain with plain message aggregation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from orchain.chain.aggregation import aggregate_messages
from orchain.chain.base import BaseOrChain
from orchain.models.entries import MessageGroup
from orchain.models.enums import DEFAULT_PRIORITY
from orchain.protocols import ChainableValidatorProtocol


class OrChain(BaseOrChain):
    """Validator that is valid if any attached validator is valid.

    On failure the messages of every reporting validator are concatenated in
    execution order, each under a new unique key.

    Example:
        chain = OrChain()
        chain.attach(IsEmpty()).attach(IsEmail())
        result = chain.execute("")
        result.is_valid  # True, the empty check passed
    """

    def attach(
        self,
        validator: ChainableValidatorProtocol,
        show_messages: bool = True,
        priority: int = DEFAULT_PRIORITY,
    ) -> OrChain:
        """Attach a validator.

        Args:
            validator: Validator to attach.
            show_messages: Whether its failure messages are reported.
            priority: Higher priorities run first; ties run in attach order.

        Returns:
            Self, for chaining.
        """
        self._attach_entry(validator, show_messages, priority, None, None)
        return self

    def attach_front(
        self, validator: ChainableValidatorProtocol, show_messages: bool = True
    ) -> OrChain:
        """Attach a validator that runs before all currently attached ones."""
        self._attach_front_entry(validator, show_messages, None, None)
        return self

    def attach_by_name(
        self,
        name: str,
        options: Mapping[str, Any] | None = None,
        show_messages: bool = True,
        priority: int = DEFAULT_PRIORITY,
    ) -> OrChain:
        """Resolve a validator by name and attach it.

        ``show_messages`` and ``priority`` entries in ``options`` take
        precedence over the arguments; other entries go to the lookup.
        """
        self._attach_from_options(
            name,
            options,
            {"show_messages": show_messages, "priority": priority},
            front=False,
        )
        return self

    def prepend_by_name(
        self,
        name: str,
        options: Mapping[str, Any] | None = None,
        show_messages: bool = True,
    ) -> OrChain:
        """Resolve a validator by name and attach it in front."""
        self._attach_from_options(name, options, {"show_messages": show_messages}, front=True)
        return self

    def _aggregate(self, groups: list[MessageGroup], value: Any) -> dict[str, str]:
        return aggregate_messages(groups)
