"""Priority-ordered registry of attached validators.

Entries are kept sorted by ``(-priority, sequence)`` so that enumeration
order is always the execution order: higher priority first, ties in
attach order.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from typing import Any

from orchain.core.errors import ChainConfigurationError
from orchain.models.entries import Override, OverrideLike, ValidatorEntry
from orchain.models.enums import DEFAULT_PRIORITY


def check_priority(priority: Any) -> int:
    """Return ``priority`` if it is an integer.

    Raises:
        ChainConfigurationError: For non-integers, including bools.
    """
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise ChainConfigurationError.create(
            "invalid_priority",
            "Priority must be an integer, got {type_name}",
            {"type_name": type(priority).__name__},
        )
    return priority


def _execution_key(entry: ValidatorEntry) -> tuple[int, int]:
    return entry.execution_key


class EntryRegistry:
    """Ordered multiset of ValidatorEntry objects.

    Example:
        registry = EntryRegistry()
        registry.add(length_validator, priority=5)
        registry.add(pattern_validator)
        registry.add_front(cheap_validator)
        [e.validator for e in registry]  # cheap, length, pattern
    """

    def __init__(self) -> None:
        self._entries: list[ValidatorEntry] = []
        self._next_sequence = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ValidatorEntry]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"EntryRegistry(count={len(self._entries)})"

    def count(self) -> int:
        """Number of attached entries."""
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def entries(self) -> list[ValidatorEntry]:
        """Get a snapshot of the entries in execution order."""
        return list(self._entries)

    def highest_priority(self) -> int | None:
        """Priority of the entry that runs first, or None when empty."""
        if not self._entries:
            return None
        return self._entries[0].priority

    def add(
        self,
        validator: Any,
        show_messages: bool = True,
        priority: int = DEFAULT_PRIORITY,
        leading: OverrideLike = None,
        trailing: OverrideLike = None,
    ) -> ValidatorEntry:
        """Add a validator at ``priority``, after existing entries of equal priority.

        Args:
            validator: Validator to attach. Shared, not copied.
            show_messages: Whether its failure messages are reported.
            priority: Any integer; higher runs earlier.
            leading: Union message override placed before its messages.
            trailing: Union message override placed after its messages.

        Returns:
            The new entry.
        """
        entry = ValidatorEntry(
            validator=validator,
            show_messages=bool(show_messages),
            priority=check_priority(priority),
            sequence=self._next_sequence,
            leading=Override.coerce(leading),
            trailing=Override.coerce(trailing),
        )
        self._next_sequence += 1
        bisect.insort(self._entries, entry, key=_execution_key)
        return entry

    def add_front(
        self,
        validator: Any,
        show_messages: bool = True,
        leading: OverrideLike = None,
        trailing: OverrideLike = None,
    ) -> ValidatorEntry:
        """Add a validator that runs before every current entry.

        Its priority is one above the current highest, or DEFAULT_PRIORITY
        when the registry is empty.
        """
        highest = self.highest_priority()
        priority = DEFAULT_PRIORITY if highest is None else highest + 1
        return self.add(validator, show_messages, priority, leading, trailing)

    def merge(self, other: EntryRegistry) -> None:
        """Re-add every entry of ``other`` with its priority and overrides.

        Entries get fresh sequence numbers in ``other``'s execution order, so
        ties within ``other`` keep their order and land after this registry's
        existing entries of the same priority.
        """
        for entry in other.entries():
            self.add(
                entry.validator,
                entry.show_messages,
                entry.priority,
                entry.leading,
                entry.trailing,
            )

    def copy(self) -> EntryRegistry:
        """Copy the registry. Entries (and their validators) are shared."""
        clone = EntryRegistry()
        clone._entries = list(self._entries)
        clone._next_sequence = self._next_sequence
        return clone
