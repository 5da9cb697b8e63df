"""Registry entry and message group dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from orchain.core.errors import ChainConfigurationError
from orchain.models.enums import OverrideKind


@dataclass(frozen=True)
class Override:
    """Leading or trailing union message override of one entry.

    Build with ``Override.coerce``; ``None`` defers, an empty string
    suppresses, and any other string is used as the template.
    """

    kind: OverrideKind = OverrideKind.DEFER
    template: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, OverrideKind):
            raise ChainConfigurationError.create(
                "invalid_override",
                "Override kind must be an OverrideKind, got {type_name}",
                {"type_name": type(self.kind).__name__},
            )
        if self.kind is OverrideKind.TEXT:
            if not isinstance(self.template, str) or not self.template:
                raise ChainConfigurationError.create(
                    "invalid_override",
                    "Text override needs a non-empty template string",
                )
        elif self.template is not None:
            raise ChainConfigurationError.create(
                "invalid_override",
                "A {kind} override carries no template",
                {"kind": self.kind.value},
            )

    @classmethod
    def defer(cls) -> Override:
        return _DEFER

    @classmethod
    def suppress(cls) -> Override:
        return _SUPPRESS

    @classmethod
    def text(cls, template: str) -> Override:
        """Create a text override. An empty template suppresses."""
        if template == "":
            return _SUPPRESS
        return cls(OverrideKind.TEXT, template)

    @classmethod
    def coerce(cls, value: OverrideLike) -> Override:
        """Convert ``None``, a string, or an Override into an Override.

        Raises:
            ChainConfigurationError: If the value has any other type.
        """
        if isinstance(value, Override):
            return value
        if value is None:
            return _DEFER
        if isinstance(value, str):
            return cls.text(value)
        raise ChainConfigurationError.create(
            "invalid_override",
            "Message template override must be a string or None, got {type_name}",
            {"type_name": type(value).__name__},
        )

    @property
    def is_defer(self) -> bool:
        return self.kind is OverrideKind.DEFER

    @property
    def is_suppress(self) -> bool:
        return self.kind is OverrideKind.SUPPRESS

    def to_template(self) -> str | None:
        """Inverse of ``coerce``: ``None`` for defer, ``""`` for suppress."""
        if self.kind is OverrideKind.SUPPRESS:
            return ""
        return self.template


_DEFER = Override(OverrideKind.DEFER)
_SUPPRESS = Override(OverrideKind.SUPPRESS)

OverrideLike = Union[Override, str, None]


@dataclass(frozen=True)
class ValidatorEntry:
    """One attached validator plus its execution metadata.

    The validator is shared with the caller; the registry never mutates it.
    """

    validator: Any
    show_messages: bool
    priority: int
    sequence: int
    leading: Override = field(default_factory=Override.defer)
    trailing: Override = field(default_factory=Override.defer)

    @property
    def execution_key(self) -> tuple[int, int]:
        """Sort key: higher priority first, then attach order."""
        return (-self.priority, self.sequence)


@dataclass
class MessageGroup:
    """Messages of one failed, reporting entry for a single execution."""

    source_index: int
    messages: dict[str, str]
    leading: Override = field(default_factory=Override.defer)
    trailing: Override = field(default_factory=Override.defer)
