"""Chain enumerations and constants."""

from __future__ import annotations

from enum import Enum


class OverrideKind(str, Enum):
    """State of a leading/trailing union message override."""

    DEFER = "defer"
    """No value; fall through to the next source."""

    SUPPRESS = "suppress"
    """Emit no union message at this position."""

    TEXT = "text"
    """Use the override's own template."""


class ChainOption(str, Enum):
    """Option keys the chains read from ``attach_by_name`` options."""

    SHOW_MESSAGES = "show_messages"
    PRIORITY = "priority"
    LEADING_MESSAGE_TEMPLATE = "leading_message_template"
    TRAILING_MESSAGE_TEMPLATE = "trailing_message_template"


# All option keys consumed by the chain itself (not forwarded to the lookup)
CHAIN_OPTION_KEYS: frozenset[str] = frozenset(option.value for option in ChainOption)

# Priority given to entries attached without one, and to the first entry
# prepended to an empty chain.
DEFAULT_PRIORITY = 1

DEFAULT_UNION_MESSAGE_TEMPLATE = " or "
