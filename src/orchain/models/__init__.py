"""Chain models package.

Registry entries, union message overrides, configuration and enums.
"""

from __future__ import annotations

from orchain.models.config import ChainConfig
from orchain.models.entries import MessageGroup, Override, OverrideLike, ValidatorEntry
from orchain.models.enums import (
    CHAIN_OPTION_KEYS,
    DEFAULT_PRIORITY,
    DEFAULT_UNION_MESSAGE_TEMPLATE,
    ChainOption,
    OverrideKind,
)

__all__ = [
    # Enums and constants
    "CHAIN_OPTION_KEYS",
    "DEFAULT_PRIORITY",
    "DEFAULT_UNION_MESSAGE_TEMPLATE",
    "ChainOption",
    "OverrideKind",
    # Entries
    "MessageGroup",
    "Override",
    "OverrideLike",
    "ValidatorEntry",
    # Configuration
    "ChainConfig",
]
