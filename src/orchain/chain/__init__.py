"""OR-composed validator chains."""

from orchain.chain.aggregation import (
    MessageCollector,
    aggregate_messages,
    aggregate_verbose_messages,
    resolve_union_template,
)
from orchain.chain.base import BaseOrChain
from orchain.chain.or_chain import OrChain
from orchain.chain.registry import EntryRegistry
from orchain.chain.verbose import VerboseOrChain

__all__ = [
    "BaseOrChain",
    "EntryRegistry",
    "MessageCollector",
    "OrChain",
    "VerboseOrChain",
    "aggregate_messages",
    "aggregate_verbose_messages",
    "resolve_union_template",
]
