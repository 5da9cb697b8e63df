"""Failure message aggregation.

Each aggregated message gets a key unique within the call: a call-scoped
random token followed by a running index. Identical keys coming from
different validators therefore never overwrite each other when the result
is merged into another mapping.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Sequence

from orchain.models.config import ChainConfig
from orchain.models.entries import MessageGroup

logger = logging.getLogger(__name__)


def new_chain_token() -> str:
    """Create a random key prefix for one aggregation call."""
    return uuid.uuid4().hex[:13]


class MessageCollector:
    """Ordered message mapping with generated unique keys."""

    def __init__(self, token: str | None = None) -> None:
        self.token = token if token is not None else new_chain_token()
        self.messages: dict[str, str] = {}
        self._index = 0

    def add(self, message: str) -> str:
        """Append a message and return the key it was stored under."""
        key = f"{self.token}{self._index}"
        self.messages[key] = message
        self._index += 1
        return key

    def extend(self, messages: dict[str, str]) -> None:
        for message in messages.values():
            self.add(message)


def aggregate_messages(
    groups: Sequence[MessageGroup], *, token: str | None = None
) -> dict[str, str]:
    """Concatenate the messages of all groups in order.

    Args:
        groups: Message groups in execution order.
        token: Key prefix; a random one is generated when omitted.

    Returns:
        Ordered mapping of unique key to message.
    """
    collector = MessageCollector(token)
    for group in groups:
        collector.extend(group.messages)
    logger.debug(
        "Aggregated %d messages from %d groups", len(collector.messages), len(groups)
    )
    return collector.messages


def resolve_union_template(
    current: MessageGroup, following: MessageGroup, default: str
) -> str | None:
    """Pick the union template placed between two adjacent groups.

    The current group's trailing override wins over the following group's
    leading override, which wins over ``default``. A suppressing override
    ends the lookup. Returns None when no union message should be emitted.
    """
    for override in (current.trailing, following.leading):
        if override.is_suppress:
            return None
        if not override.is_defer:
            return override.template
    return default or None


def aggregate_verbose_messages(
    groups: Sequence[MessageGroup],
    config: ChainConfig,
    render: Callable[[str], str],
    *,
    token: str | None = None,
) -> dict[str, str]:
    """Concatenate group messages with pre, post and union messages.

    Args:
        groups: Message groups in execution order.
        config: Default union, pre and post templates.
        render: Callable turning a template into final message text.
        token: Key prefix; a random one is generated when omitted.

    Returns:
        Ordered mapping of unique key to message.
    """
    collector = MessageCollector(token)

    if config.pre_message_template is not None:
        collector.add(render(config.pre_message_template))

    for index, group in enumerate(groups):
        collector.extend(group.messages)

        if index + 1 < len(groups):
            template = resolve_union_template(
                group, groups[index + 1], config.default_union_template
            )
            if template is not None:
                collector.add(render(template))

    if config.post_message_template is not None:
        collector.add(render(config.post_message_template))

    logger.debug(
        "Aggregated %d verbose messages from %d groups", len(collector.messages), len(groups)
    )
    return collector.messages
