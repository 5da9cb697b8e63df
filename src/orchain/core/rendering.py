"""Message template rendering.

Turns union/pre/post message templates into final message text:
translation, value substitution, obscuring and length truncation.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from orchain.core.errors import ChainConfigurationError

logger = logging.getLogger(__name__)

VALUE_PLACEHOLDER = "%value%"
COUNT_PLACEHOLDER = "%count%"
ELLIPSIS = "..."

# A message length of -1 disables truncation.
UNLIMITED_LENGTH = -1


def _env_flag(name: str, default: str = "0") -> bool:
    value = os.getenv(name, default)
    return value.lower() not in {"0", "false", "no", ""}


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ChainConfigurationError.create(
            "invalid_environment",
            "Environment variable {name} must be an integer, got {raw}",
            {"name": name, "raw": raw},
        ) from None


@dataclass
class RendererConfig:
    """Configuration for MessageRenderer.

    Defaults are read from the environment when the config is created:

    - ``ORCHAIN_MESSAGE_LENGTH``: maximum rendered length, -1 for unlimited.
    - ``ORCHAIN_OBSCURE_VALUE``: replace the substituted value with asterisks.
    """

    message_length: int = field(
        default_factory=lambda: _env_int("ORCHAIN_MESSAGE_LENGTH", str(UNLIMITED_LENGTH))
    )
    obscure_value: bool = field(default_factory=lambda: _env_flag("ORCHAIN_OBSCURE_VALUE", "0"))

    def __post_init__(self) -> None:
        if isinstance(self.message_length, bool) or not isinstance(self.message_length, int):
            raise ChainConfigurationError.create(
                "invalid_message_length",
                "Message length must be an integer, got {value}",
                {"value": self.message_length},
            )
        if self.message_length < UNLIMITED_LENGTH:
            raise ChainConfigurationError.create(
                "invalid_message_length",
                "Message length must be -1 (unlimited) or greater, got {value}",
                {"value": self.message_length},
            )
        if UNLIMITED_LENGTH < self.message_length < len(ELLIPSIS):
            logger.warning(
                "Message length %d is shorter than the ellipsis marker; "
                "truncated messages will exceed it",
                self.message_length,
            )


def stringify_value(value: Any) -> str:
    """Convert a validated value into text for substitution.

    Objects with neither their own ``__str__`` nor ``__repr__`` are shown
    as ``"<ClassName> object"``; containers use their ``repr``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return repr(value)
    if type(value).__str__ is object.__str__ and type(value).__repr__ is object.__repr__:
        return f"{type(value).__name__} object"
    return str(value)


class MessageRenderer:
    """Render message templates against a validated value.

    Example:
        >>> renderer = MessageRenderer(RendererConfig(message_length=-1))
        >>> renderer.render("'%value%' failed %count% checks", "abc", count=2)
        "'abc' failed 2 checks"
    """

    def __init__(
        self,
        config: RendererConfig | None = None,
        translator: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            config: Length and obscuring options. Read from the environment
                when omitted.
            translator: Optional callable applied to the template text before
                substitution.
        """
        self.config = config if config is not None else RendererConfig()
        self.translator = translator

    def render(self, template: str, value: Any, *, count: int = 0) -> str:
        """Render a template.

        Args:
            template: Template text, may contain %value% and %count%.
            value: The validated value.
            count: Number of validators in the rendering chain.

        Returns:
            Rendered message, truncated when longer than the configured length.
        """
        message = str(template)
        if self.translator is not None:
            message = self.translator(message)

        text = stringify_value(value)
        if self.config.obscure_value:
            text = "*" * len(text)

        message = message.replace(VALUE_PLACEHOLDER, text)
        message = message.replace(COUNT_PLACEHOLDER, str(count))

        length = self.config.message_length
        if length > UNLIMITED_LENGTH and len(message) > length:
            message = message[: length - len(ELLIPSIS)] + ELLIPSIS

        return message


_default_renderer: MessageRenderer | None = None


def get_default_renderer() -> MessageRenderer:
    """Get the shared MessageRenderer instance.

    Created on first use so environment overrides set before then apply.
    """
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = MessageRenderer()
    return _default_renderer
