"""orchain core - errors, plugin factory and message rendering.

These components do not depend on the chains and can be reused by
validators that want the same error types or template rendering.
"""

from __future__ import annotations

from orchain.core.errors import (
    PACKAGE_NAME,
    ChainConfigurationError,
    OrChainError,
    UnknownValidatorError,
)
from orchain.core.factory import PluginFactory
from orchain.core.rendering import (
    MessageRenderer,
    RendererConfig,
    get_default_renderer,
    stringify_value,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "OrChainError",
    "ChainConfigurationError",
    "UnknownValidatorError",
    # Factory
    "PluginFactory",
    # Rendering
    "MessageRenderer",
    "RendererConfig",
    "get_default_renderer",
    "stringify_value",
]
