"""orchain: validator chains joined by a logical OR.

A chain is valid as soon as any attached validator is valid. When every
validator fails, their messages are aggregated in execution order.

Quick Start:
    >>> from orchain import OrChain, PredicateValidator
    >>> chain = OrChain()
    >>> chain.attach(PredicateValidator(lambda v, c: v == "", "not empty"))
    >>> chain.attach(PredicateValidator(lambda v, c: v.isdigit(), "'%value%' is not a number"))
    >>> chain.execute("12").is_valid
    True
    >>> list(chain.execute("ab").errors)  # "not empty", "'ab' is not a number"

    # Verbose messages with union, pre and post messages
    >>> from orchain import VerboseOrChain
    >>> chain = VerboseOrChain(pre_message_template="'%value%' must be:")
    >>> chain.attach(empty_validator).attach(number_validator, leading="or")
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from orchain.core import (
    PACKAGE_NAME,
    ChainConfigurationError,
    MessageRenderer,
    OrChainError,
    PluginFactory,
    RendererConfig,
    UnknownValidatorError,
    get_default_renderer,
)
from orchain.models import (
    DEFAULT_PRIORITY,
    ChainConfig,
    MessageGroup,
    Override,
    OverrideKind,
    ValidatorEntry,
)
from orchain.chain import BaseOrChain, EntryRegistry, OrChain, VerboseOrChain
from orchain.protocols import (
    ChainableValidatorProtocol,
    MessageRendererProtocol,
    ValidatorLookupProtocol,
)
from orchain.validation import (
    PredicateValidator,
    ResultValidatorAdapter,
    ValidatorFactory,
    ValidatorPluginManager,
)

__version__ = "0.1.0"
__package_name__ = "orchain"

__all__ = [
    # Version
    "__version__",
    # Chains
    "BaseOrChain",
    "OrChain",
    "VerboseOrChain",
    "EntryRegistry",
    # Models
    "ChainConfig",
    "DEFAULT_PRIORITY",
    "MessageGroup",
    "Override",
    "OverrideKind",
    "ValidatorEntry",
    # Errors
    "PACKAGE_NAME",
    "OrChainError",
    "ChainConfigurationError",
    "UnknownValidatorError",
    # Rendering
    "MessageRenderer",
    "RendererConfig",
    "get_default_renderer",
    # Protocols
    "ChainableValidatorProtocol",
    "MessageRendererProtocol",
    "ValidatorLookupProtocol",
    # Lookup and adapters
    "PluginFactory",
    "ValidatorFactory",
    "ValidatorPluginManager",
    "PredicateValidator",
    "ResultValidatorAdapter",
]
