"""Verbose chain configuration model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from orchain.core.errors import ChainConfigurationError
from orchain.models.enums import DEFAULT_UNION_MESSAGE_TEMPLATE


class ChainConfig(BaseModel):
    """Templates used by VerboseOrChain when aggregating failure messages.

    ``None`` and ``""`` mean different things. A ``None`` pre/post template
    omits that message, while ``""`` still emits an empty message. An empty
    default union template emits no union message.

    Example:
        config = ChainConfig.build(pre_message_template="'%value%' must be:")
        config.apply(post_message_template="Fix one of the above.")
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
    )

    default_union_template: str = DEFAULT_UNION_MESSAGE_TEMPLATE
    pre_message_template: str | None = None
    post_message_template: str | None = None

    @classmethod
    def build(cls, **values: Any) -> ChainConfig:
        """Create a config, raising ChainConfigurationError on bad input."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ChainConfigurationError.from_validation_error(e) from e

    def apply(self, **values: Any) -> ChainConfig:
        """Assign fields in place, raising ChainConfigurationError on bad input.

        Returns:
            Self, for chaining.
        """
        for name, value in values.items():
            if name not in type(self).model_fields:
                raise ChainConfigurationError.create(
                    "unknown_setting",
                    "Unknown chain setting: {name}",
                    {"name": name},
                )
            try:
                setattr(self, name, value)
            except ValidationError as e:
                raise ChainConfigurationError.from_validation_error(e) from e
        return self
