"""OR chain with verbose message aggregation.

Between the message groups of adjacent failing validators a "union"
message is inserted (``" or "`` by default), and optional pre/post
messages frame the whole collection::

    chain = VerboseOrChain(pre_message_template="'%value%' must be")
    chain.attach(IsEmpty()).attach(IsEmail(), leading="or else")
    chain.execute("foo").errors
    # "'foo' must be", "empty", "or else", "an email address"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from orchain.chain.aggregation import aggregate_verbose_messages
from orchain.chain.base import BaseOrChain
from orchain.core.rendering import get_default_renderer
from orchain.models.config import ChainConfig
from orchain.models.entries import MessageGroup, OverrideLike
from orchain.models.enums import DEFAULT_PRIORITY, DEFAULT_UNION_MESSAGE_TEMPLATE
from orchain.protocols import (
    ChainableValidatorProtocol,
    MessageRendererProtocol,
    ValidatorLookupProtocol,
)


class VerboseOrChain(BaseOrChain):
    """OR chain whose failure messages are joined by union messages.

    The union message between two groups comes from, in order: the earlier
    validator's trailing template, the later validator's leading template,
    the chain's default union template. An empty template at any of those
    steps emits nothing. Templates may use %value% and %count%.
    """

    def __init__(
        self,
        default_union_template: str = DEFAULT_UNION_MESSAGE_TEMPLATE,
        pre_message_template: str | None = None,
        post_message_template: str | None = None,
        renderer: MessageRendererProtocol | None = None,
        plugins: ValidatorLookupProtocol | None = None,
    ) -> None:
        """Initialize an empty verbose chain.

        Args:
            default_union_template: Union message used when no override applies.
            pre_message_template: Message emitted before all others, if not None.
            post_message_template: Message emitted after all others, if not None.
            renderer: Template renderer. Defaults to the shared MessageRenderer.
            plugins: Lookup service for ``attach_by_name``.

        Raises:
            ChainConfigurationError: If a template is not a string.
        """
        super().__init__(plugins=plugins)
        self._config = ChainConfig.build(
            default_union_template=default_union_template,
            pre_message_template=pre_message_template,
            post_message_template=post_message_template,
        )
        self._renderer = renderer

    @property
    def config(self) -> ChainConfig:
        return self._config

    @property
    def renderer(self) -> MessageRendererProtocol:
        if self._renderer is None:
            return get_default_renderer()
        return self._renderer

    @renderer.setter
    def renderer(self, renderer: MessageRendererProtocol | None) -> None:
        self._renderer = renderer

    @property
    def default_union_template(self) -> str:
        return self._config.default_union_template

    @default_union_template.setter
    def default_union_template(self, template: str) -> None:
        self._config.apply(default_union_template=template)

    @property
    def pre_message_template(self) -> str | None:
        return self._config.pre_message_template

    @pre_message_template.setter
    def pre_message_template(self, template: str | None) -> None:
        self._config.apply(pre_message_template=template)

    @property
    def post_message_template(self) -> str | None:
        return self._config.post_message_template

    @post_message_template.setter
    def post_message_template(self, template: str | None) -> None:
        self._config.apply(post_message_template=template)

    def attach(
        self,
        validator: ChainableValidatorProtocol,
        show_messages: bool = True,
        priority: int = DEFAULT_PRIORITY,
        leading: OverrideLike = None,
        trailing: OverrideLike = None,
    ) -> VerboseOrChain:
        """Attach a validator.

        Args:
            validator: Validator to attach.
            show_messages: Whether its failure messages are reported.
            priority: Higher priorities run first; ties run in attach order.
            leading: Union template placed before its messages. None defers,
                "" suppresses.
            trailing: Union template placed after its messages. Takes
                precedence over the next validator's leading template.

        Returns:
            Self, for chaining.
        """
        self._attach_entry(validator, show_messages, priority, leading, trailing)
        return self

    def attach_front(
        self,
        validator: ChainableValidatorProtocol,
        show_messages: bool = True,
        leading: OverrideLike = None,
        trailing: OverrideLike = None,
    ) -> VerboseOrChain:
        """Attach a validator that runs before all currently attached ones."""
        self._attach_front_entry(validator, show_messages, leading, trailing)
        return self

    def attach_by_name(
        self,
        name: str,
        options: Mapping[str, Any] | None = None,
        show_messages: bool = True,
        priority: int = DEFAULT_PRIORITY,
        leading: OverrideLike = None,
        trailing: OverrideLike = None,
    ) -> VerboseOrChain:
        """Resolve a validator by name and attach it.

        ``show_messages``, ``priority``, ``leading_message_template`` and
        ``trailing_message_template`` entries in ``options`` take precedence
        over the arguments; other entries go to the lookup.
        """
        self._attach_from_options(
            name,
            options,
            {
                "show_messages": show_messages,
                "priority": priority,
                "leading": leading,
                "trailing": trailing,
            },
            front=False,
        )
        return self

    def prepend_by_name(
        self,
        name: str,
        options: Mapping[str, Any] | None = None,
        show_messages: bool = True,
        leading: OverrideLike = None,
        trailing: OverrideLike = None,
    ) -> VerboseOrChain:
        """Resolve a validator by name and attach it in front."""
        self._attach_from_options(
            name,
            options,
            {"show_messages": show_messages, "leading": leading, "trailing": trailing},
            front=True,
        )
        return self

    def _aggregate(self, groups: list[MessageGroup], value: Any) -> dict[str, str]:
        renderer = self.renderer
        count = self.count()

        def render(template: str) -> str:
            return renderer.render(template, value, count=count)

        return aggregate_verbose_messages(groups, self._config, render)

    def __copy__(self) -> VerboseOrChain:
        clone = super().__copy__()
        clone._config = self._config.model_copy()
        return clone  # type: ignore[return-value]
