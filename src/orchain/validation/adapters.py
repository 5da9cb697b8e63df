"""Adapters exposing other validator shapes through the chain capability."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from orchain.core.rendering import get_default_renderer
from orchain.protocols import MessageRendererProtocol

if TYPE_CHECKING:
    from abstract_validation_base import BaseValidator


class ResultValidatorAdapter:
    """Wrap a result-returning validator so it can join an OR chain.

    ``abstract_validation_base`` validators return a ValidationResult from
    ``validate(item)``. The adapter turns that into a boolean and keeps the
    result's errors as the messages of the call, keyed ``"<field>:<index>"``
    so repeated fields do not overwrite each other.

    Example:
        chain = OrChain()
        chain.attach(ResultValidatorAdapter(Zip5FormatValidator()))
    """

    def __init__(self, validator: BaseValidator[Any]) -> None:
        """Initialize the adapter.

        Args:
            validator: Validator with ``validate(item) -> ValidationResult``.
        """
        self.validator = validator
        self._messages: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self.validator.name

    def validate(self, value: Any, context: Any = None) -> bool:
        """Run the wrapped validator. ``context`` is not passed on."""
        result = self.validator.validate(value)
        self._messages = {
            f"{error.field}:{index}": error.message for index, error in enumerate(result.errors)
        }
        return result.is_valid

    def get_messages(self) -> dict[str, str]:
        return dict(self._messages)


class PredicateValidator:
    """Chainable validator backed by a ``(value, context) -> bool`` callable.

    The failure message is rendered from ``message_template`` with the same
    %value% substitution the verbose chain uses.
    """

    def __init__(
        self,
        predicate: Callable[[Any, Any], bool],
        message_template: str,
        *,
        message_key: str = "invalid",
        renderer: MessageRendererProtocol | None = None,
    ) -> None:
        self.predicate = predicate
        self.message_template = message_template
        self.message_key = message_key
        self._renderer = renderer
        self._messages: dict[str, str] = {}

    def validate(self, value: Any, context: Any = None) -> bool:
        self._messages = {}
        if self.predicate(value, context):
            return True
        renderer = self._renderer if self._renderer is not None else get_default_renderer()
        self._messages[self.message_key] = renderer.render(self.message_template, value)
        return False

    def get_messages(self) -> dict[str, str]:
        return dict(self._messages)
