from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ChainableValidatorProtocol(Protocol):
    """Protocol for validators that can be attached to an OR chain.

    Implementations report a boolean outcome and, after a failing call,
    expose the failure messages of that call.
    """

    def validate(self, value: Any, context: Any = None) -> bool:
        """Validate a value.

        Args:
            value: Value to validate.
            context: Optional caller-supplied context (e.g. the whole form data).

        Returns:
            True if the value is valid, False otherwise.
        """
        ...

    def get_messages(self) -> Mapping[str, str]:
        """Get the failure messages of the most recent ``validate`` call.

        Returns:
            Ordered mapping of message key to message text. Only meaningful
            right after a call that returned False.
        """
        ...


@runtime_checkable
class ValidatorLookupProtocol(Protocol):
    """Protocol for name-to-validator lookup services.

    Used by the chains' ``attach_by_name`` and ``prepend_by_name``.
    """

    def resolve(
        self, name: str, options: Mapping[str, Any] | None = None
    ) -> ChainableValidatorProtocol:
        """Create or fetch the validator registered under ``name``.

        Args:
            name: Registered validator name.
            options: Constructor options for the validator.

        Returns:
            Validator instance.

        Raises:
            UnknownValidatorError: If the name is not registered.
        """
        ...


@runtime_checkable
class MessageRendererProtocol(Protocol):
    """Protocol for message template renderers."""

    def render(self, template: str, value: Any, *, count: int = 0) -> str:
        """Render a message template against the validated value.

        Args:
            template: Template text.
            value: The validated value.
            count: Number of validators in the rendering chain.

        Returns:
            Final message text.
        """
        ...
