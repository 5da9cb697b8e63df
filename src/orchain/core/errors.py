"""Error classes with package identification.

Configuration mistakes and lookup misses are raised as
PydanticCustomError subclasses so callers can catch them either as
package errors or as plain ValueError.
"""

from __future__ import annotations

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "orchain"


class OrChainError(PydanticCustomError):
    """Base error for the orchain package.

    Inherits from PydanticCustomError to stay compatible with Pydantic's
    error handling. Instances are created with the usual
    ``(error_type, message_template, context)`` arguments.
    """

    @classmethod
    def create(
        cls,
        error_type: str,
        message_template: str,
        context: dict | None = None,
    ) -> OrChainError:
        """Build an error with the package name merged into its context.

        Args:
            error_type: Type/category of the error.
            message_template: Error message (can include {placeholders}).
            context: Additional context dict merged into error context.

        Returns:
            Error instance of the calling class.
        """
        return cls(error_type, message_template, {"package": PACKAGE_NAME, **(context or {})})

    @classmethod
    def from_validation_error(cls, error: Exception, context: dict | None = None) -> OrChainError:
        """Wrap a pydantic.ValidationError (or any exception) as a package error.

        Args:
            error: The error to wrap.
            context: Additional context to include in the error.

        Returns:
            Error instance with the messages of the original error.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            details = error.errors()
            error_messages = "; ".join(
                f"{'.'.join(str(loc) for loc in e.get('loc', ())) or 'value'}: {e.get('msg', '')}"
                for e in details
            )
            first_type = details[0].get("type", "validation_error") if details else None
            first_type = first_type or "validation_error"
            return cls.create(first_type, error_messages, context)
        return cls.create("validation_error", str(error), context)


class ChainConfigurationError(OrChainError):
    """Raised when a chain, its config, or its renderer receives an invalid setting."""


class UnknownValidatorError(OrChainError):
    """Raised by the validator lookup when a name is not registered."""
