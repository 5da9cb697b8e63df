from __future__ import annotations

from abstract_validation_base import ValidationResult

from orchain import MessageRenderer, OrChain, PredicateValidator, ResultValidatorAdapter
from orchain.protocols import ChainableValidatorProtocol


class DigitsValidator:
    """Result-returning validator in the abstract_validation_base style."""

    @property
    def name(self) -> str:
        return "digits"

    def validate(self, item: str) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if not item.isdigit():
            result.add_error("value", "must contain only digits", item)
        if len(item) > 5:
            result.add_error("value", "must be at most 5 characters", item)
        return result


def test_result_adapter_reports_errors_in_order() -> None:
    """Result errors should become messages keyed by field and position."""
    adapter = ResultValidatorAdapter(DigitsValidator())

    assert adapter.validate("abcdefg") is False
    assert adapter.get_messages() == {
        "value:0": "must contain only digits",
        "value:1": "must be at most 5 characters",
    }
    assert adapter.name == "digits"


def test_result_adapter_clears_messages_on_success() -> None:
    """A passing call should drop the messages of the previous failure."""
    adapter = ResultValidatorAdapter(DigitsValidator())
    adapter.validate("abc")
    assert adapter.validate("123") is True
    assert adapter.get_messages() == {}


def test_adapters_satisfy_protocol() -> None:
    """Adapters and chains should all satisfy the chainable validator protocol."""
    assert isinstance(ResultValidatorAdapter(DigitsValidator()), ChainableValidatorProtocol)
    assert isinstance(PredicateValidator(lambda v, c: True, "never"), ChainableValidatorProtocol)
    assert isinstance(OrChain(), ChainableValidatorProtocol)


def test_predicate_validator(renderer: MessageRenderer) -> None:
    """PredicateValidator should use the context and render its failure message."""
    validator = PredicateValidator(
        lambda value, context: value in context["allowed"],
        "'%value%' is not allowed",
        message_key="notAllowed",
        renderer=renderer,
    )
    context = {"allowed": {"a", "b"}}

    assert validator.validate("a", context) is True
    assert validator.get_messages() == {}
    assert validator.validate("z", context) is False
    assert validator.get_messages() == {"notAllowed": "'z' is not allowed"}


def test_adapters_in_chain(renderer: MessageRenderer) -> None:
    """Adapted validators should short-circuit and report like any other member."""
    chain = OrChain()
    chain.attach(PredicateValidator(lambda v, c: v == "", "not empty", renderer=renderer))
    chain.attach(ResultValidatorAdapter(DigitsValidator()))

    assert chain.execute("").is_valid
    assert chain.execute("42").is_valid

    result = chain.execute("4x")
    assert [e.message for e in result.errors] == ["not empty", "must contain only digits"]


def test_predicate_validator_renders_numbers(renderer: MessageRenderer) -> None:
    """Failure messages should show numeric values as written."""
    validator = PredicateValidator(
        lambda value, context: value < 10, "%value% is too large", renderer=renderer
    )

    assert validator.validate(3) is True
    assert validator.validate(12) is False
    assert validator.get_messages() == {"invalid": "12 is too large"}
    assert validator.validate(10.5) is False
    assert validator.get_messages() == {"invalid": "10.5 is too large"}
