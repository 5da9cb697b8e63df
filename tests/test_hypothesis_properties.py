"""Property-based tests using Hypothesis for chain components.

This module contains property tests that verify ordering and message
aggregation invariants of the OR chains using Hypothesis strategies.
"""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from orchain import MessageRenderer, OrChain, RendererConfig, VerboseOrChain
from orchain.chain.aggregation import aggregate_messages, aggregate_verbose_messages
from orchain.models import ChainConfig, MessageGroup
from tests.strategies import (
    MESSAGE_TEXTS,
    CallLog,
    StubValidator,
    attach_plan_strategy,
    message_groups_strategy,
    priority_strategy,
)

PLAIN_RENDERER = MessageRenderer(RendererConfig(message_length=-1, obscure_value=False))


def _build_chain(plan: list[tuple[str, int | None]], log: CallLog) -> OrChain:
    chain = OrChain()
    for name, priority in plan:
        validator = StubValidator(name, messages=[f"{name} failed"], log=log)
        if priority is None:
            chain.attach_front(validator)
        else:
            chain.attach(validator, priority=priority)
    return chain


# =============================================================================
# Ordering Property Tests
# =============================================================================


class TestOrderingProperties:
    """Property tests for registry ordering and execution order."""

    @given(attach_plan_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_entries_order_equals_execution_order(self, plan: list[tuple[str, int | None]]) -> None:
        """Enumeration order is exactly the order validators are called in."""
        log = CallLog()
        chain = _build_chain(plan, log)

        chain.execute("value")

        assert log == [entry.validator.name for entry in chain.get_entries()]

    @given(attach_plan_strategy())
    @settings(max_examples=100)
    def test_entries_sorted_by_priority_then_sequence(
        self, plan: list[tuple[str, int | None]]
    ) -> None:
        """Entries are ordered by descending priority, ties in attach order."""
        chain = _build_chain(plan, CallLog())
        entries = chain.get_entries()

        keys = [(-entry.priority, entry.sequence) for entry in entries]
        assert keys == sorted(keys)
        assert len({entry.sequence for entry in entries}) == len(entries)

    @given(attach_plan_strategy())
    @settings(max_examples=100)
    def test_attach_front_runs_first(self, plan: list[tuple[str, int | None]]) -> None:
        """A prepended validator always runs before every existing one."""
        log = CallLog()
        chain = _build_chain(plan, log)
        chain.attach_front(StubValidator("front", log=log))

        chain.execute("value")

        assert log[0] == "front"

    @given(attach_plan_strategy())
    @settings(max_examples=100)
    def test_merge_into_empty_reproduces_entries(self, plan: list[tuple[str, int | None]]) -> None:
        """Merging into an empty chain keeps order and priorities."""
        source = _build_chain(plan, CallLog())
        merged = OrChain().merge(source)

        assert [(e.validator, e.priority) for e in merged.get_entries()] == [
            (e.validator, e.priority) for e in source.get_entries()
        ]


# =============================================================================
# Execution Property Tests
# =============================================================================


class TestExecutionProperties:
    """Property tests for OR semantics."""

    @given(
        st.lists(st.tuples(st.booleans(), priority_strategy()), min_size=0, max_size=8),
    )
    @settings(max_examples=100)
    def test_valid_iff_any_member_valid(self, members: list[tuple[bool, int]]) -> None:
        """The chain is valid exactly when some member is valid, and then has no messages."""
        chain = OrChain()
        for i, (valid, priority) in enumerate(members):
            validator = StubValidator(f"v{i}", valid=valid, messages=["failed"])
            chain.attach(validator, priority=priority)

        result = chain.execute("value")

        assert result.is_valid == any(valid for valid, _ in members)
        if result.is_valid:
            assert result.errors == []
            assert chain.get_messages() == {}

    @given(st.lists(st.lists(st.sampled_from(MESSAGE_TEXTS), max_size=3), max_size=6))
    @settings(max_examples=100)
    def test_failure_messages_follow_registry_order(self, message_lists: list[list[str]]) -> None:
        """All messages of reporting validators appear once each, in order."""
        chain = OrChain()
        for i, messages in enumerate(message_lists):
            # Every validator uses the same source keys
            chain.attach(StubValidator(f"v{i}", messages=messages))

        result = chain.execute("value")

        expected = [text for messages in message_lists for text in messages]
        assert [e.message for e in result.errors] == expected
        assert len({e.field for e in result.errors}) == len(expected)


# =============================================================================
# Aggregation Property Tests
# =============================================================================


class TestAggregationProperties:
    """Property tests for the plain and verbose aggregators."""

    @given(message_groups_strategy())
    @settings(max_examples=100)
    def test_plain_keys_unique_and_ordered(self, groups: list[MessageGroup]) -> None:
        messages = aggregate_messages(groups)

        expected = [text for group in groups for text in group.messages.values()]
        assert list(messages.values()) == expected
        assert len(messages) == len(expected)

    @given(
        message_groups_strategy(),
        st.one_of(st.none(), st.just("pre")),
        st.one_of(st.none(), st.just("post")),
    )
    @settings(max_examples=100)
    def test_verbose_pre_post_exactly_once(
        self, groups: list[MessageGroup], pre: str | None, post: str | None
    ) -> None:
        config = ChainConfig(
            pre_message_template=pre, post_message_template=post, default_union_template=""
        )
        values = list(aggregate_verbose_messages(groups, config, str).values())

        assert values.count("pre") == (1 if pre is not None else 0)
        assert values.count("post") == (1 if post is not None else 0)
        if pre is not None:
            assert values[0] == "pre"
        if post is not None:
            assert values[-1] == "post"

    @given(message_groups_strategy())
    @settings(max_examples=100)
    def test_verbose_is_plain_plus_unions_between_groups(self, groups: list[MessageGroup]) -> None:
        """Removing union messages gives the plain aggregation; unions sit only between groups."""
        config = ChainConfig(default_union_template="<union>")

        def render(template: str) -> str:
            return f"<{template}>"

        values = list(aggregate_verbose_messages(groups, config, render).values())
        group_texts = [text for group in groups for text in group.messages.values()]

        assert [v for v in values if not v.startswith("<")] == group_texts
        if values:
            assert not values[0].startswith("<")
            assert not values[-1].startswith("<")
        assert sum(1 for v in values if v.startswith("<")) <= max(len(groups) - 1, 0)


class TestVerboseChainProperties:
    """Property tests for VerboseOrChain end to end."""

    @given(st.integers(min_value=0, max_value=5), st.text(max_size=10))
    @settings(max_examples=50)
    def test_default_unions_between_every_reporting_validator(self, size: int, value: str) -> None:
        chain = VerboseOrChain(renderer=PLAIN_RENDERER, post_message_template="%count%")
        for i in range(size):
            chain.attach(StubValidator(f"v{i}", messages=[f"m{i}"]))

        values = [e.message for e in chain.execute(value).errors]

        expected: list[str] = []
        for i in range(size):
            if i:
                expected.append(" or ")
            expected.append(f"m{i}")
        assert values == expected + [str(size)]
