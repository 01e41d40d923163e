"""Tests for SinglePolicy and BroadcastPolicy."""

import pytest

from tracklane.adapters.providers.fake import FakeEmitter
from tracklane.core.config.enums import FailureMode
from tracklane.core.events import Event
from tracklane.core.exceptions import BroadcastError, ConfigurationError, ProviderError
from tracklane.domains.dispatch import BroadcastPolicy, DispatchPolicy, SinglePolicy

EVENTS = [
    Event(name="UserSignup", payload="{userId:42}"),
    Event(name="Purchase", payload='{"amount": 12.50, "currency": "EUR"}'),
    Event(name="page_view", payload=""),
]


# ---------------------------------------------------------------------------
# SinglePolicy
# ---------------------------------------------------------------------------


class TestSinglePolicy:
    @pytest.mark.parametrize("event", EVENTS, ids=[e.name for e in EVENTS])
    def test_emits_exactly_once_unmodified(self, event):
        target = FakeEmitter()

        SinglePolicy(target).send(event)

        assert target.events == [event]
        assert target.events[0].payload == event.payload

    def test_requires_target(self):
        with pytest.raises(ConfigurationError):
            SinglePolicy(None)

    def test_provider_error_propagates_unchanged(self, event):
        error = ProviderError("a", "down")
        policy = SinglePolicy(FakeEmitter("a", should_raise=error))

        with pytest.raises(ProviderError) as exc_info:
            policy.send(event)

        assert exc_info.value is error

    def test_foreign_error_wrapped_with_target_name(self, event):
        policy = SinglePolicy(FakeEmitter("custom", should_raise=KeyError("boom")))

        with pytest.raises(ProviderError) as exc_info:
            policy.send(event)

        assert exc_info.value.provider == "custom"
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_satisfies_protocol(self):
        policy = SinglePolicy(FakeEmitter())
        assert isinstance(policy, DispatchPolicy)
        assert policy.kind == "single"


# ---------------------------------------------------------------------------
# BroadcastPolicy
# ---------------------------------------------------------------------------


class TestBroadcastPolicy:
    @pytest.mark.parametrize("size", [1, 2, 5])
    def test_every_target_once_in_index_order(self, journal, event, size):
        targets = [FakeEmitter(f"t{i}", journal=journal) for i in range(size)]

        BroadcastPolicy(targets).send(event)

        assert journal == [f"t{i}" for i in range(size)]
        assert all(t.events == [event] for t in targets)

    def test_same_event_instance_reaches_every_target(self, event):
        a, b = FakeEmitter("a"), FakeEmitter("b")

        BroadcastPolicy([a, b]).send(event)

        assert a.events[0] is event
        assert b.events[0] is event

    def test_duplicate_targets_invoked_independently(self, journal, event):
        a = FakeEmitter("a", journal=journal)

        BroadcastPolicy([a, a]).send(event)

        assert a.call_count == 2
        assert journal == ["a", "a"]

    def test_targets_copied_at_construction(self, event):
        a, b = FakeEmitter("a"), FakeEmitter("b")
        targets = [a]
        policy = BroadcastPolicy(targets)
        targets.append(b)

        policy.send(event)

        assert b.call_count == 0
        assert policy.targets == (a,)

    def test_requires_targets(self):
        with pytest.raises(ConfigurationError):
            BroadcastPolicy([])

    def test_rejects_none_target(self):
        with pytest.raises(ConfigurationError):
            BroadcastPolicy([FakeEmitter(), None])

    def test_kind(self):
        assert BroadcastPolicy([FakeEmitter()]).kind == "broadcast"


class TestBroadcastBestEffort:
    def test_failing_target_does_not_block_others(self, journal, event):
        a = FakeEmitter("A", journal=journal, should_raise=ProviderError("A", "rejected"))
        b = FakeEmitter("B", journal=journal)

        with pytest.raises(BroadcastError) as exc_info:
            BroadcastPolicy([a, b]).send(event)

        assert journal == ["A", "B"]
        assert b.events == [event]
        assert exc_info.value.providers == ["A"]
        assert "B" not in str(exc_info.value)

    def test_aggregates_all_failures_in_order(self, event):
        targets = [
            FakeEmitter("a", should_raise=ProviderError("a")),
            FakeEmitter("b"),
            FakeEmitter("c", should_raise=RuntimeError("c down")),
        ]

        with pytest.raises(BroadcastError) as exc_info:
            BroadcastPolicy(targets).send(event)

        assert exc_info.value.providers == ["a", "c"]
        assert all(isinstance(e, ProviderError) for e in exc_info.value.errors)
        assert targets[1].call_count == 1

    def test_no_error_when_all_succeed(self, event):
        BroadcastPolicy([FakeEmitter("a"), FakeEmitter("b")]).send(event)


class TestBroadcastFailFast:
    def test_stops_at_first_failure(self, journal, event):
        error = ProviderError("A", "rejected")
        a = FakeEmitter("A", journal=journal, should_raise=error)
        b = FakeEmitter("B", journal=journal)
        policy = BroadcastPolicy([a, b], failure_mode=FailureMode.FAIL_FAST)

        with pytest.raises(ProviderError) as exc_info:
            policy.send(event)

        assert exc_info.value is error
        assert journal == ["A"]
        assert b.call_count == 0

    def test_accepts_string_failure_mode(self):
        policy = BroadcastPolicy([FakeEmitter()], failure_mode="fail_fast")
        assert policy.failure_mode is FailureMode.FAIL_FAST

    def test_unknown_failure_mode_is_configuration_error(self):
        with pytest.raises(ConfigurationError, match="retry_forever"):
            BroadcastPolicy([FakeEmitter()], failure_mode="retry_forever")
