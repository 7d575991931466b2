"""Unit tests for shorthand normalizers."""
from __future__ import annotations

from tick_machine import Action, Event, State, Transition
from tick_machine.normalize import (
    to_action_object,
    to_array,
    to_event_object,
    to_state_object,
    to_transition_object,
)


def test_to_array_none_is_empty():
    assert to_array(None) == []


def test_to_array_scalar_is_singleton():
    """Strings are scalars, not sequences of characters."""
    assert to_array("ping") == ["ping"]
    assert to_array({"target": "a"}) == [{"target": "a"}]


def test_to_array_sequence_is_copied():
    items = ["a", "b"]
    result = to_array(items)
    assert result == ["a", "b"]
    assert result is not items
    assert to_array(("a",)) == ["a"]


def test_to_state_object_from_string():
    assert to_state_object("idle") == State(value="idle")


def test_to_state_object_uses_given_context_for_string():
    assert to_state_object("idle", {"n": 1}) == State(value="idle", context={"n": 1})


def test_to_state_object_passthrough():
    state = State(value="idle", context={"n": 1}, changed=True)
    assert to_state_object(state, {"n": 2}) is state


def test_to_state_object_from_mapping():
    state = to_state_object({"value": "lit", "context": {"a": 1}})
    assert state.value == "lit"
    assert state.context == {"a": 1}
    assert state.changed is None


def test_to_event_object_from_string():
    assert to_event_object("TOGGLE") == Event(type="TOGGLE")


def test_to_event_object_from_mapping_keeps_extra_fields():
    event = to_event_object({"type": "DEPOSIT", "amount": 25})
    assert event.type == "DEPOSIT"
    assert event.data == {"amount": 25}
    assert event["amount"] == 25
    assert event["type"] == "DEPOSIT"


def test_to_event_object_passthrough():
    event = Event(type="X")
    assert to_event_object(event) is event


def test_to_transition_object_from_string():
    assert to_transition_object("lit") == Transition(target="lit")


def test_to_transition_object_from_mapping():
    cond = lambda ctx, e: True
    tr = to_transition_object({"target": "b", "actions": "log", "cond": cond})
    assert tr.target == "b"
    assert tr.actions == ("log",)
    assert tr.cond is cond


def test_to_transition_object_mapping_without_target():
    tr = to_transition_object({"actions": ["a", "b"]})
    assert tr.target is None
    assert tr.actions == ("a", "b")
    assert tr.cond is None


def test_to_action_object_from_string():
    assert to_action_object("notify") == Action(type="notify")


def test_to_action_object_from_function():
    def ring_bell(context, event):
        pass

    action = to_action_object(ring_bell)
    assert action.type == "ring_bell"
    assert action.exec is ring_bell


def test_to_action_object_from_mapping():
    fn = lambda c, e: None
    action = to_action_object({"type": "log", "exec": fn})
    assert action == Action(type="log", exec=fn)


def test_to_action_object_passthrough():
    action = Action(type="log")
    assert to_action_object(action) is action
