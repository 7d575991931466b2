"""Normalizers - turn shorthand descriptors into canonical objects.

Every function here is total: strings and mappings are converted, canonical
instances pass through unchanged.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tick_machine.types import Action, Context, Event, State, Transition


def to_array(value: Any) -> list[Any]:
    """None -> [], list/tuple -> list copy, anything else -> [value].

    >>> to_array(None), to_array("a"), to_array(["a", "b"])
    ([], ['a'], ['a', 'b'])
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def to_state_object(state: State | Mapping[str, Any] | str, context: Context = None) -> State:
    """String -> ``State(value=state, context=context)``."""
    if isinstance(state, State):
        return state
    if isinstance(state, str):
        return State(value=state, context=context)
    return State(
        value=state["value"],
        context=state.get("context", context),
        actions=tuple(state.get("actions", ())),
        changed=state.get("changed"),
    )


def to_event_object(event: Event | Mapping[str, Any] | str) -> Event:
    if isinstance(event, Event):
        return event
    if isinstance(event, str):
        return Event(type=event)
    data = {k: v for k, v in event.items() if k != "type"}
    return Event(type=event["type"], data=data)


def to_transition_object(transition: Transition | Mapping[str, Any] | str) -> Transition:
    if isinstance(transition, Transition):
        return transition
    if isinstance(transition, str):
        return Transition(target=transition)
    return Transition(
        target=transition.get("target"),
        actions=tuple(to_array(transition.get("actions"))),
        cond=transition.get("cond"),
    )


def to_action_object(action: Action | Mapping[str, Any] | str | Any) -> Action:
    """String -> named action, callable -> action bound to it by ``__name__``."""
    if isinstance(action, Action):
        return action
    if isinstance(action, str):
        return Action(type=action)
    if isinstance(action, Mapping):
        return Action(
            type=action["type"],
            exec=action.get("exec"),
            assignment=action.get("assignment"),
        )
    if callable(action):
        return Action(type=getattr(action, "__name__", repr(action)), exec=action)
    return Action(type=str(action))
