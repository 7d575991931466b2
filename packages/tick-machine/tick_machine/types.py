"""Canonical value objects and errors for machine evaluation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

StateId = str
Context = Any

ASSIGN = "tick_machine.assign"
INIT_EVENT = "tick_machine.init"


@dataclass(frozen=True)
class Event:
    """Canonical event. Extra fields of a mapping-shaped event live in ``data``."""

    type: str
    data: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        if key == "type":
            return self.type
        return self.data[key]


ActionFn = Callable[[Context, Event], None]
GuardFn = Callable[[Context, Event], bool]
Assignment = Union[
    Callable[[Context, Event], Context],
    dict[str, Any],
]


@dataclass(frozen=True)
class Action:
    """Action descriptor. ``exec`` is None for unbound named actions."""

    type: str
    exec: ActionFn | None = None
    assignment: Assignment | None = None


@dataclass(frozen=True)
class Transition:
    """Transition descriptor. A missing ``target`` means the current state."""

    target: StateId | None = None
    actions: tuple[Any, ...] = ()
    cond: GuardFn | str | None = None


@dataclass(frozen=True)
class State:
    """Snapshot of a machine: finite value, context and pending actions.

    ``changed`` is None only on a machine's initial state.
    """

    value: StateId
    context: Context = None
    actions: tuple[Action, ...] = ()
    changed: bool | None = None


class MachineError(Exception):
    """Base class for errors raised by tick-machine."""


class MachineConfigError(MachineError, ValueError):
    """Raised on structurally malformed machine configuration."""


class UnknownStateError(MachineError, KeyError):
    """Raised when a state id is not a key of the machine's state table."""

    def __init__(self, machine_id: str, state: StateId, message: str | None = None) -> None:
        self.machine_id = machine_id
        self.state = state
        if message is None:
            message = f"Machine '{machine_id}' does not have a state named '{state}'"
        super().__init__(message)


class UnknownTargetError(UnknownStateError):
    """Raised when a transition targets a state the machine does not define."""

    def __init__(
        self, machine_id: str, source: StateId, event_type: str, target: StateId,
    ) -> None:
        self.source = source
        self.event_type = event_type
        super().__init__(
            machine_id,
            target,
            f"Machine '{machine_id}' does not have a state named '{target}' "
            f"(target of '{event_type}' in state '{source}')",
        )
