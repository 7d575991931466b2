"""Service - stateful runner around a Machine."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from tick_machine.normalize import to_event_object

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tick_machine.machine import Machine
    from tick_machine.types import Event, State

logger = logging.getLogger(__name__)

Listener = Callable[["State"], None]


class InterpreterStatus(Enum):
    STOPPED = "stopped"
    STARTED = "started"


class Subscription:
    """Handle returned by ``Service.subscribe``."""

    def __init__(self, service: Service, listener: Listener) -> None:
        self._service = service
        self._listener = listener

    def unsubscribe(self) -> None:
        """Remove exactly this listener. Safe to call more than once."""
        self._service._remove_listener(self._listener)


class Service:
    """Owns the current state of one running machine.

    ``send`` computes the next state, stores it, runs its actions in order
    and then notifies listeners, all synchronously. A ``send`` made from
    inside an action is processed to completion before the outer ``send``
    continues; listeners of the outer call then receive the latest state.
    """

    def __init__(self, machine: Machine) -> None:
        self._machine = machine
        self._state = machine.initial_state
        self._status = InterpreterStatus.STOPPED
        # id(listener) -> listener, insertion-ordered
        self._listeners: dict[int, Listener] = {}

    @property
    def machine(self) -> Machine:
        return self._machine

    @property
    def status(self) -> InterpreterStatus:
        return self._status

    def current_state(self) -> State:
        return self._state

    def start(self) -> Service:
        """Start the service and notify listeners with the current state."""
        self._status = InterpreterStatus.STARTED
        logger.debug("%s: service started in %r", self._machine.id, self._state.value)
        self._notify()
        return self

    def stop(self) -> Service:
        """Stop the service. Drops every listener."""
        self._status = InterpreterStatus.STOPPED
        self._listeners.clear()
        logger.debug("%s: service stopped in %r", self._machine.id, self._state.value)
        return self

    def send(self, event: Event | Mapping[str, Any] | str) -> None:
        """Apply ``event``. Ignored while stopped."""
        if self._status is not InterpreterStatus.STARTED:
            logger.debug("%s: ignoring %r, service is stopped", self._machine.id, event)
            return
        event_obj = to_event_object(event)
        state = self._machine.transition(self._state, event_obj)
        self._state = state
        for action in state.actions:
            if action.exec is not None:
                action.exec(state.context, event_obj)
        self._notify()

    def subscribe(self, listener: Listener) -> Subscription:
        """Register ``listener``. Subscribing the same object twice is a no-op."""
        self._listeners[id(listener)] = listener
        return Subscription(self, listener)

    def _remove_listener(self, listener: Listener) -> None:
        if self._listeners.get(id(listener)) is listener:
            del self._listeners[id(listener)]

    def _notify(self) -> None:
        for key, listener in list(self._listeners.items()):
            # skip listeners removed by an earlier listener in this round
            if self._listeners.get(key) is listener:
                listener(self._state)


def interpret(machine: Machine) -> Service:
    """Return a stopped Service for ``machine``."""
    return Service(machine)
