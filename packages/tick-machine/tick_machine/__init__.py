"""tick-machine - Declarative finite state machines with a pure transition function."""
from __future__ import annotations

from tick_machine.actions import assign
from tick_machine.config import MachineConfig, StateNodeConfig
from tick_machine.interpreter import InterpreterStatus, Service, Subscription, interpret
from tick_machine.machine import Machine, create_machine
from tick_machine.registry import Actions, Guards
from tick_machine.types import (
    ASSIGN,
    INIT_EVENT,
    Action,
    Event,
    MachineConfigError,
    MachineError,
    State,
    Transition,
    UnknownStateError,
    UnknownTargetError,
)

__all__ = [
    "ASSIGN",
    "INIT_EVENT",
    "Action",
    "Actions",
    "Event",
    "Guards",
    "InterpreterStatus",
    "Machine",
    "MachineConfig",
    "MachineConfigError",
    "MachineError",
    "Service",
    "State",
    "StateNodeConfig",
    "Subscription",
    "Transition",
    "UnknownStateError",
    "UnknownTargetError",
    "assign",
    "create_machine",
    "interpret",
]
