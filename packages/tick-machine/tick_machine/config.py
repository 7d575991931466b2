"""Machine configuration dataclasses."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tick_machine.types import Context, MachineConfigError, StateId

_NODE_KEYS = frozenset({"entry", "exit", "on"})


@dataclass
class StateNodeConfig:
    """One entry of the state table.

    ``entry``/``exit`` hold zero, one or many actions. ``on`` maps event types
    to a target id, a transition mapping, or a list of guarded candidates.
    Keys this engine does not understand are kept in ``extra`` and reported
    by ``Machine.validate``.
    """

    entry: Any = None
    exit: Any = None
    on: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, name: StateId, data: Mapping[str, Any] | None) -> StateNodeConfig:
        if data is None:
            return cls()
        if isinstance(data, StateNodeConfig):
            return data
        if not isinstance(data, Mapping):
            raise MachineConfigError(
                f"State '{name}' must be a mapping, got {type(data).__name__}"
            )
        on = data.get("on") or {}
        if not isinstance(on, Mapping):
            raise MachineConfigError(f"State '{name}' has a non-mapping 'on' table")
        return cls(
            entry=data.get("entry"),
            exit=data.get("exit"),
            on=dict(on),
            extra={k: v for k, v in data.items() if k not in _NODE_KEYS},
        )


@dataclass
class MachineConfig:
    """Declarative machine definition: id, initial state, context, state table."""

    id: str
    initial: StateId
    states: dict[StateId, StateNodeConfig]
    context: Context = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MachineConfig:
        """Build from the nested-dict shape. Raises MachineConfigError.

        Only what is needed to build the machine is checked here. Unsupported
        node keys and whether ``initial`` and transition targets name real
        states are left to ``Machine.validate``.
        """
        for key in ("initial", "states"):
            if key not in data:
                raise MachineConfigError(f"Machine config is missing '{key}'")
        states = data["states"]
        if not isinstance(states, Mapping):
            raise MachineConfigError("Machine config 'states' must be a mapping")
        return cls(
            id=data.get("id", "(machine)"),
            initial=data["initial"],
            states={
                name: StateNodeConfig.from_dict(name, node)
                for name, node in states.items()
            },
            context=data.get("context"),
        )
