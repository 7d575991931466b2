"""Machine - pure evaluation of a machine configuration.

``Machine.transition`` is a reducer: it computes the next ``State`` and the
ordered actions the caller must run, and never runs them itself.
"""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from tick_machine.config import MachineConfig, StateNodeConfig
from tick_machine.normalize import (
    to_action_object,
    to_array,
    to_event_object,
    to_state_object,
    to_transition_object,
)
from tick_machine.registry import Actions, Guards
from tick_machine.types import (
    ASSIGN,
    INIT_EVENT,
    Action,
    Assignment,
    Context,
    Event,
    GuardFn,
    MachineConfigError,
    State,
    StateId,
    UnknownStateError,
    UnknownTargetError,
)

logger = logging.getLogger(__name__)


class Machine:
    """A machine definition plus its named guard and action bindings."""

    def __init__(
        self,
        config: MachineConfig,
        guards: Guards | None = None,
        actions: Actions | None = None,
    ) -> None:
        self._config = config
        self._guards = guards if guards is not None else Guards()
        self._actions = actions if actions is not None else Actions()
        # A missing initial node is reported by the first transition.
        node = config.states.get(config.initial)
        entry = node.entry if node is not None else None
        actions, context, _ = self._fold_actions(
            to_array(entry), config.context, Event(type=INIT_EVENT),
        )
        self._initial_state = State(
            value=config.initial, context=context, actions=tuple(actions),
        )

    @property
    def id(self) -> str:
        return self._config.id

    @property
    def config(self) -> MachineConfig:
        return self._config

    @property
    def initial_state(self) -> State:
        return self._initial_state

    def validate(self) -> None:
        """Check the state table eagerly.

        Node keys must be supported, and the initial state and every
        transition target must exist. Raises MachineConfigError,
        UnknownStateError or UnknownTargetError on the first problem.
        """
        states = self._config.states
        if self._config.initial not in states:
            raise UnknownStateError(self.id, self._config.initial)
        for name, node in states.items():
            if node.extra:
                raise MachineConfigError(
                    f"Machine '{self.id}' state '{name}' has unsupported keys: "
                    f"{', '.join(sorted(node.extra))}"
                )
            for event_type, raw in node.on.items():
                for candidate in to_array(raw):
                    if not candidate:
                        continue
                    target = to_transition_object(candidate).target
                    if target is not None and target not in states:
                        raise UnknownTargetError(self.id, name, event_type, target)

    def transition(
        self,
        state: State | Mapping[str, Any] | StateId,
        event: Event | Mapping[str, Any] | str,
    ) -> State:
        """Return the state reached by sending ``event`` in ``state``.

        The first candidate whose guard passes wins. An unknown event type or
        an unmet guard yields the unchanged state with ``changed=False``.
        Raises UnknownStateError if ``state`` is not defined.
        """
        current = to_state_object(state, self._config.context)
        value, context = current.value, current.context
        node = self._node(value)

        failure = State(value=value, context=context, actions=(), changed=False)
        if not node.on:
            return failure

        event_obj = to_event_object(event)
        candidates = to_array(node.on.get(event_obj.type))
        if not candidates:
            logger.debug("%s: no transition for %r in %r", self.id, event_obj.type, value)
            return failure

        for candidate in candidates:
            if not candidate:
                return failure
            tr = to_transition_object(candidate)
            target = tr.target if tr.target is not None else value
            if not self._check(tr.cond, context, event_obj):
                continue

            next_node = self._config.states.get(target)
            if next_node is None:
                raise UnknownTargetError(self.id, value, event_obj.type, target)
            actions, next_context, assigned = self._fold_actions(
                [*to_array(node.exit), *tr.actions, *to_array(next_node.entry)],
                context,
                event_obj,
            )
            logger.debug("%s: %r --%s--> %r", self.id, value, event_obj.type, target)
            return State(
                value=target,
                context=next_context,
                actions=tuple(actions),
                changed=target != value or len(actions) > 0 or assigned,
            )

        logger.debug("%s: guards blocked %r in %r", self.id, event_obj.type, value)
        return failure

    def _node(self, value: StateId) -> StateNodeConfig:
        node = self._config.states.get(value)
        if node is None:
            raise UnknownStateError(self.id, value)
        return node

    def _check(self, cond: GuardFn | str | None, context: Context, event: Event) -> bool:
        if cond is None:
            return True
        if isinstance(cond, str):
            return self._guards.check(cond, context, event)
        return bool(cond(context, event))

    def _bind(self, action: Action) -> Action:
        if action.exec is None and action.type != ASSIGN:
            fn = self._actions.get(action.type)
            if fn is not None:
                return dataclasses.replace(action, exec=fn)
        return action

    def _fold_actions(
        self, raw: list[Any], context: Context, event: Event,
    ) -> tuple[list[Action], Context, bool]:
        """Single pass: collect non-assign actions, thread context through assigns."""
        actions: list[Action] = []
        next_context = context
        assigned = False
        for item in raw:
            if not item:
                continue
            action = self._bind(to_action_object(item))
            if action.type != ASSIGN:
                actions.append(action)
                continue
            assigned = True
            next_context = _apply_assignment(action.assignment, next_context, event)
        return actions, next_context, assigned


def _apply_assignment(assignment: Assignment, context: Context, event: Event) -> Context:
    """Derive a new context; ``context`` itself is never mutated."""
    if callable(assignment):
        return assignment(context, event)
    updates = {
        key: value(context, event) if callable(value) else value
        for key, value in assignment.items()
    }
    if dataclasses.is_dataclass(context) and not isinstance(context, type):
        return dataclasses.replace(context, **updates)
    merged = dict(context or {})
    merged.update(updates)
    return merged


def create_machine(
    config: MachineConfig | Mapping[str, Any],
    *,
    guards: Guards | None = None,
    actions: Actions | None = None,
    strict: bool = False,
) -> Machine:
    """Build a Machine from a MachineConfig or its nested-dict form.

    With ``strict=True`` the initial state and all transition targets are
    validated immediately instead of on first use.
    """
    if not isinstance(config, MachineConfig):
        config = MachineConfig.from_dict(config)
    machine = Machine(config, guards=guards, actions=actions)
    if strict:
        machine.validate()
    return machine
