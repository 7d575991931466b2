"""Named guard and action registries.

A machine config may name a guard (``"cond": "hasKey"``) or an action
(``"actions": "notify"``) instead of passing a callable. The registries
given to ``create_machine`` resolve those names.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_machine.types import ActionFn, Context, Event, GuardFn


class Guards:
    """Named ``(context, event) -> bool`` predicates for string ``cond`` values."""

    def __init__(self) -> None:
        self._guards: dict[str, GuardFn] = {}

    def register(self, name: str, fn: GuardFn) -> None:
        """Bind ``name`` to a predicate. A later call with the same name wins."""
        self._guards[name] = fn

    def check(self, name: str, context: Context, event: Event) -> bool:
        """Run the named predicate. Raises KeyError for an unregistered name."""
        return bool(self._guards[name](context, event))

    def has(self, name: str) -> bool:
        """True if a ``cond`` naming ``name`` can be resolved."""
        return name in self._guards

    def names(self) -> list[str]:
        """Registered guard names, in registration order."""
        return list(self._guards)


class Actions:
    """Implementations for action types given as plain strings."""

    def __init__(self) -> None:
        self._actions: dict[str, ActionFn] = {}

    def register(self, name: str, fn: ActionFn) -> None:
        """Bind an implementation to an action type. Overwrites if bound."""
        self._actions[name] = fn

    def get(self, name: str) -> ActionFn | None:
        """Return the implementation for ``name``, or None if unbound.

        Unbound actions still appear in a transition's action list; the
        interpreter skips them.
        """
        return self._actions.get(name)

    def has(self, name: str) -> bool:
        return name in self._actions

    def names(self) -> list[str]:
        """Bound action types, in registration order."""
        return list(self._actions)
