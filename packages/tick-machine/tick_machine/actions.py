"""Built-in action creators."""
from __future__ import annotations

from tick_machine.types import ASSIGN, Action, Assignment


def assign(assignment: Assignment) -> Action:
    """Return an action that updates context instead of running a side effect.

    ``assignment`` is either ``(context, event) -> context``, which replaces
    the context wholesale, or a dict whose values are literals or per-key
    updaters ``(context, event) -> value``.
    """
    return Action(type=ASSIGN, assignment=assignment)
