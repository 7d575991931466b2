"""Tests for assign and context folding."""
from dataclasses import dataclass

from tick_machine import ASSIGN, Action, assign, create_machine


def counter_machine(actions):
    return create_machine({
        "id": "counter",
        "initial": "idle",
        "context": {"count": 0, "label": "c"},
        "states": {
            "idle": {"on": {"GO": {"actions": actions}}},
        },
    })


class TestAssign:
    """Test cases for assign actions."""

    def test_assign_creates_reserved_action(self):
        fn = lambda ctx, e: ctx
        assert assign(fn) == Action(type=ASSIGN, assignment=fn)

    def test_object_assignment_with_updater(self):
        """Per-key updater receives context and event."""
        machine = counter_machine([assign({"count": lambda ctx, e: ctx["count"] + 1})])

        result = machine.transition("idle", "GO")

        assert result.context == {"count": 1, "label": "c"}
        assert result.changed is True

    def test_object_assignment_with_literal(self):
        machine = counter_machine([assign({"label": "reset"})])

        assert machine.transition("idle", "GO").context == {"count": 0, "label": "reset"}

    def test_function_assignment_replaces_context(self):
        machine = counter_machine([assign(lambda ctx, e: {"count": 10})])

        assert machine.transition("idle", "GO").context == {"count": 10}

    def test_assigns_fold_in_order(self):
        """Each assign sees the previous assign's output."""
        inc = assign({"count": lambda ctx, e: ctx["count"] + 1})
        double = assign({"count": lambda ctx, e: ctx["count"] * 2})
        machine = counter_machine([inc, inc, double])

        assert machine.transition("idle", "GO").context["count"] == 4

    def test_assign_is_not_returned(self):
        """Assign actions are consumed; other actions keep their order."""
        machine = counter_machine([
            "before",
            assign({"count": 5}),
            "after",
        ])

        result = machine.transition("idle", "GO")

        assert [a.type for a in result.actions] == ["before", "after"]

    def test_assign_only_sets_changed(self):
        """A self transition whose only effect is an assign is changed."""
        machine = counter_machine([assign({"count": 0})])

        result = machine.transition("idle", "GO")

        assert result.actions == ()
        assert result.changed is True

    def test_previous_context_not_mutated(self):
        machine = counter_machine([assign({"count": lambda ctx, e: ctx["count"] + 1})])
        start = machine.initial_state

        result = machine.transition(start, "GO")

        assert start.context == {"count": 0, "label": "c"}
        assert result.context is not start.context

    def test_updater_reads_event_data(self):
        machine = create_machine({
            "id": "wallet",
            "initial": "open",
            "context": {"total": 10},
            "states": {
                "open": {
                    "on": {
                        "DEPOSIT": {
                            "actions": assign({
                                "total": lambda ctx, e: ctx["total"] + e["amount"],
                            }),
                        },
                    },
                },
            },
        })

        result = machine.transition("open", {"type": "DEPOSIT", "amount": 5})

        assert result.context == {"total": 15}

    def test_assign_on_none_context(self):
        machine = create_machine({
            "id": "empty",
            "initial": "a",
            "states": {"a": {"on": {"SET": {"actions": assign({"x": 1})}}}},
        })

        assert machine.transition("a", "SET").context == {"x": 1}

    def test_assign_on_dataclass_context(self):
        """Dataclass contexts are updated with dataclasses.replace."""
        @dataclass(frozen=True)
        class Tally:
            count: int
            name: str

        machine = create_machine({
            "id": "tally",
            "initial": "a",
            "context": Tally(count=1, name="t"),
            "states": {
                "a": {"on": {"ADD": {"actions": assign({"count": lambda c, e: c.count + 1})}}},
            },
        })

        assert machine.transition("a", "ADD").context == Tally(count=2, name="t")

    def test_assign_in_entry_and_exit(self):
        """Assigns in exit and entry fold with the transition's own."""
        machine = create_machine({
            "id": "trail",
            "initial": "a",
            "context": {"trail": ""},
            "states": {
                "a": {
                    "exit": assign({"trail": lambda c, e: c["trail"] + "x"}),
                    "on": {
                        "NEXT": {
                            "target": "b",
                            "actions": assign({"trail": lambda c, e: c["trail"] + "t"}),
                        },
                    },
                },
                "b": {"entry": assign({"trail": lambda c, e: c["trail"] + "e"})},
            },
        })

        assert machine.transition("a", "NEXT").context == {"trail": "xte"}
