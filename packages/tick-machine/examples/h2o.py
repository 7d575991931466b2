"""States of water, computed without an interpreter.

``transition`` is a pure function, so a machine can be explored by
calling it directly with a state id and an event.

Run: python -m examples.h2o
"""

from tick_machine import create_machine

h2o = create_machine({
    "id": "h2o",
    "initial": "water",
    "states": {
        "ice": {"on": {"HEAT": "water", "SUBLIMATE": "vapor"}},
        "water": {"on": {"COOL": "ice", "HEAT": "vapor"}},
        "vapor": {"on": {"COOL": "water", "DEPOSIT": "ice"}},
    },
}, strict=True)

EVENTS = ["HEAT", "COOL", "SUBLIMATE", "DEPOSIT"]


def main() -> None:
    print("=== h2o transition table ===\n")
    print(f"  {'':8}" + "".join(f"{e:>11}" for e in EVENTS))
    for value in h2o.config.states:
        cells = []
        for event in EVENTS:
            next_state = h2o.transition(value, event)
            cells.append(next_state.value if next_state.changed else "-")
        print(f"  {value:8}" + "".join(f"{c:>11}" for c in cells))


if __name__ == "__main__":
    main()
