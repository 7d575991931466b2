"""Light bulb -- the smallest interpreted machine.

Demonstrates:
- Writing a machine as a plain dict
- Entry and transition actions bound as plain functions
- Starting a service and watching it with a listener
- Events ignored once the service is stopped

Run: python -m examples.light_bulb
"""

from tick_machine import State, create_machine, interpret


def buy_new_bulb(context, event) -> None:
    print("  (action) time to buy a new bulb")


light_bulb = create_machine({
    "id": "light-bulb",
    "initial": "unlit",
    "states": {
        "lit": {"on": {"TOGGLE": "unlit", "BREAK": "broken"}},
        "unlit": {"on": {"TOGGLE": "lit", "BREAK": "broken"}},
        "broken": {"entry": buy_new_bulb},
    },
})


def show(state: State) -> None:
    print(f"  state={state.value!r:10} changed={state.changed}")


def main() -> None:
    print("=== Light bulb ===\n")

    service = interpret(light_bulb)
    service.subscribe(show)

    # start() notifies listeners with the initial state.
    service.start()

    for event in ["TOGGLE", "TOGGLE", "BREAK", "TOGGLE"]:
        print(f"send {event}")
        service.send(event)

    service.stop()
    service.send("TOGGLE")
    print(f"\nStopped in {service.current_state().value!r}.")


if __name__ == "__main__":
    main()
