"""Smart door -- guards, named actions and context.

Demonstrates:
- Named guards resolved through a Guards registry
- Named actions bound through an Actions registry
- assign() updating context, both per key and wholesale
- A guarded candidate list with an unconditional fallback

Run: python -m examples.door
"""

from tick_machine import Actions, Guards, assign, create_machine, interpret

guards = Guards()
guards.register("correctCode", lambda ctx, e: e["code"] == ctx["code"])
guards.register("tooManyAttempts", lambda ctx, e: ctx["attempts"] >= 2)

actions = Actions()
actions.register("alarm", lambda ctx, e: print("  (action) ALARM: door blocked"))
actions.register("welcome", lambda ctx, e: print("  (action) welcome home"))

door = create_machine({
    "id": "door",
    "initial": "locked",
    "context": {"code": "1234", "attempts": 0},
    "states": {
        "locked": {
            "on": {
                "UNLOCK": [
                    {
                        "target": "unlocked",
                        "cond": "correctCode",
                        "actions": assign({"attempts": 0}),
                    },
                    {"target": "blocked", "cond": "tooManyAttempts", "actions": "alarm"},
                    {"actions": assign({"attempts": lambda ctx, e: ctx["attempts"] + 1})},
                ],
            },
        },
        "unlocked": {
            "entry": "welcome",
            "on": {"OPEN": "opened", "LOCK": "locked"},
        },
        "opened": {"on": {"CLOSE": "unlocked"}},
        "blocked": {
            "on": {
                "RESET": {
                    "target": "locked",
                    "actions": assign(lambda ctx, e: {**ctx, "attempts": 0}),
                },
            },
        },
    },
}, guards=guards, actions=actions, strict=True)


def main() -> None:
    print("=== Smart door ===\n")

    service = interpret(door)
    service.subscribe(
        lambda s: print(f"  {s.value:9} attempts={s.context['attempts']}")
    )
    service.start()

    for code in ["0000", "1111", "2222"]:
        print(f"UNLOCK {code}")
        service.send({"type": "UNLOCK", "code": code})

    print("RESET")
    service.send("RESET")
    print("UNLOCK 1234")
    service.send({"type": "UNLOCK", "code": "1234"})
    service.send("OPEN")

    service.stop()


if __name__ == "__main__":
    main()
