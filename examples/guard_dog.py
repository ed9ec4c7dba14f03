"""Guard dog -- an agent driven by a guarded state machine.

Demonstrates:
- Building a state graph with new_state / add_transition
- Distance guards that follow a moving target
- Elapsed-time guards measured from state entry
- Driving the machine from a fixed-timestep host loop

Run: python -m examples.guard_dog
"""

from dataclasses import dataclass

from tick_statemachine import (
    StateMachine,
    TickClock,
    elapsed,
    outside_distance,
    within_distance,
)


@dataclass
class Body:
    position: tuple[float, float]


def main() -> None:
    print("=== Guard Dog ===\n")

    clock = TickClock(tps=10)
    dog = Body(position=(0.0, 0.0))
    intruder = Body(position=(30.0, 0.0))

    def report(old: str, new: str) -> None:
        print(f"  t={clock.now():4.1f}s  {old} -> {new}")

    machine = StateMachine(position=dog, clock=clock, on_transition=report, name="dog")

    idle = machine.new_state("Idle")
    chase = machine.new_state("Chase")
    bark = machine.new_state("Bark")
    rest = machine.new_state("Rest")

    def run_at_intruder() -> None:
        x, y = dog.position
        tx, _ = intruder.position
        step = 1.5 if tx > x else -1.5
        dog.position = (x + step, y)

    # First satisfied transition wins, so "lost track" is checked before "caught up".
    idle.add_transition(chase, within_distance(intruder, 12.0))
    chase.on_tick(run_at_intruder)
    chase.add_transition(idle, outside_distance(intruder, 20.0))
    chase.add_transition(bark, within_distance(intruder, 2.0))
    bark.on_enter(lambda: print("  Woof!"))
    bark.add_transition(rest, elapsed(1.0))
    rest.add_transition(idle, elapsed(2.0))

    machine.change_state(idle)

    for _ in range(80):
        clock.advance()
        # The intruder walks toward the house, then stops.
        ix, iy = intruder.position
        intruder.position = (max(ix - 0.5, 8.0), iy)
        machine.tick()

    print(f"\nDone. Dog is in {machine.current_state_name} at tick {clock.tick_number}.")


if __name__ == "__main__":
    main()
