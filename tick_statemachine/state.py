"""State node: ordered outgoing transitions and multicast lifecycle hooks."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_statemachine.conditions import Condition
from tick_statemachine.transition import Transition
from tick_statemachine.types import EvalContext, InvalidTransitionError

if TYPE_CHECKING:
    from tick_statemachine.machine import StateMachine

Hook = Callable[[], None]


class State:
    """A named node of a machine's state graph.

    Create states with ``StateMachine.new_state``. Setup methods return the
    state itself so calls can be chained::

        idle.add_transition(chase, within_distance(player, 5.0)).on_tick(wander)

    Transition order matters: the first transition whose guards all pass
    wins, and the rest are not evaluated that tick.
    """

    def __init__(self, name: str, graph: object | None = None) -> None:
        self._name = name
        self._graph = graph
        self._transitions: list[Transition] = []
        self._last_enter_time = 0.0
        self._enter_hooks: list[Hook] = []
        self._exit_hooks: list[Hook] = []
        self._tick_hooks: list[Hook] = []
        self._fixed_tick_hooks: list[Hook] = []

    def __repr__(self) -> str:
        return f"State({self._name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def transitions(self) -> tuple[Transition, ...]:
        return tuple(self._transitions)

    @property
    def last_enter_time(self) -> float:
        """Clock time of the most recent entry, 0.0 if never entered."""
        return self._last_enter_time

    # --- Authoring ---

    def add_transition(self, target: State, *conditions: Condition) -> State:
        transition = Transition(target, conditions)
        if target._graph is not self._graph:
            raise InvalidTransitionError(
                f"Cannot transition from {self._name!r} to {target.name!r} in another machine"
            )
        self._transitions.append(transition)
        return self

    def on_enter(self, fn: Hook) -> State:
        self._enter_hooks.append(fn)
        return self

    def on_exit(self, fn: Hook) -> State:
        self._exit_hooks.append(fn)
        return self

    def on_tick(self, fn: Hook) -> State:
        self._tick_hooks.append(fn)
        return self

    def on_fixed_tick(self, fn: Hook) -> State:
        self._fixed_tick_hooks.append(fn)
        return self

    set_on_enter = on_enter
    set_on_exit = on_exit
    set_on_tick = on_tick
    set_on_fixed_tick = on_fixed_tick

    # --- Evaluation ---

    def select_transition(self, ctx: EvalContext) -> Transition | None:
        for transition in self._transitions:
            if transition.meets_conditions(ctx):
                return transition
        return None

    def check_transitions(self, machine: StateMachine) -> bool:
        """Change ``machine`` to the first satisfied target. Returns True on change."""
        transition = self.select_transition(machine.context(self))
        if transition is None:
            return False
        machine.change_state(transition.target)
        return True

    # --- Machine-facing ---

    def _run_enter(self) -> None:
        for fn in tuple(self._enter_hooks):
            fn()

    def _run_exit(self) -> None:
        for fn in tuple(self._exit_hooks):
            fn()

    def _run_tick(self) -> None:
        for fn in tuple(self._tick_hooks):
            fn()

    def _run_fixed_tick(self) -> None:
        for fn in tuple(self._fixed_tick_hooks):
            fn()

    def _stamp(self, now: float) -> None:
        self._last_enter_time = now
