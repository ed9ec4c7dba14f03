"""StateMachine - current state, state changes, and the per-tick update."""
from __future__ import annotations

import logging
from typing import Callable

from tick_statemachine.clock import MonotonicClock, TimeSource
from tick_statemachine.conditions import PositionSource, position_accessor
from tick_statemachine.state import State
from tick_statemachine.types import (
    NO_STATE,
    EvalContext,
    InvalidStateError,
    PositionSourceError,
    Vec,
)

logger = logging.getLogger(__name__)


class StateMachine:
    def __init__(
        self,
        position: PositionSource | None = None,
        clock: TimeSource | None = None,
        on_transition: Callable[[str, str], None] | None = None,
        name: str = "StateMachine",
    ) -> None:
        self._position = (
            position_accessor(position) if position is not None else self._no_position
        )
        self._clock = clock if clock is not None else MonotonicClock()
        self._on_transition = on_transition
        self._name = name
        self._graph = object()
        self._states: list[State] = []
        self._current: State | None = None

    def __repr__(self) -> str:
        return f"StateMachine({self._name!r}, current={self.current_state_name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def clock(self) -> TimeSource:
        return self._clock

    @property
    def states(self) -> tuple[State, ...]:
        """All states in creation order. Names are labels and may repeat."""
        return tuple(self._states)

    @property
    def current_state(self) -> State | None:
        return self._current

    @property
    def current_state_name(self) -> str:
        return self._current.name if self._current is not None else NO_STATE

    @property
    def is_running(self) -> bool:
        return self._current is not None

    def new_state(self, name: str) -> State:
        state = State(name, self._graph)
        self._states.append(state)
        return state

    def get_state(self, name: str) -> State:
        """First state created with ``name``. Raises KeyError if none."""
        for state in self._states:
            if state.name == name:
                return state
        raise KeyError(name)

    def time_in_state(self) -> float:
        if self._current is None:
            return 0.0
        return self._clock.now() - self._current.last_enter_time

    def context(self, state: State | None = None) -> EvalContext:
        """Evaluation context for ``state`` (the current state by default)."""
        if state is None:
            state = self._current
        if state is None:
            raise InvalidStateError("No state to build a context for")
        return EvalContext(
            state_name=state.name,
            last_enter_time=state.last_enter_time,
            now=self._clock.now,
            position=self._position,
        )

    def change_state(self, new_state: State) -> None:
        """Exit the current state (if any), then enter ``new_state``.

        Changing to the current state re-enters it. Hook errors propagate:
        a failing exit hook leaves the old state current, a failing enter
        hook leaves ``new_state`` current and already stamped.
        """
        if new_state is None:
            raise InvalidStateError("Cannot change to a None state")
        if not isinstance(new_state, State):
            raise InvalidStateError(
                f"Expected a State, got {type(new_state).__name__}"
            )
        if new_state._graph is not self._graph:
            raise InvalidStateError(
                f"State {new_state.name!r} does not belong to {self._name}"
            )

        old_name = self.current_state_name
        if self._current is not None:
            self._current._run_exit()
        self._current = new_state
        new_state._stamp(self._clock.now())
        logger.debug("%s: %s -> %s", self._name, old_name, new_state.name)
        new_state._run_enter()
        # An enter hook may already have moved on to another state.
        if self._on_transition is not None and self._current is new_state:
            self._on_transition(old_name, new_state.name)

    def tick(self) -> None:
        """Run the current state's tick hooks, then check its transitions."""
        if self._current is None:
            return
        self._current._run_tick()
        self.check_transitions()

    def fixed_tick(self) -> None:
        """Fixed-timestep counterpart of ``tick``. Not coalesced with it."""
        if self._current is None:
            return
        self._current._run_fixed_tick()
        self.check_transitions()

    def check_transitions(self) -> bool:
        """Take at most one transition out of the current state."""
        if self._current is None:
            return False
        return self._current.check_transitions(self)

    def _no_position(self) -> Vec:
        raise PositionSourceError(f"{self._name} has no position source")
