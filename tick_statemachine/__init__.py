"""tick-statemachine - Guarded finite state machine for tick-driven agents."""
from __future__ import annotations

from tick_statemachine import vec
from tick_statemachine.clock import ManualClock, MonotonicClock, TickClock, TimeSource
from tick_statemachine.conditions import (
    Condition,
    Elapsed,
    Immediate,
    OutsideDistance,
    Predicate,
    WithinDistance,
    elapsed,
    evaluate,
    immediate,
    outside_distance,
    predicate,
    within_distance,
)
from tick_statemachine.machine import StateMachine
from tick_statemachine.state import State
from tick_statemachine.transition import Transition
from tick_statemachine.types import (
    NO_STATE,
    EvalContext,
    InvalidStateError,
    InvalidTransitionError,
    PositionSourceError,
    StateMachineError,
    Vec,
)

__all__ = [
    "NO_STATE",
    "Condition",
    "Elapsed",
    "EvalContext",
    "Immediate",
    "InvalidStateError",
    "InvalidTransitionError",
    "ManualClock",
    "MonotonicClock",
    "OutsideDistance",
    "PositionSourceError",
    "Predicate",
    "State",
    "StateMachine",
    "StateMachineError",
    "TickClock",
    "TimeSource",
    "Transition",
    "Vec",
    "WithinDistance",
    "elapsed",
    "evaluate",
    "immediate",
    "outside_distance",
    "predicate",
    "vec",
    "within_distance",
]
