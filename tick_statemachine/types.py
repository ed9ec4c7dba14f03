"""Shared type aliases, evaluation context, and errors for the state machine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Vec = tuple[float, ...]

NO_STATE = "None"


@dataclass(frozen=True, slots=True)
class EvalContext:
    """Everything a guard may read while its source state is being checked.

    ``now`` and ``position`` are accessors, queried only by the guards that
    need them.
    """

    state_name: str
    last_enter_time: float
    now: Callable[[], float]
    position: Callable[[], Vec]


class StateMachineError(Exception):
    """Base class for state machine errors."""


class InvalidTransitionError(StateMachineError, ValueError):
    """Raised when a transition is built without a valid target state."""


class InvalidStateError(StateMachineError, ValueError):
    """Raised when changing to a missing or foreign state."""


class PositionSourceError(StateMachineError):
    """Raised when a distance guard runs on a machine without a position."""
