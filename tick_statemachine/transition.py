"""Guarded edge between two states."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick_statemachine.conditions import Condition, evaluate
from tick_statemachine.types import EvalContext, InvalidTransitionError

if TYPE_CHECKING:
    from tick_statemachine.state import State


@dataclass(frozen=True)
class Transition:
    """Fires iff every guard passes. No guards means unconditional."""

    target: State
    conditions: tuple[Condition, ...] = ()

    def __post_init__(self) -> None:
        from tick_statemachine.state import State

        if self.target is None:
            raise InvalidTransitionError(
                "Cannot transition to a None state. Were the states created first?"
            )
        if not isinstance(self.target, State):
            raise InvalidTransitionError(
                f"Transition target must be a State, got {type(self.target).__name__}"
            )
        object.__setattr__(self, "conditions", tuple(self.conditions))

    def meets_conditions(self, ctx: EvalContext) -> bool:
        return all(evaluate(c, ctx) for c in self.conditions)
