"""Guard conditions: immutable variants evaluated against an EvalContext."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from tick_statemachine import vec
from tick_statemachine.types import EvalContext, Vec

# A callable returning a Vec, an object with a ``position`` attribute, or a Vec.
PositionSource = Any


def position_accessor(source: PositionSource) -> Callable[[], Vec]:
    """Wrap a position source in a zero-argument accessor.

    The source is read on every call, so a moving target is always seen
    where it is now.
    """
    if callable(source):
        return source
    if hasattr(source, "position"):
        return lambda: source.position
    return lambda: tuple(source)


# --- Variants ---


@dataclass(frozen=True)
class Immediate:
    """Always true. Unconditional or fallback transitions."""


@dataclass(frozen=True)
class Elapsed:
    """True once ``seconds`` have passed since the source state was entered."""

    seconds: float

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise ValueError("seconds must be non-negative")


@dataclass(frozen=True)
class WithinDistance:
    """True while the owner is strictly closer than ``max_distance`` to target."""

    target: PositionSource
    max_distance: float

    def __post_init__(self) -> None:
        if self.max_distance < 0:
            raise ValueError("max_distance must be non-negative")


@dataclass(frozen=True)
class OutsideDistance:
    """True while the owner is strictly farther than ``min_distance`` from target."""

    target: PositionSource
    min_distance: float

    def __post_init__(self) -> None:
        if self.min_distance < 0:
            raise ValueError("min_distance must be non-negative")


@dataclass(frozen=True)
class Predicate:
    """Arbitrary guard over the evaluation context. Must not mutate state."""

    fn: Callable[[EvalContext], bool]


Condition = Union[Immediate, Elapsed, WithinDistance, OutsideDistance, Predicate]


# --- Factories ---


def immediate() -> Immediate:
    return Immediate()


def elapsed(seconds: float) -> Elapsed:
    return Elapsed(seconds)


def within_distance(target: PositionSource, max_distance: float) -> WithinDistance:
    return WithinDistance(target, max_distance)


def outside_distance(target: PositionSource, min_distance: float) -> OutsideDistance:
    return OutsideDistance(target, min_distance)


def predicate(fn: Callable[[EvalContext], bool]) -> Predicate:
    return Predicate(fn)


# --- Evaluation ---


def evaluate(condition: Condition, ctx: EvalContext) -> bool:
    """Evaluate a single guard, dispatching by variant."""
    if isinstance(condition, Immediate):
        return True
    if isinstance(condition, Elapsed):
        return ctx.now() >= ctx.last_enter_time + condition.seconds
    if isinstance(condition, WithinDistance):
        return _distance_to(condition.target, ctx) < condition.max_distance
    if isinstance(condition, OutsideDistance):
        return _distance_to(condition.target, ctx) > condition.min_distance
    if isinstance(condition, Predicate):
        return bool(condition.fn(ctx))
    raise TypeError(f"Not a condition: {condition!r}")


def _distance_to(target: PositionSource, ctx: EvalContext) -> float:
    return vec.distance(ctx.position(), position_accessor(target)())
