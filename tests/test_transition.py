"""Tests for Transition construction and guard composition."""
from __future__ import annotations

import pytest

from tick_statemachine import (
    InvalidTransitionError,
    ManualClock,
    StateMachine,
    Transition,
    elapsed,
    immediate,
    predicate,
)


@pytest.fixture
def machine():
    return StateMachine(position=(0.0, 0.0, 0.0), clock=ManualClock())


class TestTransitionConstruction:
    """Test cases for building transitions."""

    def test_none_target_raises(self):
        """A transition to None is rejected at construction."""
        with pytest.raises(InvalidTransitionError):
            Transition(None)

    def test_non_state_target_raises(self):
        """A target that is not a State is rejected."""
        with pytest.raises(InvalidTransitionError):
            Transition("chase")

    def test_error_is_a_value_error(self):
        """Construction errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Transition(None)

    def test_conditions_stored_as_tuple_in_order(self, machine):
        """Guards keep their registration order."""
        target = machine.new_state("target")
        guards = [immediate(), elapsed(1.0)]
        transition = Transition(target, guards)
        assert transition.conditions == (immediate(), elapsed(1.0))
        assert transition.target is target


class TestMeetsConditions:
    """Test cases for AND composition of guards."""

    def test_no_guards_is_unconditional(self, machine):
        """Zero guards behaves exactly like a single Immediate guard."""
        source = machine.new_state("source")
        target = machine.new_state("target")
        ctx = machine.context(source)
        assert Transition(target).meets_conditions(ctx) is True
        assert Transition(target, (immediate(),)).meets_conditions(ctx) is True

    @pytest.mark.parametrize(
        "results, expected",
        [
            ((True,), True),
            ((False,), False),
            ((True, True, True), True),
            ((True, False, True), False),
            ((False, False), False),
        ],
    )
    def test_fires_iff_all_guards_pass(self, machine, results, expected):
        """The transition passes only when every guard passes."""
        source = machine.new_state("source")
        target = machine.new_state("target")
        guards = tuple(predicate(lambda ctx, r=r: r) for r in results)
        transition = Transition(target, guards)
        assert transition.meets_conditions(machine.context(source)) is expected

    def test_short_circuits_on_first_false(self, machine):
        """Guards after the first failing one are not evaluated."""
        source = machine.new_state("source")
        target = machine.new_state("target")
        calls = []

        def guard(name, result):
            def fn(ctx):
                calls.append(name)
                return result
            return predicate(fn)

        transition = Transition(target, (guard("a", True), guard("b", False), guard("c", True)))
        assert transition.meets_conditions(machine.context(source)) is False
        assert calls == ["a", "b"]

    def test_guards_see_source_state(self, machine):
        """Guards are evaluated against the source state, not the target."""
        source = machine.new_state("source")
        target = machine.new_state("target")
        seen = []
        transition = Transition(target, (predicate(lambda ctx: seen.append(ctx.state_name) or True),))
        transition.meets_conditions(machine.context(source))
        assert seen == ["source"]
