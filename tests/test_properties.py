"""Property-based tests using Hypothesis.

These tests drive the calculator with generated press sequences and check
the behavioural properties that must hold for *all* of them.  They
complement the white-box tests by exploring the press space broadly
rather than targeting specific transitions.
"""
from __future__ import annotations

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from buttons import CLEAR, DECIMAL, EQUALS, Button, all_buttons
from calculator import Calculator, Operation, format_number
from spec import validate_state

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

digits = st.lists(st.integers(min_value=0, max_value=9), min_size=1, max_size=25)
any_button = st.sampled_from(all_buttons())
press_runs = st.lists(any_button, max_size=40)
operations = st.sampled_from(list(Operation))


def _run(buttons: list[Button]) -> Calculator:
    calc = Calculator()
    for b in buttons:
        calc.dispatch(b)
    return calc


def _type(calc: Calculator, ds: list[int]) -> None:
    for d in ds:
        calc.dispatch(Button.number(d))


# ===================================================================
# DIGIT ENTRY
# ===================================================================

class TestDigitEntryProperties:

    @given(ds=digits)
    def test_display_is_concatenation(self, ds):
        calc = Calculator()
        _type(calc, ds)
        expected = "".join(map(str, ds)).lstrip("0") or "0"
        assert calc.display == expected

    @given(ds=digits)
    def test_current_is_numeric_value(self, ds):
        calc = Calculator()
        _type(calc, ds)
        assert calc.state.current == float("".join(map(str, ds)))

    @given(ds=digits, run=press_runs)
    def test_clear_then_digits(self, ds, run):
        """Digit entry after Clear is independent of earlier history."""
        calc = _run(run)
        calc.dispatch(CLEAR)
        _type(calc, ds)
        assert calc.display == ("".join(map(str, ds)).lstrip("0") or "0")


# ===================================================================
# DECIMAL POINT
# ===================================================================

class TestDecimalProperties:

    @given(run=press_runs)
    def test_second_decimal_is_noop(self, run):
        calc = _run(run)
        calc.dispatch(DECIMAL)
        once = calc.state.copy()
        calc.dispatch(DECIMAL)
        assert calc.display == once.display
        assert calc.display.count(".") <= 1

    @given(run=press_runs)
    def test_decimal_never_changes_current(self, run):
        calc = _run(run)
        before = calc.state.current
        calc.dispatch(DECIMAL)
        after = calc.state.current
        assert after == before or (math.isnan(after) and math.isnan(before))


# ===================================================================
# OPERATORS & EQUALS
# ===================================================================

class TestOperationProperties:

    @given(a=digits, b=digits, op=operations)
    def test_single_operation(self, a, b, op):
        calc = Calculator()
        _type(calc, a)
        calc.dispatch(Button.operator(op.symbol))
        _type(calc, b)
        calc.dispatch(EQUALS)
        left = float("".join(map(str, a)))
        right = float("".join(map(str, b)))
        assert calc.display == format_number(op.apply(left, right))

    @given(a=digits, b=digits, first=operations, second=operations)
    def test_repeated_operator_keeps_first_operand(self, a, b, first, second):
        """'a op1 op2 b =' is 'a op2 b ='."""
        calc = Calculator()
        _type(calc, a)
        calc.dispatch(Button.operator(first.symbol))
        calc.dispatch(Button.operator(second.symbol))
        _type(calc, b)
        calc.dispatch(EQUALS)

        direct = Calculator()
        _type(direct, a)
        direct.dispatch(Button.operator(second.symbol))
        _type(direct, b)
        direct.dispatch(EQUALS)

        assert calc.display == direct.display

    @given(run=press_runs)
    def test_equals_idempotent(self, run):
        calc = _run(run)
        calc.dispatch(EQUALS)
        first = calc.display
        calc.dispatch(EQUALS)
        calc.dispatch(EQUALS)
        assert calc.display == first

    @given(run=press_runs)
    def test_equals_clears_chain(self, run):
        calc = _run(run)
        calc.dispatch(EQUALS)
        assert calc.state.operation is None
        assert calc.state.previous == 0.0
        assert calc.state.awaiting_new_number is False

    @given(ds=digits)
    def test_division_by_zero_is_infinite_or_nan(self, ds):
        calc = Calculator()
        _type(calc, ds)
        calc.press_sequence(["/", "0", "="])
        value = float("".join(map(str, ds)))
        assert calc.display == ("nan" if value == 0 else "inf")


# ===================================================================
# CLEAR & INVARIANTS
# ===================================================================

class TestStateProperties:

    @given(run=press_runs)
    def test_clear_always_resets(self, run):
        calc = _run(run)
        calc.dispatch(CLEAR)
        assert calc.display == "0"
        assert calc.state.current == 0.0
        assert calc.state.previous == 0.0
        assert calc.state.operation is None
        assert calc.state.awaiting_new_number is False

    @given(run=press_runs)
    @settings(max_examples=300)
    def test_invariants_hold_after_every_press(self, run):
        calc = Calculator()
        for b in run:
            calc.dispatch(b)
            report = validate_state(calc.state)
            assert report.passed, report.summary()

    @given(run=press_runs)
    def test_listener_sees_every_press(self, run):
        calc = Calculator()
        seen: list[str] = []
        calc.subscribe(lambda s: seen.append(s.display))
        for b in run:
            calc.dispatch(b)
        assert len(seen) == len(run)
        if run:
            assert seen[-1] == calc.display
