"""Calculator state specification.

Defines the invariants every reachable ``CalculatorState`` must satisfy
and the press-by-press scenarios the state machine must reproduce.  The
spec is executable -- each rule is a callable predicate and each scenario
is plain data -- so conformance tests iterate over it instead of
restating it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from calculator import CalculatorState, Operation, parse_number


# ---------------------------------------------------------------------------
# Rule: a named, executable predicate over a state
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Rule:
    """A named invariant over calculator state."""

    id: str
    name: str
    description: str
    check: Callable[[CalculatorState], bool]


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

def _same_number(a: float, b: float) -> bool:
    if math.isnan(a) and math.isnan(b):
        return True
    return a == b


def _at_most_one_decimal(s: CalculatorState) -> bool:
    return s.display.count(".") <= 1


def _display_not_empty(s: CalculatorState) -> bool:
    return bool(s.display)


def _current_matches_display(s: CalculatorState) -> bool:
    """A trailing "." has not been reparsed yet, so it is exempt."""
    if s.display.endswith("."):
        return True
    return _same_number(s.current, parse_number(s.display))


def _operation_known(s: CalculatorState) -> bool:
    return s.operation is None or isinstance(s.operation, Operation)


def _awaiting_implies_pending(s: CalculatorState) -> bool:
    return not s.awaiting_new_number or s.operation is not None


def _idle_previous_is_zero(s: CalculatorState) -> bool:
    return s.operation is not None or s.previous == 0


STATE_RULES: list[Rule] = [
    Rule(
        id="ST-ONE-DECIMAL",
        name="at_most_one_decimal",
        description="Display contains at most one decimal point",
        check=_at_most_one_decimal,
    ),
    Rule(
        id="ST-DISPLAY",
        name="display_not_empty",
        description="Display is never empty",
        check=_display_not_empty,
    ),
    Rule(
        id="ST-CURRENT",
        name="current_matches_display",
        description="Current number equals the parse of the display (0 on failure)",
        check=_current_matches_display,
    ),
    Rule(
        id="ST-OPERATION",
        name="operation_known",
        description="Pending operation is empty or one of + - * /",
        check=_operation_known,
    ),
    Rule(
        id="ST-AWAITING",
        name="awaiting_implies_pending",
        description="Awaiting a new number only while an operation is pending",
        check=_awaiting_implies_pending,
    ),
    Rule(
        id="ST-PREVIOUS",
        name="idle_previous_is_zero",
        description="Previous number is 0 when no operation is pending",
        check=_idle_previous_is_zero,
    ),
]


@dataclass(frozen=True)
class ValidationResult:
    rule: Rule
    passed: bool


@dataclass(frozen=True)
class ValidationReport:
    results: list[ValidationResult]

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[Rule]:
        return [r.rule for r in self.results if not r.passed]

    def summary(self) -> str:
        failures = self.failures
        if not failures:
            return f"All {len(self.results)} rules passed"
        lines = [f"{len(failures)}/{len(self.results)} rules failed:"]
        lines += [f"  [{r.id}] {r.name}: {r.description}" for r in failures]
        return "\n".join(lines)


def _holds(rule: Rule, state: CalculatorState) -> bool:
    # A rule that cannot be evaluated on this state counts as broken.
    try:
        return bool(rule.check(state))
    except Exception:
        return False


def validate_state(state: CalculatorState) -> ValidationReport:
    """Run every state rule and return a report."""
    return ValidationReport(
        results=[ValidationResult(rule, _holds(rule, state)) for rule in STATE_RULES]
    )


# ---------------------------------------------------------------------------
# Scenarios: press sequences and the display they must end on
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Scenario:
    id: str
    description: str
    presses: tuple[str, ...]
    expected_display: str


SCENARIOS: list[Scenario] = [
    Scenario(
        "SC-DIGITS",
        "Digits concatenate with the leading zero suppressed",
        ("0", "1", "2", "3"),
        "123",
    ),
    Scenario(
        "SC-DOUBLE-DECIMAL",
        "A second decimal press is ignored",
        ("3", ".", "."),
        "3.",
    ),
    Scenario(
        "SC-OPERATOR-CHAIN",
        "Repeating an operator does not recapture the left operand",
        ("5", "+", "+", "3", "="),
        "8.0",
    ),
    Scenario(
        "SC-CLEAR",
        "Clear resets the display",
        ("9", "*", "4", "C"),
        "0",
    ),
    Scenario(
        "SC-MULTIPLY",
        "7 * 6 = 42",
        ("7", "*", "6", "="),
        "42.0",
    ),
    Scenario(
        "SC-SUBTRACT",
        "Subtraction takes the captured operand first",
        ("3", "-", "1", "0", "="),
        "-7.0",
    ),
    Scenario(
        "SC-DIV-ZERO",
        "Division by zero shows infinity",
        ("5", "/", "0", "="),
        "inf",
    ),
    Scenario(
        "SC-ZERO-OVER-ZERO",
        "0 / 0 shows nan",
        ("0", "/", "0", "="),
        "nan",
    ),
    Scenario(
        "SC-EQUALS-ALONE",
        "Equals with nothing pending redisplays the current number",
        ("1", "2", ".", "5", "="),
        "12.5",
    ),
    Scenario(
        "SC-EQUALS-REPEAT",
        "Repeated equals leaves the display unchanged",
        ("7", "*", "6", "=", "=", "="),
        "42.0",
    ),
    Scenario(
        "SC-LAZY-DECIMAL",
        "A trailing point keeps the current number until the next digit",
        ("5", "/", "0", "=", ".", "+", "1", "="),
        "inf",
    ),
    Scenario(
        "SC-OPERATOR-SWAP",
        "The last operator pressed before the operand wins",
        ("8", "+", "-", "2", "="),
        "6.0",
    ),
]
