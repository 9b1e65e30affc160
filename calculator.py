"""Calculator state machine.

The state lives in an explicit record (``CalculatorState``) owned by a
controller (``Calculator``).  Every button press is one synchronous
transition that mutates the state in place; views subscribe to the
controller and redraw after each dispatched press.

Transitions
-----------
digit     replace or extend the display, then reparse the current number
decimal   append "." once; the current number is NOT reparsed
operator  capture the left operand (once per operator chain), set pending op
equals    apply the pending op, show the float result, reset the chain
clear     reset everything

No transition raises.  Parse failures fall back to 0 and division by zero
follows IEEE float semantics (inf / nan end up in the display text).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable

from buttons import OPERATOR_ALIASES, Button, ButtonKind

log = logging.getLogger("calculator")

INITIAL_DISPLAY = "0"


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def _divide(a: float, b: float) -> float:
    """Float division without the ZeroDivisionError: x/0 -> +-inf, 0/0 -> nan."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> Operation | None:
        """Look up an operation by its symbol; None for anything unknown."""
        symbol = OPERATOR_ALIASES.get(symbol, symbol)
        try:
            return cls(symbol)
        except ValueError:
            return None

    def apply(self, previous: float, current: float) -> float:
        return _APPLY[self](previous, current)


_APPLY: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: lambda a, b: a + b,
    Operation.SUBTRACT: lambda a, b: a - b,
    Operation.MULTIPLY: lambda a, b: a * b,
    Operation.DIVIDE: _divide,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_number(text: str) -> float:
    """Parse display text as a float, defaulting to 0.0."""
    try:
        return float(text)
    except ValueError:
        log.debug("Unparseable display %r, using 0", text)
        return 0.0


def format_number(value: float) -> str:
    """String form of a result as shown on the display ("42.0", "inf")."""
    return repr(float(value))


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

@dataclass
class CalculatorState:
    display: str = INITIAL_DISPLAY
    current: float = 0.0
    previous: float = 0.0
    operation: Operation | None = None
    awaiting_new_number: bool = False

    def reset(self) -> None:
        self.display = INITIAL_DISPLAY
        self.current = 0.0
        self.previous = 0.0
        self.operation = None
        self.awaiting_new_number = False

    def copy(self) -> CalculatorState:
        return replace(self)


Listener = Callable[[CalculatorState], None]


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class Calculator:
    """Owns a ``CalculatorState`` and applies button presses to it."""

    def __init__(self, state: CalculatorState | None = None) -> None:
        self.state = state if state is not None else CalculatorState()
        self._listeners: list[Listener] = []

    @property
    def display(self) -> str:
        return self.state.display

    # -- notifications ------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state)`` after every dispatched press.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    # -- transitions --------------------------------------------------------

    def press_digit(self, digit: int) -> None:
        s = self.state
        if s.awaiting_new_number:
            s.display = str(digit)
            s.awaiting_new_number = False
        elif s.display == INITIAL_DISPLAY:
            s.display = str(digit)
        else:
            s.display += str(digit)
        s.current = parse_number(s.display)
        log.debug("Digit %d -> display=%s current=%r", digit, s.display, s.current)

    def press_decimal(self) -> None:
        # Lazy reparse: "3." keeps current == 3 until the next digit.
        s = self.state
        if "." not in s.display:
            s.display += "."
            log.debug("Decimal -> display=%s", s.display)
        else:
            log.debug("Decimal ignored, display already %s", s.display)

    def press_operator(self, symbol: str) -> None:
        op = Operation.from_symbol(symbol)
        if op is None:
            log.debug("Ignoring unknown operator %r", symbol)
            return
        s = self.state
        if not s.awaiting_new_number:
            s.previous = s.current
        s.operation = op
        s.awaiting_new_number = True
        log.debug("Operator %s (previous=%r)", op.symbol, s.previous)

    def press_equals(self) -> None:
        s = self.state
        if s.operation is not None:
            result = s.operation.apply(s.previous, s.current)
            log.debug("%r %s %r = %r", s.previous, s.operation.symbol, s.current, result)
            s.current = result
        s.display = format_number(s.current)
        s.previous = 0.0
        s.operation = None
        s.awaiting_new_number = False

    def press_clear(self) -> None:
        self.state.reset()
        log.debug("Clear")

    # -- dispatch -----------------------------------------------------------

    def dispatch(self, button: Button) -> CalculatorState:
        """Apply one button press and notify listeners."""
        if button.kind == ButtonKind.NUMBER:
            self.press_digit(button.value)
        elif button.kind == ButtonKind.OPERATOR:
            self.press_operator(button.value)
        elif button.kind == ButtonKind.EQUALS:
            self.press_equals()
        elif button.kind == ButtonKind.CLEAR:
            self.press_clear()
        elif button.kind == ButtonKind.DECIMAL:
            self.press_decimal()
        self._notify()
        return self.state

    def press_sequence(self, tokens: Iterable[str]) -> str:
        """Dispatch a run of button tokens ("1", "+", "=") and return the display."""
        for token in tokens:
            self.dispatch(Button.parse(token))
        return self.state.display
