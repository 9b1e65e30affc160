"""Button descriptors and the static calculator grid.

A button is a tagged value: its ``kind`` says which transition it drives
and ``value`` carries the payload (the digit for NUMBER, the symbol for
OPERATOR, nothing otherwise).  Rendering is a pure function from a button
to its face, so every view (desktop window, HTTP panel) draws the same
grid.

Layout
------
    C  /  *  -
    7  8  9  +
    4  5  6
    1  2  3
    0     .  =      ("0" is double width)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Kinds and colours
# ---------------------------------------------------------------------------

class ButtonKind(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    DECIMAL = "decimal"


class ButtonColor(str, Enum):
    """Background colour category for a button face.

    The decimal point has no category of its own; it is drawn in DIGIT.
    """

    DIGIT = "blue"
    OPERATOR = "orange"
    EQUALS = "green"
    CLEAR = "red"


DIGITS = "0123456789"
OPERATOR_SYMBOLS = ("+", "-", "*", "/")

# Typographic spellings accepted when parsing tokens.
OPERATOR_ALIASES = {
    "−": "-",   # minus sign
    "×": "*",   # multiplication sign
    "÷": "/",   # division sign
}

BUTTON_WIDTH = 70
WIDE_BUTTON_WIDTH = 140
BUTTON_HEIGHT = 70
TEXT_COLOR = "white"


# ---------------------------------------------------------------------------
# Button
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Button:
    """A single key on the calculator."""

    kind: ButtonKind
    value: int | str | None = None

    def __post_init__(self) -> None:
        if self.kind == ButtonKind.NUMBER:
            if not isinstance(self.value, int) or not 0 <= self.value <= 9:
                raise ValueError(f"Number button needs a digit 0-9, got {self.value!r}")
        elif self.kind == ButtonKind.OPERATOR:
            if not isinstance(self.value, str) or not self.value:
                raise ValueError(f"Operator button needs a symbol, got {self.value!r}")
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} button takes no value")

    @classmethod
    def number(cls, digit: int) -> Button:
        return cls(ButtonKind.NUMBER, digit)

    @classmethod
    def operator(cls, symbol: str) -> Button:
        return cls(ButtonKind.OPERATOR, symbol)

    @classmethod
    def parse(cls, token: str) -> Button:
        """Map a label token ("7", "+", "=", "C", ".") back to its button."""
        token = token.strip()
        if len(token) == 1 and token in DIGITS:
            return cls.number(int(token))
        token = OPERATOR_ALIASES.get(token, token)
        if token in OPERATOR_SYMBOLS:
            return cls.operator(token)
        if token == "=":
            return EQUALS
        if token.upper() == "C":
            return CLEAR
        if token == ".":
            return DECIMAL
        raise ValueError(f"Not a calculator button: {token!r}")

    @property
    def label(self) -> str:
        if self.kind in (ButtonKind.NUMBER, ButtonKind.OPERATOR):
            return str(self.value)
        return _FIXED_LABELS[self.kind]

    @property
    def color(self) -> ButtonColor:
        return _COLORS[self.kind]

    @property
    def is_wide(self) -> bool:
        return self.kind == ButtonKind.NUMBER and self.value == 0


_FIXED_LABELS = {
    ButtonKind.EQUALS: "=",
    ButtonKind.CLEAR: "C",
    ButtonKind.DECIMAL: ".",
}

_COLORS = {
    ButtonKind.NUMBER: ButtonColor.DIGIT,
    ButtonKind.OPERATOR: ButtonColor.OPERATOR,
    ButtonKind.EQUALS: ButtonColor.EQUALS,
    ButtonKind.CLEAR: ButtonColor.CLEAR,
    ButtonKind.DECIMAL: ButtonColor.DIGIT,
}

EQUALS = Button(ButtonKind.EQUALS)
CLEAR = Button(ButtonKind.CLEAR)
DECIMAL = Button(ButtonKind.DECIMAL)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ButtonFace:
    """What a view needs to draw one button."""

    label: str
    color: ButtonColor
    width: int
    height: int
    text_color: str = TEXT_COLOR


def render(button: Button) -> ButtonFace:
    """Pure mapping from a button to its face."""
    return ButtonFace(
        label=button.label,
        color=button.color,
        width=WIDE_BUTTON_WIDTH if button.is_wide else BUTTON_WIDTH,
        height=BUTTON_HEIGHT,
    )


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------

BUTTON_GRID: tuple[tuple[Button, ...], ...] = (
    (CLEAR, Button.operator("/"), Button.operator("*"), Button.operator("-")),
    (Button.number(7), Button.number(8), Button.number(9), Button.operator("+")),
    (Button.number(4), Button.number(5), Button.number(6)),
    (Button.number(1), Button.number(2), Button.number(3)),
    (Button.number(0), DECIMAL, EQUALS),
)


def all_buttons() -> list[Button]:
    """Every button on the grid, row by row."""
    return [b for row in BUTTON_GRID for b in row]


def render_grid() -> list[list[ButtonFace]]:
    return [[render(b) for b in row] for row in BUTTON_GRID]
