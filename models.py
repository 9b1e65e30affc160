"""Wire models for the calculator panel.

A panel is everything a remote view needs to draw one calculator: the
display text, a snapshot of the state behind it, and the rendered button
grid.  These are data models only -- the state machine lives in
``calculator.py``.
"""
from __future__ import annotations

import math
import uuid

from pydantic import BaseModel, Field, field_validator

from buttons import Button, ButtonColor, ButtonFace, render_grid
from calculator import Calculator, CalculatorState


def _new_id() -> str:
    return uuid.uuid4().hex


def _finite(value: float) -> float | None:
    return value if math.isfinite(value) else None


# ---------------------------------------------------------------------------
# Button faces
# ---------------------------------------------------------------------------

class Face(BaseModel):
    """A rendered button as sent to remote views."""

    label: str
    color: ButtonColor
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    text_color: str

    @classmethod
    def from_face(cls, face: ButtonFace) -> Face:
        return cls(
            label=face.label,
            color=face.color,
            width=face.width,
            height=face.height,
            text_color=face.text_color,
        )


# ---------------------------------------------------------------------------
# State snapshot
# ---------------------------------------------------------------------------

class StateSnapshot(BaseModel):
    """Read-only copy of a ``CalculatorState``.

    Non-finite numbers are sent as null (JSON has no inf / nan); the
    display text still carries "inf" / "nan".
    """

    display: str
    current: float | None
    previous: float | None
    operation: str | None = None
    awaiting_new_number: bool = False

    @classmethod
    def from_state(cls, state: CalculatorState) -> StateSnapshot:
        return cls(
            display=state.display,
            current=_finite(state.current),
            previous=_finite(state.previous),
            operation=state.operation.symbol if state.operation else None,
            awaiting_new_number=state.awaiting_new_number,
        )


class Panel(BaseModel):
    """Full calculator panel: display, state and button grid."""

    id: str
    display: str
    state: StateSnapshot
    rows: list[list[Face]]

    @classmethod
    def build(cls, session_id: str, calculator: Calculator) -> Panel:
        return cls(
            id=session_id,
            display=calculator.display,
            state=StateSnapshot.from_state(calculator.state),
            rows=[[Face.from_face(f) for f in row] for row in render_grid()],
        )


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class PressRequest(BaseModel):
    """Payload for pressing one button, e.g. ``{"button": "7"}``."""

    button: str = Field(..., min_length=1, max_length=8)

    @field_validator("button")
    @classmethod
    def button_exists(cls, v: str) -> str:
        Button.parse(v)  # raises ValueError for unknown tokens
        return v.strip()

    def to_button(self) -> Button:
        return Button.parse(self.button)
