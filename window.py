"""Desktop calculator window (tkinter).

Draws the display and the button grid from ``buttons.BUTTON_GRID``,
dispatches every click into a ``Calculator`` and redraws the display from
the controller's change notifications.

Run with:
    python window.py
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import font as tkfont

from buttons import BUTTON_GRID, BUTTON_HEIGHT, BUTTON_WIDTH, Button, render
from calculator import Calculator, CalculatorState
from settings import Settings, configure_logging

log = logging.getLogger("calculator.window")

BACKGROUND = "#f2f2f2"
DISPLAY_BACKGROUND = "#e6e6e6"
DISPLAY_FOREGROUND = "black"
COLUMNS = max(sum(2 if b.is_wide else 1 for b in row) for row in BUTTON_GRID)


class CalculatorWindow(tk.Tk):
    def __init__(self, calculator: Calculator | None = None, title: str = "Calculator"):
        super().__init__()
        self.title(title)
        self.configure(bg=BACKGROUND, padx=12, pady=12)

        self.calculator = calculator if calculator is not None else Calculator()
        self.buttons: dict[Button, tk.Button] = {}

        self.font_display = tkfont.Font(size=48)
        self.font_btn = tkfont.Font(size=24)

        self._build_ui()
        self._unsubscribe = self.calculator.subscribe(self._on_state_change)
        self.protocol("WM_DELETE_WINDOW", self.close)
        log.info("Window opened")

    # ------------------ UI ------------------
    def _build_ui(self) -> None:
        self.display_var = tk.StringVar(value=self.calculator.display)
        self.display = tk.Label(
            self,
            textvariable=self.display_var,
            anchor="e",
            bg=DISPLAY_BACKGROUND,
            fg=DISPLAY_FOREGROUND,
            padx=16,
            font=self.font_display,
        )
        self.display.grid(row=0, column=0, columnspan=COLUMNS, sticky="nsew", pady=(0, 12))

        for j in range(COLUMNS):
            self.columnconfigure(j, weight=1, minsize=BUTTON_WIDTH)
        for i in range(1, len(BUTTON_GRID) + 1):
            self.rowconfigure(i, weight=1, minsize=BUTTON_HEIGHT)

        for r, row in enumerate(BUTTON_GRID, start=1):
            column = 0
            for button in row:
                span = 2 if button.is_wide else 1
                self.buttons[button] = self._make_button(button, r, column, span)
                column += span

    def _make_button(self, button: Button, row: int, column: int, span: int) -> tk.Button:
        face = render(button)
        widget = tk.Button(
            self,
            text=face.label,
            bg=face.color.value,
            fg=face.text_color,
            activebackground=face.color.value,
            activeforeground=face.text_color,
            bd=0,
            font=self.font_btn,
            command=lambda b=button: self.press(b),
        )
        widget.grid(row=row, column=column, columnspan=span, sticky="nsew", padx=6, pady=6)
        return widget

    # ------------------ EVENTS ------------------
    def press(self, button: Button) -> None:
        log.debug("Button pressed: %s", button.label)
        self.calculator.dispatch(button)

    def _on_state_change(self, state: CalculatorState) -> None:
        self.display_var.set(state.display)

    def close(self) -> None:
        self._unsubscribe()
        log.info("Window closed")
        self.destroy()


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    CalculatorWindow(title=settings.title).mainloop()


if __name__ == "__main__":
    main()
