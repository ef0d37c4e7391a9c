from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence

from ..types import DrawResult
from .base import GameView

GenerateHandler = Callable[[str], object]


class WindowView(GameView):
    """Minimal desktop form: pick a preset, press Generate, read the numbers."""

    def __init__(
        self,
        names: Sequence[str],
        title: str = "Lotto Game",
        root: Optional[tk.Tk] = None,
    ) -> None:
        self._root = root or tk.Tk()
        self._root.title(title)
        self._handler: Optional[GenerateHandler] = None

        frame = ttk.Frame(self._root, padding=12)
        frame.grid(row=0, column=0, sticky="nsew")

        ttk.Label(frame, text="Game type:").grid(row=0, column=0, sticky="w")
        self._game_type = tk.StringVar(value=names[0] if names else "")
        self._combo = ttk.Combobox(
            frame, textvariable=self._game_type, values=list(names), state="readonly", width=16
        )
        self._combo.grid(row=0, column=1, sticky="ew", padx=(6, 0))
        self._button = ttk.Button(frame, text="Generate", command=self._on_generate)
        self._button.grid(row=0, column=2, padx=(6, 0))

        self._game_name = tk.StringVar()
        self._numbers = tk.StringVar()
        self._error = tk.StringVar()
        ttk.Label(frame, textvariable=self._game_name, font=("TkDefaultFont", 12, "bold")).grid(
            row=1, column=0, columnspan=3, sticky="w", pady=(12, 0)
        )
        ttk.Label(frame, textvariable=self._numbers, font=("TkFixedFont", 14)).grid(
            row=2, column=0, columnspan=3, sticky="w"
        )
        ttk.Label(frame, textvariable=self._error, foreground="red").grid(
            row=3, column=0, columnspan=3, sticky="w", pady=(6, 0)
        )

    @property
    def root(self) -> tk.Tk:
        return self._root

    @property
    def game_name(self) -> str:
        return self._game_name.get()

    @property
    def numbers(self) -> str:
        return self._numbers.get()

    @property
    def error(self) -> str:
        return self._error.get()

    def set_generate_handler(self, handler: GenerateHandler) -> None:
        self._handler = handler

    def select(self, game_type: str) -> None:
        self._game_type.set(game_type.strip().lower())

    def generate(self) -> None:
        self._on_generate()

    def _on_generate(self) -> None:
        if self._handler is not None:
            self._handler(self._game_type.get())

    def display_results(self, result: DrawResult) -> None:
        self._error.set("")
        self._game_name.set(result.label)
        self._numbers.set(result.joined("  "))

    def display_error(self, message: str) -> None:
        self._game_name.set("")
        self._numbers.set("")
        self._error.set(message)

    def mainloop(self) -> None:
        self._root.mainloop()

    def destroy(self) -> None:
        self._root.destroy()
