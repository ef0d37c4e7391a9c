from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from ..presets import PresetRegistry
from ..types import DrawResult
from .base import GameView


class ConsoleView(GameView):
    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self._out = stdout or sys.stdout
        self._err = stderr or sys.stderr
        self._in = stdin or sys.stdin

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def display_welcome(self) -> None:
        self._print("=== Lotto Game Application ===")
        self._print()

    def display_available_games(self, registry: PresetRegistry) -> None:
        self._print("Available games:")
        for preset in registry:
            self._print(f"  - {registry.describe(preset)}")
        self._print()

    def prompt_for_game_type(self, names: Sequence[str]) -> str:
        self._print(f"Enter game type ({', '.join(names)}):")
        self._out.flush()
        line = self._in.readline()
        return line.strip().lower()

    def display_results(self, result: DrawResult) -> None:
        self._print(result.label)
        self._print(result.joined(" "))

    def display_error(self, message: str) -> None:
        print(f"Error: {message}", file=self._err)
