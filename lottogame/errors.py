from __future__ import annotations

from typing import Sequence


class LottoGameError(Exception):
    """Base class for errors rendered to the user by the game boundary."""


class InvalidConfiguration(LottoGameError, ValueError):
    """Raised when a draw configuration cannot produce a valid draw."""


class GenerationFailed(LottoGameError, RuntimeError):
    def __init__(self, count: int, attempts: int) -> None:
        super().__init__(f"Failed to generate {count} unique numbers after {attempts} attempts")
        self.count = count
        self.attempts = attempts


class UnknownPreset(LottoGameError, LookupError):
    def __init__(self, name: str, available: Sequence[str]) -> None:
        super().__init__(f"Unknown game type: {name}")
        self.name = name
        self.available = tuple(available)
