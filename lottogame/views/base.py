from __future__ import annotations

import abc
from typing import Sequence

from ..presets import PresetRegistry
from ..types import DrawResult


class GameView(abc.ABC):
    """Presentation surface used by the game controller."""

    @abc.abstractmethod
    def display_results(self, result: DrawResult) -> None:
        """Show a successful draw."""

    @abc.abstractmethod
    def display_error(self, message: str) -> None:
        """Show an error so it cannot be mistaken for a result."""

    def display_welcome(self) -> None:
        return None

    def display_available_games(self, registry: PresetRegistry) -> None:
        return None

    def prompt_for_game_type(self, names: Sequence[str]) -> str:
        raise NotImplementedError(f"{type(self).__name__} cannot prompt for a game type")
