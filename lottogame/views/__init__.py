from .base import GameView
from .console import ConsoleView

__all__ = [
    "ConsoleView",
    "GameView",
]
