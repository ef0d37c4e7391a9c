from __future__ import annotations

import logging
from typing import Optional

from .drawer import Drawer
from .errors import GenerationFailed, InvalidConfiguration, UnknownPreset
from .presets import DEFAULT_REGISTRY, PresetRegistry
from .types import DrawResult
from .views.base import GameView


class GameController:
    """Runs one lookup, draw and display cycle against a view."""

    def __init__(
        self,
        view: GameView,
        registry: Optional[PresetRegistry] = None,
        drawer: Optional[Drawer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._view = view
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._drawer = drawer or Drawer()
        self._logger = logger or logging.getLogger("lottogame.controller")

    @property
    def registry(self) -> PresetRegistry:
        return self._registry

    def run(self, game_type: Optional[str] = None) -> Optional[DrawResult]:
        self._view.display_welcome()
        if game_type is None:
            self._view.display_available_games(self._registry)
            game_type = self._view.prompt_for_game_type(self._registry.names())
        return self.generate(game_type)

    def generate(self, game_type: str) -> Optional[DrawResult]:
        """Draw numbers for ``game_type`` and display them, or display the error.

        Returns the result on success and ``None`` after an error was shown.
        """
        try:
            config = self._registry.lookup(game_type)
            self._logger.info("Drawing %s", config)
            result = self._drawer.draw(config)
        except UnknownPreset as exc:
            self._logger.info("Unknown game type requested: %r", exc.name)
            self._view.display_error(str(exc))
            self._view.display_available_games(self._registry)
            return None
        except InvalidConfiguration as exc:
            self._logger.info("Invalid game configuration: %s", exc)
            self._view.display_error(f"Invalid game configuration: {exc}")
            return None
        except GenerationFailed as exc:
            self._logger.info("Generation failed: %s", exc)
            self._view.display_error(f"Generation failed: {exc}")
            return None
        except Exception as exc:
            self._logger.exception("Unexpected error while drawing %r: %s", game_type, exc)
            self._view.display_error(f"An unexpected error occurred: {exc}")
            return None

        self._logger.debug("Drawn %s -> %s", result.label, result.values)
        self._view.display_results(result)
        return result
