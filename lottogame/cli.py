from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .config import LottoSettings, load_settings
from .controller import GameController
from .drawer import Drawer
from .errors import InvalidConfiguration
from .presets import DEFAULT_REGISTRY, PresetRegistry
from .views.base import GameView
from .views.console import ConsoleView

logger = logging.getLogger("lottogame.cli")


def configure_logging(settings: LottoSettings) -> None:
    level = logging.getLevelName(settings.effective_log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def build_registry(settings: LottoSettings) -> PresetRegistry:
    if settings.presets_file:
        return PresetRegistry.from_file(settings.presets_file)
    return DEFAULT_REGISTRY


def build_controller(settings: LottoSettings, view: GameView, registry: PresetRegistry) -> GameController:
    drawer = Drawer(attempts_factor=settings.attempts_factor)
    return GameController(view, registry=registry, drawer=drawer)


def _boundary_error_message(exc: Exception) -> str:
    if isinstance(exc, InvalidConfiguration):
        logger.info("Could not load presets: %s", exc)
        return f"Invalid game configuration: {exc}"
    logger.exception("Unexpected error: %s", exc)
    return f"An unexpected error occurred: {exc}"


def parse_args(argv: Optional[list[str]] = None, description: str = "Lotto number generator") -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "game_type",
        nargs="?",
        default=None,
        help="Game preset to draw (lotto, multimulti, minilotto). Prompted for when omitted.",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace, view: Optional[GameView] = None) -> int:
    view = view or ConsoleView()
    try:
        settings = load_settings()
    except RuntimeError as exc:
        view.display_error(f"Invalid settings: {exc}")
        return 1
    configure_logging(settings)

    try:
        registry = build_registry(settings)
        controller = build_controller(settings, view, registry)
        result = controller.run(args.game_type)
    except Exception as exc:
        view.display_error(_boundary_error_message(exc))
        return 1
    return 0 if result is not None else 1


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130


def window_main(argv: Optional[list[str]] = None) -> int:
    from .views.window import WindowView

    args = parse_args(argv, description="Lotto number generator window")
    try:
        settings = load_settings()
    except RuntimeError as exc:
        ConsoleView().display_error(f"Invalid settings: {exc}")
        return 1
    configure_logging(settings)

    try:
        registry = build_registry(settings)
    except Exception as exc:
        view = WindowView(DEFAULT_REGISTRY.names(), title=settings.window_title)
        view.display_error(_boundary_error_message(exc))
        view.mainloop()
        return 1

    view = WindowView(registry.names(), title=settings.window_title)
    controller = build_controller(settings, view, registry)
    view.set_generate_handler(controller.generate)
    if args.game_type:
        view.select(args.game_type)
        controller.generate(args.game_type)
    view.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
