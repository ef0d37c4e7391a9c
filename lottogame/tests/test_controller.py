import logging
import unittest

from lottogame.controller import GameController
from lottogame.errors import GenerationFailed, InvalidConfiguration
from lottogame.types import DrawConfiguration

from .fakes import FakeView, RecordingDrawer


class GameControllerTests(unittest.TestCase):
    def test_generate_displays_sorted_results(self) -> None:
        view = FakeView()
        controller = GameController(view)

        result = controller.generate("LOTTO")

        self.assertIsNotNone(result)
        self.assertEqual(view.events, ["results"])
        self.assertIs(view.results[0], result)
        self.assertEqual(result.configuration, DrawConfiguration("Lotto", 6, 1, 49))
        self.assertEqual(list(result.values), sorted(set(result.values)))

    def test_unknown_preset_shows_guidance_without_drawing(self) -> None:
        view = FakeView()
        drawer = RecordingDrawer()
        controller = GameController(view, drawer=drawer)

        result = controller.generate("megalotto")

        self.assertIsNone(result)
        self.assertEqual(drawer.calls, [])
        self.assertEqual(view.errors, ["Unknown game type: megalotto"])
        self.assertEqual(view.events, ["error", "available"])

    def test_invalid_configuration_is_rendered(self) -> None:
        view = FakeView()
        drawer = RecordingDrawer(error=InvalidConfiguration("Number count must be greater than 0. Provided: 0"))
        controller = GameController(view, drawer=drawer)

        self.assertIsNone(controller.generate("lotto"))
        self.assertEqual(
            view.errors,
            ["Invalid game configuration: Number count must be greater than 0. Provided: 0"],
        )
        self.assertEqual(view.results, [])

    def test_generation_failure_is_rendered(self) -> None:
        view = FakeView()
        controller = GameController(view, drawer=RecordingDrawer(error=GenerationFailed(6, 600)))

        self.assertIsNone(controller.generate("lotto"))
        self.assertEqual(
            view.errors, ["Generation failed: Failed to generate 6 unique numbers after 600 attempts"]
        )

    def test_unexpected_error_is_logged_and_rendered(self) -> None:
        view = FakeView()
        controller = GameController(view, drawer=RecordingDrawer(error=RuntimeError("boom")))

        with self.assertLogs("lottogame.controller", level=logging.ERROR) as logs:
            result = controller.generate("lotto")

        self.assertIsNone(result)
        self.assertEqual(view.errors, ["An unexpected error occurred: boom"])
        self.assertIn("boom", logs.output[0])

    def test_run_prompts_when_no_game_type_given(self) -> None:
        view = FakeView(answer="minilotto")
        controller = GameController(view)

        result = controller.run()

        self.assertEqual(result.label, "Mini Lotto")
        self.assertEqual(view.events, ["welcome", "available", "prompt", "results"])
        self.assertEqual(view.prompted_with, ["lotto", "multimulti", "minilotto"])

    def test_run_with_game_type_skips_prompt(self) -> None:
        view = FakeView()
        controller = GameController(view)

        result = controller.run("multimulti")

        self.assertEqual(len(result.values), 10)
        self.assertEqual(view.events, ["welcome", "results"])

    def test_run_with_blank_answer_reports_unknown_game(self) -> None:
        view = FakeView(answer="")
        controller = GameController(view)

        self.assertIsNone(controller.run())
        self.assertEqual(view.errors, ["Unknown game type: "])


if __name__ == "__main__":
    unittest.main()
