"""Unique random draws within an inclusive range."""

from __future__ import annotations

import random
from typing import Callable, Set

from .errors import GenerationFailed
from .types import DrawConfiguration, DrawResult, validate_configuration

DEFAULT_ATTEMPTS_FACTOR = 100

RandomFactory = Callable[[], random.Random]


class Drawer:
    """Validate draw configurations and draw sorted unique numbers for them.

    A new generator is obtained from ``rng_factory`` on every call to
    :meth:`draw`; the default ``random.Random`` seeds itself from OS entropy.
    The drawer keeps no per-draw state and can be shared between threads.
    """

    def __init__(
        self,
        *,
        attempts_factor: int = DEFAULT_ATTEMPTS_FACTOR,
        rng_factory: RandomFactory = random.Random,
    ) -> None:
        if attempts_factor < 1:
            raise ValueError("attempts_factor must be at least 1")
        self._attempts_factor = attempts_factor
        self._rng_factory = rng_factory

    @property
    def attempts_factor(self) -> int:
        return self._attempts_factor

    @staticmethod
    def validate(config: DrawConfiguration) -> None:
        validate_configuration(config.label, config.count, config.minimum, config.maximum)

    def draw(self, config: DrawConfiguration) -> DrawResult:
        """Draw ``config.count`` distinct numbers by rejection sampling.

        Raises
        ------
        InvalidConfiguration
            If ``config`` does not describe a drawable game.
        GenerationFailed
            If ``count * attempts_factor`` samples did not yield enough
            distinct numbers.
        """
        self.validate(config)

        rng = self._rng_factory()
        max_attempts = config.count * self._attempts_factor
        drawn: Set[int] = set()
        attempts = 0
        while len(drawn) < config.count and attempts < max_attempts:
            drawn.add(rng.randint(config.minimum, config.maximum))
            attempts += 1

        if len(drawn) < config.count:
            raise GenerationFailed(config.count, max_attempts)
        return DrawResult(configuration=config, values=tuple(sorted(drawn)))
