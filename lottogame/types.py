from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidConfiguration


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_configuration(label: str, count: int, minimum: int, maximum: int) -> None:
    if not isinstance(label, str) or not label.strip():
        raise InvalidConfiguration("Game name cannot be null or empty.")
    for field_name, value in (("count", count), ("minimum", minimum), ("maximum", maximum)):
        if not _is_int(value):
            raise InvalidConfiguration(f"{field_name} must be an integer. Provided: {value!r}")

    if count <= 0:
        raise InvalidConfiguration(f"Number count must be greater than 0. Provided: {count}")
    if minimum >= maximum:
        raise InvalidConfiguration(
            f"Minimum range ({minimum}) must be less than maximum range ({maximum})."
        )

    available = maximum - minimum + 1
    if count > available:
        raise InvalidConfiguration(
            f"Cannot generate {count} unique numbers from range {minimum}-{maximum} "
            f"(only {available} numbers available)."
        )


@dataclass(frozen=True)
class DrawConfiguration:
    """Game parameters: how many distinct numbers to draw from ``[minimum, maximum]``."""

    label: str
    count: int
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        validate_configuration(self.label, self.count, self.minimum, self.maximum)

    @property
    def available(self) -> int:
        return self.maximum - self.minimum + 1

    def __str__(self) -> str:
        return f"{self.label} ({self.count} numbers from {self.minimum} to {self.maximum})"


@dataclass(frozen=True)
class DrawResult:
    """Sorted, distinct numbers produced by a single draw."""

    configuration: DrawConfiguration
    values: Tuple[int, ...]

    @property
    def label(self) -> str:
        return self.configuration.label

    def joined(self, separator: str = "  ") -> str:
        return separator.join(str(value) for value in self.values)
