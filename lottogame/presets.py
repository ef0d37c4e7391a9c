from __future__ import annotations

import pathlib
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Union

from pydantic import ValidationError

from .errors import InvalidConfiguration, UnknownPreset
from .schemas import PresetFile
from .types import DrawConfiguration


@dataclass(frozen=True)
class Preset:
    name: str
    configuration: DrawConfiguration


BUILTIN_PRESETS = (
    Preset("lotto", DrawConfiguration("Lotto", 6, 1, 49)),
    Preset("multimulti", DrawConfiguration("MultiMulti", 10, 1, 80)),
    Preset("minilotto", DrawConfiguration("Mini Lotto", 5, 1, 42)),
)


def _normalize_name(name: str) -> str:
    return (name or "").strip().lower()


class PresetRegistry:
    """Maps case-insensitive preset names to draw configurations."""

    def __init__(self, presets: Iterable[Preset] = BUILTIN_PRESETS) -> None:
        self._presets: Dict[str, Preset] = {}
        for preset in presets:
            key = _normalize_name(preset.name)
            if key in self._presets:
                raise InvalidConfiguration(f"Duplicate preset name: {key}")
            self._presets[key] = preset

    def __iter__(self) -> Iterator[Preset]:
        return iter(self._presets.values())

    def __len__(self) -> int:
        return len(self._presets)

    def names(self) -> List[str]:
        return list(self._presets)

    def lookup(self, name: str) -> DrawConfiguration:
        preset = self._presets.get(_normalize_name(name))
        if preset is None:
            raise UnknownPreset(name, self.names())
        return preset.configuration

    @staticmethod
    def describe(preset: Preset) -> str:
        config = preset.configuration
        return f"{preset.name + ':':<12}{config.count} numbers from {config.minimum} to {config.maximum}"

    @classmethod
    def from_file(
        cls,
        path: Union[str, pathlib.Path],
        base: Iterable[Preset] = BUILTIN_PRESETS,
    ) -> "PresetRegistry":
        """Build a registry from ``base`` plus the presets listed in a JSON file.

        The file holds ``{"presets": [{"name", "label", "count", "minimum",
        "maximum"}, ...]}``. Any problem with the file, including a name that
        is already registered, is reported as :class:`InvalidConfiguration`.
        """
        preset_path = pathlib.Path(path)
        try:
            raw = preset_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidConfiguration(f"Cannot read presets file {preset_path}: {exc}") from exc

        try:
            parsed = PresetFile.model_validate_json(raw)
        except ValidationError as exc:
            raise InvalidConfiguration(f"Invalid presets file {preset_path}: {exc}") from exc

        extra = [
            Preset(
                entry.name,
                DrawConfiguration(entry.label, entry.count, entry.minimum, entry.maximum),
            )
            for entry in parsed.presets
        ]
        return cls([*base, *extra])


DEFAULT_REGISTRY = PresetRegistry()
