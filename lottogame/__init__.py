"""Lotto number generator: validated unique random draws for game presets."""

from .drawer import Drawer
from .errors import GenerationFailed, InvalidConfiguration, LottoGameError, UnknownPreset
from .presets import BUILTIN_PRESETS, DEFAULT_REGISTRY, Preset, PresetRegistry
from .types import DrawConfiguration, DrawResult

__all__ = [
    "BUILTIN_PRESETS",
    "DEFAULT_REGISTRY",
    "DrawConfiguration",
    "DrawResult",
    "Drawer",
    "GenerationFailed",
    "InvalidConfiguration",
    "LottoGameError",
    "Preset",
    "PresetRegistry",
    "UnknownPreset",
]
