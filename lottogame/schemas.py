from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PresetEntry(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    name: str = Field(..., description="Case-insensitive name used to select the preset.")
    label: str = Field(..., description="Human-readable game name shown with the results.")
    count: int = Field(..., description="How many distinct numbers to draw.")
    minimum: int = Field(..., description="Smallest number that can be drawn.")
    maximum: int = Field(..., description="Largest number that can be drawn.")

    @field_validator("name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("Preset name cannot be empty.")
        if any(ch.isspace() for ch in normalized):
            raise ValueError("Preset name cannot contain whitespace.")
        return normalized


class PresetFile(BaseModel):
    presets: List[PresetEntry]

    @field_validator("presets")
    @classmethod
    def validate_unique_names(cls, value: List[PresetEntry]) -> List[PresetEntry]:
        names = [entry.name for entry in value]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate preset names: {', '.join(duplicates)}")
        return value
