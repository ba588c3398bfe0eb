"""Configuration loading and validation for flatcopy."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .models import CopyConfig
from .paths import normalize_extension_list


class ExtensionPreset(BaseModel):
    """Named group of extensions offered as a one-step selection."""

    name: str
    label: str
    extensions: List[str]

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        normalized = normalize_extension_list(", ".join(value))
        if not normalized:
            raise ValueError("A preset needs at least one extension")
        return normalized


def _default_presets() -> List[ExtensionPreset]:
    return [
        ExtensionPreset(name="images", label="🖼️  Images", extensions=[".jpg", ".png", ".gif", ".bmp"]),
        ExtensionPreset(name="documents", label="📄 Documents", extensions=[".pdf", ".doc", ".docx", ".txt"]),
        ExtensionPreset(name="video", label="🎬 Video", extensions=[".mp4", ".avi", ".mkv", ".mov"]),
        ExtensionPreset(name="audio", label="🎵 Audio", extensions=[".mp3", ".wav", ".flac", ".m4a"]),
        ExtensionPreset(name="archives", label="📦 Archives", extensions=[".zip", ".rar", ".7z", ".tar"]),
    ]


class Settings(BaseModel):
    """Session defaults, optionally read from a YAML file."""

    extensions: List[str] = Field(default_factory=lambda: [".jpg", ".png", ".pdf"])
    recursive: bool = True
    verbose: bool = False
    dry_run: bool = False
    dry_run_delay: float = Field(default=0.05, ge=0)
    log_file: Optional[Path] = None
    presets: List[ExtensionPreset] = Field(default_factory=_default_presets)

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        return normalize_extension_list(", ".join(value))

    def initial_copy_config(self) -> CopyConfig:
        return CopyConfig(
            extensions=list(self.extensions),
            recursive=self.recursive,
            verbose=self.verbose,
            dry_run=self.dry_run,
        )


class ConfigError(Exception):
    """Raised when a configuration file is invalid."""


def load_settings(path: Path | None) -> Settings:
    """Load settings from a YAML file, or return the defaults when no path is given."""

    if path is None:
        return Settings()
    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


__all__ = [
    "ExtensionPreset",
    "Settings",
    "ConfigError",
    "load_settings",
]
