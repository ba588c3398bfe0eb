"""Shared models for the wizard state and the copy pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union


class Screen(str, Enum):
    """Wizard step currently shown to the user."""

    MENU = "menu"
    SOURCE_SELECT = "source_select"
    DEST_SELECT = "dest_select"
    BROWSE_SOURCE = "browse_source"
    BROWSE_DEST = "browse_dest"
    EXTENSIONS_PRESET = "extensions_preset"
    EXTENSIONS_CUSTOM = "extensions_custom"
    OPTIONS = "options"
    CONFIRM = "confirm"
    COPYING = "copying"
    COMPLETE = "complete"


class Command(str, Enum):
    """Side effect requested by a wizard transition."""

    QUIT = "quit"
    START_COPY = "start_copy"


@dataclass(slots=True)
class CopyConfig:
    """Configuration assembled by the wizard."""

    source_dir: Optional[Path] = None
    dest_dir: Optional[Path] = None
    extensions: List[str] = field(default_factory=list)
    recursive: bool = True
    verbose: bool = False
    dry_run: bool = False

    @property
    def is_ready(self) -> bool:
        return self.source_dir is not None and self.dest_dir is not None


@dataclass(slots=True)
class Shortcut:
    """Bookmarked location offered on the folder selection screens."""

    label: str
    path: Optional[Path] = None


@dataclass(slots=True)
class BrowseContext:
    """Directory currently shown by a browse screen."""

    current_path: Path
    listing: List[str] = field(default_factory=list)


@dataclass(slots=True)
class CopyJob:
    """Progress of the copy operation as seen by the UI."""

    dest_dir: Path
    dry_run: bool = False
    candidate_files: List[Path] = field(default_factory=list)
    total_count: int = 0
    copied_count: int = 0
    current_file_name: str = ""
    percent_complete: int = 0
    finished: bool = False
    success: bool = True
    error: Optional[str] = None

    @property
    def skipped_count(self) -> int:
        return max(self.total_count - self.copied_count, 0)


@dataclass(frozen=True, slots=True)
class ScanComplete:
    """Candidate files found by the discovery step."""

    files: Tuple[Path, ...]


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """Emitted once per processed file, before the file itself is copied."""

    file_name: str
    percent_complete: int
    total_count: int
    copied_so_far: int


@dataclass(frozen=True, slots=True)
class CopySummary:
    """Terminal event of a copy run."""

    copied_count: int
    total_count: int
    success: bool = True
    error: Optional[str] = None


WorkerEvent = Union[ScanComplete, ProgressEvent, CopySummary]


__all__ = [
    "Screen",
    "Command",
    "CopyConfig",
    "Shortcut",
    "BrowseContext",
    "CopyJob",
    "ScanComplete",
    "ProgressEvent",
    "CopySummary",
    "WorkerEvent",
]
