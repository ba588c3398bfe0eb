"""Path and extension helpers used across the wizard and the copy pipeline."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

from .models import Shortcut

DISPLAY_MAX_LEN = 50
NOT_SELECTED = "not selected"
BROWSE_LABEL = "📂 Browse folders..."
BACK_LABEL = "🔙 Back"

_SEPARATORS = re.compile(r"[,\s]+")


def normalize_extension_list(raw: str) -> List[str]:
    """Parse user input such as ``"jpg, .PNG pdf"`` into ``[".jpg", ".png", ".pdf"]``.

    Tokens are separated by commas and/or whitespace. Empty tokens are dropped,
    a leading dot is added when missing and everything is lower-cased.
    Duplicates are kept in input order.
    """

    extensions: List[str] = []
    for token in _SEPARATORS.split(raw or ""):
        token = token.strip()
        if not token:
            continue
        if not token.startswith("."):
            token = "." + token
        extensions.append(token.lower())
    return extensions


def split_extension(name: str) -> Tuple[str, str]:
    """Split a file name at its last dot, so ``".txt"`` has extension ``".txt"`` and an empty stem."""

    dot = name.rfind(".")
    if dot < 0:
        return name, ""
    return name[:dot], name[dot:]


def list_subdirectories(path: Path) -> List[str]:
    """Return the sorted names of visible subdirectories of ``path``.

    Unreadable directories yield an empty list.
    """

    try:
        with os.scandir(path) as entries:
            names = [
                entry.name
                for entry in entries
                if not entry.name.startswith(".") and entry.is_dir()
            ]
    except OSError as exc:
        logger.debug("Unable to list {}: {}", path, exc)
        return []
    return sorted(names)


def truncate_for_display(path: Optional[os.PathLike | str], max_len: int = DISPLAY_MAX_LEN) -> str:
    if path is None or str(path) == "":
        return NOT_SELECTED
    text = str(path)
    if len(text) <= max_len:
        return text
    return "..." + text[-(max_len - 3):]


def bool_display(value: bool) -> str:
    return "✅ Yes" if value else "❌ No"


def is_filesystem_root(path: Path) -> bool:
    return path.parent == path


def build_shortcuts(home: Path, cwd: Path) -> Tuple[Shortcut, ...]:
    """Bookmarks shown on the folder selection screens.

    The last two entries carry no path: they are the browse and back rows.
    """

    return (
        Shortcut("📁 Current folder", cwd),
        Shortcut("🏠 Home folder", home),
        Shortcut("🖥️  Desktop", home / "Desktop"),
        Shortcut("📁 Documents", home / "Documents"),
        Shortcut("📁 Downloads", home / "Downloads"),
        Shortcut("📸 Pictures", home / "Pictures"),
        Shortcut("🎵 Music", home / "Music"),
        Shortcut("🎬 Videos", home / "Videos"),
        Shortcut(BROWSE_LABEL),
        Shortcut(BACK_LABEL),
    )


__all__ = [
    "normalize_extension_list",
    "split_extension",
    "list_subdirectories",
    "truncate_for_display",
    "bool_display",
    "is_filesystem_root",
    "build_shortcuts",
    "BROWSE_LABEL",
    "BACK_LABEL",
    "NOT_SELECTED",
]
