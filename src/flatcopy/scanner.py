"""Discovery of candidate files in the source tree."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from loguru import logger

from .paths import split_extension


class ScanFailed(Exception):
    """Raised when the source directory cannot be walked at all."""

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"Cannot scan {source}: {reason}")
        self.source = source
        self.reason = reason


def _check_root(source: Path) -> None:
    try:
        with os.scandir(source):
            pass
    except FileNotFoundError as exc:
        raise ScanFailed(source, "directory does not exist") from exc
    except NotADirectoryError as exc:
        raise ScanFailed(source, "not a directory") from exc
    except OSError as exc:
        raise ScanFailed(source, exc.strerror or str(exc)) from exc


def scan(source_dir: Path, extensions: Iterable[str], recursive: bool) -> List[Path]:
    """Return the files below ``source_dir`` whose suffix matches ``extensions``.

    Matching is case-insensitive on the text from the last dot in the name,
    so a dotfile such as ``.txt`` counts as a ``.txt`` file. Directories are never
    returned. With ``recursive`` off only the top level is visited. Errors on
    entries below the root are logged and skipped; an unreadable root raises
    :class:`ScanFailed`.
    """

    source = Path(source_dir)
    _check_root(source)
    wanted = {ext.lower() for ext in extensions}

    def _on_error(exc: OSError) -> None:
        logger.warning("Skipping unreadable entry {}: {}", exc.filename, exc.strerror or exc)

    files: List[Path] = []
    for root, dirs, names in os.walk(source, topdown=True, onerror=_on_error, followlinks=False):
        if recursive:
            dirs.sort()
        else:
            dirs[:] = []
        for name in sorted(names):
            if split_extension(name)[1].lower() in wanted:
                files.append(Path(root) / name)

    logger.debug("Scan of {} found {} matching files", source, len(files))
    return files


__all__ = ["scan", "ScanFailed"]
