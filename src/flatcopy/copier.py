"""Flat copy of candidate files into a single destination folder."""

from __future__ import annotations

import shutil
import time
from pathlib import Path
from typing import Iterator, Sequence, Union

from loguru import logger

from .models import CopySummary, ProgressEvent
from .paths import split_extension

DRY_RUN_DELAY = 0.05
_CHUNK_SIZE = 1024 * 1024


def resolve_collision(dest_path: Path) -> Path:
    """Return ``dest_path`` or the first free ``<stem>_<n><ext>`` sibling."""

    if not dest_path.exists():
        return dest_path
    stem, ext = split_extension(dest_path.name)
    counter = 1
    while True:
        candidate = dest_path.with_name(f"{stem}_{counter}{ext}")
        if not candidate.exists():
            return candidate
        counter += 1


def copy_file(source: Path, dest_dir: Path) -> Path:
    """Copy ``source`` into ``dest_dir`` without its directory structure.

    Returns the path written. Raises ``OSError`` on any I/O failure.
    """

    dest_dir.mkdir(parents=True, exist_ok=True)
    target = resolve_collision(dest_dir / source.name)
    with source.open("rb") as src, target.open("wb") as dst:
        shutil.copyfileobj(src, dst, _CHUNK_SIZE)
    return target


def run_copy(
    files: Sequence[Path],
    dest_dir: Path,
    *,
    dry_run: bool = False,
    delay: float = DRY_RUN_DELAY,
) -> Iterator[Union[ProgressEvent, CopySummary]]:
    """Copy ``files`` one by one, yielding a progress event per file and a final summary.

    Each progress event reports the copied count as it stood before the file
    it names was processed. A failing file is logged and skipped.
    """

    total = len(files)
    copied = 0
    for index, source in enumerate(files):
        yield ProgressEvent(
            file_name=source.name,
            percent_complete=((index + 1) * 100) // total,
            total_count=total,
            copied_so_far=copied,
        )
        if dry_run:
            copied += 1
            logger.info("Dry run: would copy {} to {}", source, dest_dir)
            if delay:
                time.sleep(delay)
            continue
        try:
            target = copy_file(source, dest_dir)
        except OSError as exc:
            logger.warning("Skipping {}: {}", source, exc)
            continue
        copied += 1
        logger.info("Copied {} -> {}", source, target)

    logger.info("Copy finished: {} of {} files", copied, total)
    yield CopySummary(copied_count=copied, total_count=total)


__all__ = ["resolve_collision", "copy_file", "run_copy", "DRY_RUN_DELAY"]
