"""Background worker that scans and copies without freezing the UI."""

from __future__ import annotations

import queue
import threading
from typing import List

from loguru import logger

from ..copier import DRY_RUN_DELAY, run_copy
from ..models import CopyConfig, CopySummary, ProgressEvent, ScanComplete, WorkerEvent
from ..scanner import ScanFailed, scan


class CopyWorker:
    """Run discovery and the copy loop on a daemon thread.

    Events are published in order on :attr:`events`; the last one is always a
    :class:`CopySummary`, after which :attr:`closed` is set.
    """

    def __init__(self, config: CopyConfig, *, delay: float = DRY_RUN_DELAY) -> None:
        self._config = config
        self._delay = delay
        self.events: "queue.Queue[WorkerEvent]" = queue.Queue()
        self.closed = threading.Event()
        self._thread = threading.Thread(target=self.run, name="flatcopy-worker", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)

    def run(self) -> None:
        config = self._config
        try:
            files = scan(config.source_dir, config.extensions, config.recursive)
        except ScanFailed as exc:
            logger.warning("Scan aborted: {}", exc)
            self._publish(CopySummary(copied_count=0, total_count=0, success=False, error=str(exc)))
            return
        except Exception as exc:
            logger.exception("Scan failed")
            self._publish(CopySummary(copied_count=0, total_count=0, success=False, error=str(exc)))
            return

        logger.info("Found {} files to copy from {}", len(files), config.source_dir)
        self._publish(ScanComplete(files=tuple(files)))
        copied = 0
        try:
            for event in run_copy(files, config.dest_dir, dry_run=config.dry_run, delay=self._delay):
                if isinstance(event, ProgressEvent):
                    copied = event.copied_so_far
                self._publish(event)
        except Exception as exc:
            logger.exception("Copy failed")
            self._publish(CopySummary(copied_count=copied, total_count=len(files), success=False, error=str(exc)))

    def _publish(self, event: WorkerEvent) -> None:
        self.events.put(event)
        if isinstance(event, CopySummary):
            self.closed.set()

    def drain(self) -> List[WorkerEvent]:
        """Return every event published so far without blocking."""

        drained: List[WorkerEvent] = []
        while True:
            try:
                drained.append(self.events.get_nowait())
            except queue.Empty:
                return drained


__all__ = ["CopyWorker"]
