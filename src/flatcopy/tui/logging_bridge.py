"""Bridge loguru messages into the TUI."""

from __future__ import annotations

from collections import deque
from typing import Deque, List

from loguru import logger


class LogBridge:
    """Keep the most recent loguru messages for the verbose log panel."""

    def __init__(self, level: str = "INFO", maxlen: int = 8) -> None:
        self._lines: Deque[str] = deque(maxlen=maxlen)
        self._sink_id = logger.add(self._sink, level=level, format="{message}")

    def _sink(self, message) -> None:
        text = message.record.get("message", "").rstrip("\n")
        self._lines.append(text)

    def lines(self) -> List[str]:
        return list(self._lines)

    def close(self) -> None:
        logger.remove(self._sink_id)


__all__ = ["LogBridge"]
