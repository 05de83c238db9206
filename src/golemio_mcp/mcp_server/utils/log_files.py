"""Log file rotation for the server's optional file sink.

One file per day, with a numbered continuation file whenever the day's file
reaches the size limit:

    logs/golemio-mcp.log  ->  logs/golemio-mcp-20240115.log
                              logs/golemio-mcp-20240115_001.log
                              logs/golemio-mcp-20240116.log

Only the newest ``backup_count`` files are kept, the active one included.
"""

import logging
from datetime import datetime
from logging.handlers import BaseRotatingHandler
from pathlib import Path
from typing import Optional

DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 30


class DailySizeRotatingFileHandler(BaseRotatingHandler):
    """Rotate at local midnight and whenever the current file reaches ``max_bytes``."""

    def __init__(
        self,
        filename: str,
        max_bytes: int = DEFAULT_MAX_BYTES,
        backup_count: int = DEFAULT_BACKUP_COUNT,
        encoding: Optional[str] = "utf-8",
    ):
        self._base = Path(filename).expanduser().absolute()
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._day = self._today()
        self._sequence = 0
        super().__init__(str(self._current_path()), "a", encoding=encoding, delay=True)

    @staticmethod
    def _today() -> str:
        return datetime.now().strftime("%Y%m%d")

    def _current_path(self) -> Path:
        sequence = f"_{self._sequence:03d}" if self._sequence else ""
        return self._base.with_name(f"{self._base.stem}-{self._day}{sequence}{self._base.suffix}")

    def shouldRollover(self, record: logging.LogRecord) -> bool:
        if self._today() != self._day:
            return True
        if self.max_bytes <= 0:
            return False
        if self.stream is None:
            self.stream = self._open()
        position = self.stream.tell()
        if not position:
            return False
        message = f"{self.format(record)}{self.terminator}"
        return position + len(message.encode(self.encoding or "utf-8")) >= self.max_bytes

    def doRollover(self) -> None:
        if self.stream:
            self.stream.close()
            self.stream = None  # type: ignore[assignment]

        today = self._today()
        if today != self._day:
            self._day = today
            self._sequence = 0
        else:
            self._sequence += 1

        self.baseFilename = str(self._current_path())
        self._remove_old_files()

    def _remove_old_files(self) -> None:
        if self.backup_count <= 0:
            return
        # Date and sequence are zero-padded, so name order is age order
        current = Path(self.baseFilename)
        pattern = f"{self._base.stem}-*{self._base.suffix}"
        older = sorted(path for path in self._base.parent.glob(pattern) if path != current)
        excess = len(older) - (self.backup_count - 1)
        for path in older[: max(excess, 0)]:
            path.unlink(missing_ok=True)
