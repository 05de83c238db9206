"""Tests for the day and size based log file rotation."""

import logging
from pathlib import Path

import pytest

from golemio_mcp.mcp_server.utils.log_files import DailySizeRotatingFileHandler


@pytest.fixture
def make_logger():
    handlers = []

    def _make(handler: DailySizeRotatingFileHandler) -> logging.Logger:
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger = logging.getLogger(f"test_log_files.{len(handlers)}")
        logger.propagate = False
        logger.setLevel(logging.INFO)
        logger.addHandler(handler)
        handlers.append((logger, handler))
        return logger

    yield _make
    for logger, handler in handlers:
        logger.removeHandler(handler)
        handler.close()


class TestDailySizeRotatingFileHandler:
    def test_file_name_carries_the_day(self, tmp_path: Path) -> None:
        handler = DailySizeRotatingFileHandler(str(tmp_path / "golemio-mcp.log"))

        name = Path(handler.baseFilename).name

        assert name.startswith("golemio-mcp-")
        assert name.endswith(".log")
        assert len(name) == len("golemio-mcp-20240115.log")
        handler.close()

    def test_rolls_over_at_size_limit(self, tmp_path: Path, make_logger) -> None:
        logger = make_logger(DailySizeRotatingFileHandler(str(tmp_path / "app.log"), max_bytes=200))

        for i in range(20):
            logger.info(f"measurement {i:02d} " + "x" * 40)

        files = sorted(tmp_path.glob("app-*.log"))
        assert len(files) > 1
        assert files[1].stem.endswith("_001")
        assert all(path.stat().st_size <= 200 for path in files)
        lines = [line for path in files for line in path.read_text().splitlines()]
        assert len(lines) == 20

    def test_rolls_over_when_day_changes(self, tmp_path: Path, make_logger) -> None:
        handler = DailySizeRotatingFileHandler(str(tmp_path / "app.log"))
        logger = make_logger(handler)
        logger.info("first")
        handler._day = "20000101"

        logger.info("second")

        assert handler._day != "20000101"
        assert "20000101" not in handler.baseFilename
        assert Path(handler.baseFilename).read_text() == "first\nsecond\n"

    def test_keeps_newest_files(self, tmp_path: Path, make_logger) -> None:
        for day in ("20000101", "20000102", "20000103"):
            (tmp_path / f"app-{day}.log").write_text("old\n")
        handler = DailySizeRotatingFileHandler(str(tmp_path / "app.log"), backup_count=2)
        logger = make_logger(handler)
        handler._day = "19990101"

        logger.info("today")

        remaining = sorted(path.name for path in tmp_path.glob("app-*.log"))
        assert len(remaining) == 2
        assert "app-20000103.log" in remaining
        assert Path(handler.baseFilename).name in remaining

    def test_zero_max_bytes_disables_size_rollover(self, tmp_path: Path, make_logger) -> None:
        logger = make_logger(DailySizeRotatingFileHandler(str(tmp_path / "app.log"), max_bytes=0))

        for i in range(50):
            logger.info(f"line {i} " + "y" * 40)

        assert len(list(tmp_path.glob("app-*.log"))) == 1
