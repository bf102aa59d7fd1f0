"""Tests for logger setup and the run summary log."""
import logging

from config import LOG_FILENAME, LOG_ROTATE_BYTES, PERFORMANCE_LOG_FILENAME
from logger_setup import setup_global_logger
from performance_logger import PerformanceLogger


def test_logger_writes_to_file(tmp_path):
    log_dir = tmp_path / "nested" / "logs"

    logger = setup_global_logger(log_dir)
    logging.info("hello from the test")

    text = (log_dir / LOG_FILENAME).read_text(encoding="utf-8")
    assert "Logger initialized." in text
    assert "INFO - test_logging.test_logger_writes_to_file: hello from the test" in text
    assert logger.level == logging.INFO
    assert not any(type(handler) is logging.StreamHandler for handler in logger.handlers)


def test_verbose_adds_debug_stream_handler(tmp_path):
    logger = setup_global_logger(tmp_path, verbose=True)

    assert logger.level == logging.DEBUG
    assert any(type(handler) is logging.StreamHandler for handler in logger.handlers)


def test_large_log_is_rotated(tmp_path):
    log_path = tmp_path / LOG_FILENAME
    with open(log_path, "wb") as f:
        f.truncate(LOG_ROTATE_BYTES + 1)

    setup_global_logger(tmp_path)

    assert (tmp_path / (LOG_FILENAME + ".old")).stat().st_size == LOG_ROTATE_BYTES + 1
    assert log_path.stat().st_size < LOG_ROTATE_BYTES


def test_performance_log_has_header_once(tmp_path):
    PerformanceLogger(tmp_path)
    PerformanceLogger(tmp_path)

    text = (tmp_path / PERFORMANCE_LOG_FILENAME).read_text(encoding="utf-8")
    assert text.count("--- Performance Log for DevCrap Commander ---") == 1


def test_search_run_summary(tmp_path):
    perf = PerformanceLogger(tmp_path)

    perf.log_run({
        "timestamp": "2026-01-01 12:00:00", "command": "search", "status": "completed",
        "folder": "/data", "threshold": 5.0, "saved_to": None,
        "directories_scanned": 42, "matches_found": 3, "total_time": 1.5,
    })

    text = perf.log_path.read_text(encoding="utf-8")
    assert "--- Run: 2026-01-01 12:00:00 ---" in text
    assert "Folder: /data" in text
    assert "Saved to: not saved" in text
    assert "Directories scanned: 42" in text
    assert "Total time: 1.50 seconds" in text


def test_remove_run_summary_samples_failures(tmp_path):
    perf = PerformanceLogger(tmp_path)
    failed = [f"/data/dir{i}" for i in range(25)]

    perf.log_run({
        "timestamp": "now", "command": "remove", "status": "completed with errors",
        "match_list": "foundDirectories.json", "directories_listed": 30,
        "directories_removed": 5, "removals_failed": 25, "failed_paths": failed,
    })

    text = perf.log_path.read_text(encoding="utf-8")
    assert "Removals failed: 25" in text
    assert "  - /data/dir19\n" in text
    assert "/data/dir20\n" not in text
    assert "... and 5 more." in text
