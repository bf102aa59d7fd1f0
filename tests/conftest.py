"""Pytest configuration for DevCrap Commander."""
import logging

import pytest

MB = 1024 * 1024


def make_file(path, size):
    """Creates a file of exactly `size` bytes, creating parent folders as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.truncate(size)
    return path


@pytest.fixture(autouse=True)
def work_in_tmp_path(tmp_path, monkeypatch):
    # The default match list is relative to the working directory.
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def scenario_tree(tmp_path):
    """root/{a/{1MB file}, b/{c: 6MB file}}"""
    root = tmp_path / "root"
    make_file(root / "a" / "small.bin", 1 * MB)
    make_file(root / "b" / "c", 6 * MB)
    return root
