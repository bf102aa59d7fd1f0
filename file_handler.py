# file_handler.py
# Walks a directory tree, sizes every directory, and collects the ones over the threshold.
#
# Known limitation: symlinks are followed when sizing a directory, and nothing
# detects link cycles. A tree with a cycle keeps growing the path until the OS
# refuses it.

import os
import logging
import stat
import time

from config import BYTES_PER_MB
from data_models import DirectoryMatch
from match_list import save_matches

def display_path(text):
    """
    Returns a path (or a message containing paths) that can always be printed
    or logged. Undecodable filename bytes show up as \\xNN escapes; the path
    used on disk is left alone.
    """
    try:
        return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")

def get_directory_size(directory):
    """
    Returns the total size in bytes of all files below a directory.
    Any entry that cannot be listed or stat'ed aborts the whole computation.
    """
    total = 0
    pending = [directory]
    while pending:
        current = pending.pop()
        for name in os.listdir(current):
            entry_path = os.path.join(current, name)
            # os.stat follows links, so a linked directory is sized as well
            stat_info = os.stat(entry_path)
            if stat.S_ISDIR(stat_info.st_mode):
                pending.append(entry_path)
            else:
                total += stat_info.st_size
    return total

def _list_subdirectories(directory):
    """Returns the subdirectories of a directory in listing order, without following links."""
    with os.scandir(directory) as entries:
        return [entry.path for entry in entries if entry.is_dir(follow_symlinks=False)]

def search_directories(directory, threshold, save_path=None, progress_callback=None, match_callback=None):
    """
    Evaluates every directory below `directory` and returns those whose total
    size in MB is strictly greater than `threshold`.

    Matches come back in pre-order: a directory's own match is listed before
    the matches of anything inside it, and siblings keep the order the OS
    lists them in. A matching directory is still searched further.

    `progress_callback(path)` is called for each evaluated directory and
    `match_callback(match)` for each match. If `save_path` is set, the full
    list is written there once the whole tree has been walked.
    """
    start_time = time.monotonic()
    logging.info(f"Starting search of {display_path(str(directory))} for directories larger than {threshold} MB")
    found_directories = []
    scanned_count = 0

    # Stack of directories still to evaluate; reversed so the first listed sibling pops first
    pending = list(reversed(_list_subdirectories(directory)))
    while pending:
        current = pending.pop()
        size_in_mb = get_directory_size(current) / BYTES_PER_MB
        scanned_count += 1
        logging.debug(f"Scanned {display_path(current)}: {size_in_mb:.2f} MB")
        if progress_callback:
            progress_callback(current)

        if size_in_mb > threshold:
            match = DirectoryMatch(path=current, size=size_in_mb)
            found_directories.append(match)
            logging.info(f"Match found: {display_path(current)} ({size_in_mb:.2f} MB)")
            if match_callback:
                match_callback(match)

        pending.extend(reversed(_list_subdirectories(current)))

    search_duration = time.monotonic() - start_time
    logging.info(
        f"Search of {scanned_count} directories completed in {search_duration:.2f} seconds "
        f"with {len(found_directories)} matches."
    )

    if save_path is not None:
        save_matches(found_directories, save_path)

    return found_directories
